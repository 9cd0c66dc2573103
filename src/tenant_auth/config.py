"""
Configuration management for tenant authentication
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Schemes: name -> "module:Class" handler path
    schemes: dict[str, str] = {}
    default_scheme: str | None = None
    default_authenticate_scheme: str | None = None

    # Tenant Settings
    # Per-tenant scheme overrides, same shape as `schemes`
    tenant_schemes: dict[str, dict[str, str]] = {}
    default_tenant_slug: str = "default"

    # Logging
    debug: bool = False
    log_level: str | None = None  # overrides the level implied by `debug`

    class Config:
        env_file = ".env"
        env_prefix = "TENANT_AUTH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
