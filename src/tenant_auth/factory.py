"""Build scheme registries from configuration."""

from __future__ import annotations

from importlib import import_module

from .config import settings
from .errors import SchemeConfigurationError
from .handlers import AuthenticationHandler
from .logging import get_logger
from .schemes import AuthenticationScheme, AuthenticationSchemeProvider
from .tenancy import TenantSchemeProviders

logger = get_logger(__name__)


def resolve_handler_class(qualified_name: str) -> type[AuthenticationHandler]:
    """Import a handler class from ``module:Class`` or ``module.Class``."""
    if ":" in qualified_name:
        module_name, class_name = qualified_name.split(":", 1)
    else:
        module_name, _, class_name = qualified_name.rpartition(".")

    if not module_name or not class_name:
        raise SchemeConfigurationError(f"Invalid handler path: {qualified_name}")

    try:
        module = import_module(module_name)
    except ImportError as e:
        raise SchemeConfigurationError(f"Cannot import handler module: {qualified_name}") from e

    cls = getattr(module, class_name, None)
    if not isinstance(cls, type) or not issubclass(cls, AuthenticationHandler):
        raise SchemeConfigurationError(
            f"Resolved object is not an AuthenticationHandler subclass: {qualified_name}"
        )
    return cls


def build_scheme_provider(
    schemes: dict[str, str],
    default_scheme: str | None = None,
    default_authenticate_scheme: str | None = None,
) -> AuthenticationSchemeProvider:
    """Create a registry from a mapping of scheme name to handler path."""
    provider = AuthenticationSchemeProvider(
        default_scheme=default_scheme,
        default_authenticate_scheme=default_authenticate_scheme,
    )
    for name, handler_path in schemes.items():
        provider.add_scheme(
            AuthenticationScheme(name=name, handler_class=resolve_handler_class(handler_path))
        )
    return provider


def build_tenant_scheme_providers() -> TenantSchemeProviders:
    """Create the tenant registries described by the current settings."""
    fallback = build_scheme_provider(
        settings.schemes,
        default_scheme=settings.default_scheme,
        default_authenticate_scheme=settings.default_authenticate_scheme,
    )
    tenants = TenantSchemeProviders(fallback)

    for tenant, schemes in settings.tenant_schemes.items():
        tenants.register(
            tenant,
            build_scheme_provider(
                schemes,
                default_scheme=settings.default_scheme,
                default_authenticate_scheme=settings.default_authenticate_scheme,
            ),
        )

    # The default tenant is served by the fallback unless it was configured explicitly
    if settings.default_tenant_slug not in tenants:
        tenants.register(settings.default_tenant_slug, fallback)

    logger.info(
        "Scheme providers configured",
        schemes=list(settings.schemes.keys()),
        tenants=tenants.list_tenants(),
    )
    return tenants
