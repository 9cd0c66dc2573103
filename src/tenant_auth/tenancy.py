"""Per-tenant scheme registries."""

from __future__ import annotations

from .logging import get_logger
from .schemes import AuthenticationSchemeProvider

logger = get_logger(__name__)


class TenantSchemeProviders:
    """
    Maps tenant slugs to their scheme registries.

    Requests without a tenant, or for a tenant with no registry of its own,
    use the fallback registry. Registries may be swapped at runtime; callers
    resolve again on every request.
    """

    def __init__(
        self,
        fallback: AuthenticationSchemeProvider,
        providers: dict[str, AuthenticationSchemeProvider] | None = None,
    ):
        self.fallback = fallback
        self._providers: dict[str, AuthenticationSchemeProvider] = dict(providers or {})

    def register(self, tenant: str, provider: AuthenticationSchemeProvider) -> None:
        logger.info("Registering tenant scheme provider", tenant=tenant, schemes=len(provider))
        self._providers[tenant] = provider

    def unregister(self, tenant: str) -> bool:
        return self._providers.pop(tenant, None) is not None

    def resolve(self, tenant: str | None) -> AuthenticationSchemeProvider:
        if tenant is None:
            return self.fallback
        return self._providers.get(tenant, self.fallback)

    def list_tenants(self) -> list[str]:
        return list(self._providers.keys())

    def __contains__(self, tenant: str) -> bool:
        return tenant in self._providers
