"""ASGI integration for the authentication resolution middleware."""

from __future__ import annotations

from typing import Any

from starlette.types import ASGIApp, Receive, Scope, Send

from .config import settings
from .context import RequestContext
from .factory import build_tenant_scheme_providers
from .handlers import AuthenticationHandlerProvider
from .logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)
from .middleware import TenantAuthMiddleware
from .service import SchemeAuthenticationService
from .tenancy import TenantSchemeProviders

logger = get_logger(__name__)


class MultiTenantAuthenticationMiddleware:
    """
    Pure ASGI middleware resolving authentication per tenant.

    The tenant's scheme registry is resolved on every request and a fresh
    handler provider and authentication service are created for it. The
    resolved principal is exposed as ``scope["user"]``.
    """

    def __init__(self, app: ASGIApp, tenants: TenantSchemeProviders | None = None):
        self.app = app
        self.tenants = tenants if tenants is not None else build_tenant_scheme_providers()
        self.middleware = TenantAuthMiddleware(self._call_next)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        context = RequestContext(scope, receive, send)
        schemes = self.tenants.resolve(context.tenant)
        handlers = AuthenticationHandlerProvider(schemes)
        authentication = SchemeAuthenticationService(schemes, handlers)

        set_request_context(tenant=context.tenant)
        try:
            await self.middleware.invoke(context, schemes, handlers, authentication)
        finally:
            clear_request_context()

    async def _call_next(self, context: RequestContext) -> Any:
        await self.app(context.scope, context.receive, context.send)


def use_multi_tenant_authentication(app: Any) -> Any:
    """Install tenant authentication resolution as a stage of ``app``'s pipeline."""
    configure_logging(debug=settings.debug, log_level=settings.log_level)
    app.add_middleware(MultiTenantAuthenticationMiddleware)
    return app
