"""
Shared pytest fixtures and fake scheme handlers.
"""

import pytest

from tenant_auth.context import RequestContext
from tenant_auth.handlers import AuthenticationHandler, RequestAuthenticationHandler
from tenant_auth.principal import Identity, Principal
from tenant_auth.results import AuthenticateResult, AuthenticationTicket

ADMIN = Principal([Identity("cookie", {"name": "Admin", "sub": "admin-1"})])


class CookieHandler(AuthenticationHandler):
    """Authenticates every request as the admin user."""

    async def authenticate(self) -> AuthenticateResult:
        return AuthenticateResult.success(AuthenticationTicket(ADMIN, self.scheme.name))


class NoCookieHandler(AuthenticationHandler):
    pass


class DecliningCallbackHandler(RequestAuthenticationHandler):
    async def handle_request(self) -> bool:
        return False


class CallbackHandler(RequestAuthenticationHandler):
    """Claims requests to /signin-callback and answers them itself."""

    async def handle_request(self) -> bool:
        if self.context.path != "/signin-callback":
            return False

        if self.context.send is not None:
            await self.context.send(
                {"type": "http.response.start", "status": 302, "headers": [(b"location", b"/")]}
            )
            await self.context.send({"type": "http.response.body", "body": b""})
        return True


def make_scope(path: str = "/", root_path: str = "", tenant: str | None = None) -> dict:
    scope = {"type": "http", "method": "GET", "path": path, "root_path": root_path, "headers": []}
    if tenant is not None:
        scope["state"] = {"tenant_slug": tenant}
    return scope


@pytest.fixture
def context():
    return RequestContext(make_scope("/orders", root_path="/shop"))
