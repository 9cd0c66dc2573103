"""Authentication handler base classes and the per-request handler provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

from .logging import get_logger
from .results import AuthenticateResult

if TYPE_CHECKING:
    from .context import RequestContext
    from .schemes import AuthenticationScheme, SchemeRegistry

logger = get_logger(__name__)


class AuthenticationHandler:
    """
    Base class for scheme handlers.

    A handler instance is bound to one scheme and one request through
    ``initialize``. Subclasses implement ``authenticate``.
    """

    handles_requests: ClassVar[bool] = False

    def __init__(self) -> None:
        self.scheme: AuthenticationScheme | None = None
        self.context: RequestContext | None = None

    async def initialize(self, scheme: AuthenticationScheme, context: RequestContext) -> None:
        self.scheme = scheme
        self.context = context

    async def authenticate(self) -> AuthenticateResult:
        return AuthenticateResult.no_result()


class RequestAuthenticationHandler(AuthenticationHandler):
    """
    Handler that may intercept and complete a request on its own, such as an
    external login callback. A handler that returns True from
    ``handle_request`` must have written the response itself.
    """

    handles_requests: ClassVar[bool] = True

    async def handle_request(self) -> bool:
        return False


class HandlerProvider(Protocol):
    async def get_handler(
        self, context: RequestContext, scheme_name: str
    ) -> AuthenticationHandler | None:
        """Return a handler bound to the request for the named scheme."""
        ...


class AuthenticationHandlerProvider:
    """
    Request-scoped handler provider.

    Create one per request; handlers are cached only for that request.
    """

    def __init__(self, schemes: SchemeRegistry):
        self.schemes = schemes
        self._handlers: dict[str, AuthenticationHandler] = {}

    async def get_handler(
        self, context: RequestContext, scheme_name: str
    ) -> AuthenticationHandler | None:
        if scheme_name in self._handlers:
            return self._handlers[scheme_name]

        scheme = await self.schemes.get_scheme(scheme_name)
        if scheme is None:
            logger.debug("No scheme registered for handler lookup", scheme=scheme_name)
            return None

        handler = scheme.handler_class()
        await handler.initialize(scheme, context)
        self._handlers[scheme_name] = handler
        return handler
