"""Authentication service that runs a named scheme's handler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .errors import SchemeNotFoundError
from .logging import get_logger
from .results import AuthenticateResult

if TYPE_CHECKING:
    from .context import RequestContext
    from .handlers import HandlerProvider
    from .schemes import SchemeRegistry

logger = get_logger(__name__)


class AuthenticationService(Protocol):
    async def authenticate(
        self, context: RequestContext, scheme_name: str | None
    ) -> AuthenticateResult | None:
        ...


class SchemeAuthenticationService:
    """Default ``AuthenticationService`` backed by a registry and handler provider."""

    def __init__(self, schemes: SchemeRegistry, handlers: HandlerProvider):
        self.schemes = schemes
        self.handlers = handlers

    async def authenticate(
        self, context: RequestContext, scheme_name: str | None = None
    ) -> AuthenticateResult:
        """
        Authenticate the request with the named scheme.

        Args:
            context: Current request context
            scheme_name: Scheme to run; the registry default when None

        Returns:
            The handler's AuthenticateResult

        Raises:
            SchemeNotFoundError: If no scheme was given and there is no default,
                or the named scheme has no handler
        """
        if scheme_name is None:
            default = await self.schemes.get_default_authenticate_scheme()
            if default is None:
                raise SchemeNotFoundError(
                    "No authentication scheme was specified and no default is configured"
                )
            scheme_name = default.name

        handler = await self.handlers.get_handler(context, scheme_name)
        if handler is None:
            raise SchemeNotFoundError(f"No authentication handler is registered for: {scheme_name}")

        result = await handler.authenticate()
        if result.succeeded:
            logger.debug("Authentication succeeded", scheme=scheme_name, tenant=context.tenant)
        elif result.failure is not None:
            logger.info(
                "Authentication failed",
                scheme=scheme_name,
                tenant=context.tenant,
                error=str(result.failure),
            )
        return result
