"""Authentication resolution middleware."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from .context import AuthenticationFeature, RequestContext
from .errors import InvalidArgumentError
from .handlers import HandlerProvider
from .logging import get_logger
from .schemes import SchemeRegistry
from .service import AuthenticationService

logger = get_logger(__name__)

NextStage = Callable[[RequestContext], Awaitable[Any]]


class RequestHandling(Enum):
    """Outcome of offering the request to request-handler schemes."""

    TERMINATED = "terminated"
    CONTINUE = "continue"


class TenantAuthMiddleware:
    """
    Resolve authentication for a request before handing it on.

    For every request this:
    1. Records the original path and path base as an AuthenticationFeature
    2. Offers the request to each request-handler scheme, in registry order;
       the first one that handles it ends processing
    3. Otherwise authenticates with the default scheme and, on success,
       sets the principal on the context
    4. Calls the next stage
    """

    def __init__(self, next_stage: NextStage):
        if not callable(next_stage):
            raise InvalidArgumentError("next_stage is required")
        self._next = next_stage

    async def invoke(
        self,
        context: RequestContext,
        schemes: SchemeRegistry,
        handlers: HandlerProvider,
        authentication: AuthenticationService,
    ) -> Any:
        context.features.set(
            AuthenticationFeature,
            AuthenticationFeature(
                original_path=context.path,
                original_path_base=context.path_base,
            ),
        )

        outcome = await self.run_request_handlers(context, schemes, handlers)
        if outcome is RequestHandling.TERMINATED:
            return None

        default_scheme = await schemes.get_default_authenticate_scheme()
        if default_scheme is None:
            logger.debug("No default authenticate scheme configured", path=context.path)
        else:
            result = await authentication.authenticate(context, default_scheme.name)
            if result is not None and result.principal is not None:
                context.principal = result.principal
            else:
                logger.debug(
                    "Default scheme produced no principal",
                    scheme=default_scheme.name,
                    path=context.path,
                )

        return await self._next(context)

    async def run_request_handlers(
        self,
        context: RequestContext,
        schemes: SchemeRegistry,
        handlers: HandlerProvider,
    ) -> RequestHandling:
        """Give each request-handler scheme, one at a time, a chance to handle the request."""
        for scheme in await schemes.get_request_handler_schemes():
            handler = await handlers.get_handler(context, scheme.name)
            if handler is None or not handler.handles_requests:
                continue

            if await handler.handle_request():
                logger.debug("Request handled by scheme", scheme=scheme.name, path=context.path)
                return RequestHandling.TERMINATED

        return RequestHandling.CONTINUE
