"""
Authentication scheme registry.

Schemes are registered by name together with the handler class that
implements them. Whether a scheme can intercept whole requests is read from
the handler class once, when the scheme is added.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .errors import SchemeAlreadyExistsError
from .logging import get_logger

if TYPE_CHECKING:
    from .handlers import AuthenticationHandler

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthenticationScheme:
    """A named authentication strategy and the handler class backing it."""

    name: str
    handler_class: type[AuthenticationHandler]
    display_name: str | None = None

    @property
    def handles_requests(self) -> bool:
        return bool(getattr(self.handler_class, "handles_requests", False))


class SchemeRegistry(Protocol):
    """Read side of a scheme registry as consumed by the middleware."""

    async def get_request_handler_schemes(self) -> list[AuthenticationScheme]:
        """Schemes able to fully handle a request, in registration order."""
        ...

    async def get_default_authenticate_scheme(self) -> AuthenticationScheme | None:
        """Scheme used to read an existing identity, or None if not configured."""
        ...

    async def get_scheme(self, name: str) -> AuthenticationScheme | None:
        ...


class AuthenticationSchemeProvider:
    """
    In-memory scheme registry.

    The default authenticate scheme falls back from
    ``default_authenticate_scheme`` to ``default_scheme`` and finally to the
    only registered scheme when exactly one exists.
    """

    def __init__(
        self,
        schemes: list[AuthenticationScheme] | None = None,
        default_scheme: str | None = None,
        default_authenticate_scheme: str | None = None,
    ):
        self._schemes: dict[str, AuthenticationScheme] = {}
        self._request_handlers: list[AuthenticationScheme] = []
        self.default_scheme = default_scheme
        self.default_authenticate_scheme = default_authenticate_scheme

        for scheme in schemes or []:
            self.add_scheme(scheme)

    def add_scheme(self, scheme: AuthenticationScheme) -> None:
        """
        Register a scheme.

        Raises:
            SchemeAlreadyExistsError: If a scheme with the same name exists
        """
        if scheme.name in self._schemes:
            raise SchemeAlreadyExistsError(f"Scheme already exists: {scheme.name}")

        self._schemes[scheme.name] = scheme
        if scheme.handles_requests:
            self._request_handlers.append(scheme)

        logger.debug(
            "Registered authentication scheme",
            scheme=scheme.name,
            handles_requests=scheme.handles_requests,
        )

    def try_add_scheme(self, scheme: AuthenticationScheme) -> bool:
        if scheme.name in self._schemes:
            return False
        self.add_scheme(scheme)
        return True

    def remove_scheme(self, name: str) -> bool:
        scheme = self._schemes.pop(name, None)
        if scheme is None:
            return False
        self._request_handlers = [s for s in self._request_handlers if s.name != name]
        return True

    async def get_scheme(self, name: str) -> AuthenticationScheme | None:
        return self._schemes.get(name)

    async def get_all_schemes(self) -> list[AuthenticationScheme]:
        return list(self._schemes.values())

    async def get_request_handler_schemes(self) -> list[AuthenticationScheme]:
        return list(self._request_handlers)

    async def get_default_authenticate_scheme(self) -> AuthenticationScheme | None:
        name = self.default_authenticate_scheme or self.default_scheme
        if name is not None:
            return self._schemes.get(name)

        if len(self._schemes) == 1:
            return next(iter(self._schemes.values()))
        return None

    def __len__(self) -> int:
        return len(self._schemes)

    def __contains__(self, name: str) -> bool:
        return name in self._schemes
