"""Outcome of running an authentication handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .principal import Principal


@dataclass(frozen=True)
class AuthenticationTicket:
    """Principal plus the scheme that issued it."""

    principal: Principal
    scheme: str
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AuthenticateResult:
    """
    Result of an authenticate call.

    Use the ``success``, ``no_result`` and ``fail`` constructors rather than
    building instances directly.
    """

    ticket: AuthenticationTicket | None = None
    failure: Exception | None = None
    none: bool = False

    @classmethod
    def success(cls, ticket: AuthenticationTicket) -> AuthenticateResult:
        if ticket is None:
            raise ValueError("ticket is required for a successful result")
        return cls(ticket=ticket)

    @classmethod
    def no_result(cls) -> AuthenticateResult:
        """No information was available for the scheme (e.g. missing cookie)."""
        return cls(none=True)

    @classmethod
    def fail(cls, failure: Exception | str) -> AuthenticateResult:
        if isinstance(failure, str):
            failure = Exception(failure)
        return cls(failure=failure)

    @property
    def succeeded(self) -> bool:
        return self.ticket is not None

    @property
    def principal(self) -> Principal | None:
        return self.ticket.principal if self.ticket else None
