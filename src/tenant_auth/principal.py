"""Identity types attached to a request once authentication succeeds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Identity:
    """A single identity asserted by one authentication scheme."""

    authentication_type: str | None = None
    claims: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        """An identity is authenticated when a scheme vouched for it."""
        return bool(self.authentication_type)

    @property
    def name(self) -> str | None:
        return self.claims.get("name") or self.claims.get("sub")


@dataclass
class Principal:
    """The user (or service) on whose behalf a request runs."""

    identities: list[Identity] = field(default_factory=list)

    @classmethod
    def anonymous(cls) -> Principal:
        """Principal with no identities, the default for every request."""
        return cls()

    @property
    def identity(self) -> Identity | None:
        """The first identity, if any."""
        return self.identities[0] if self.identities else None

    @property
    def is_authenticated(self) -> bool:
        return any(identity.is_authenticated for identity in self.identities)

    # Starlette's request.user protocol
    @property
    def display_name(self) -> str:
        identity = self.identity
        return (identity.name if identity else None) or ""

    def find_claim(self, claim_type: str) -> Any:
        """Return the first value of a claim across all identities."""
        for identity in self.identities:
            if claim_type in identity.claims:
                return identity.claims[claim_type]
        return None
