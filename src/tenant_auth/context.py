"""Request context shared by the middleware and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from starlette.types import Receive, Scope, Send

from .principal import Principal

T = TypeVar("T")

FEATURES_SCOPE_KEY = "tenant_auth.features"


@dataclass(frozen=True)
class AuthenticationFeature:
    """Path information captured before any stage rewrites the request."""

    original_path: str
    original_path_base: str


class FeatureCollection:
    """Request-scoped features keyed by type."""

    def __init__(self) -> None:
        self._features: dict[type, Any] = {}

    def get(self, key: type[T]) -> T | None:
        return self._features.get(key)

    def set(self, key: type[T], value: T | None) -> None:
        """Store a feature, or remove it when ``value`` is None."""
        if value is None:
            self._features.pop(key, None)
        else:
            self._features[key] = value

    def __contains__(self, key: type) -> bool:
        return key in self._features

    def __len__(self) -> int:
        return len(self._features)


class RequestContext:
    """
    Mutable per-request state wrapping an ASGI scope.

    The principal and feature collection live in the scope itself, so stages
    further down the ASGI stack (e.g. ``request.user`` in Starlette) see the
    same values.
    """

    def __init__(
        self,
        scope: Scope,
        receive: Receive | None = None,
        send: Send | None = None,
    ) -> None:
        self.scope = scope
        self.receive = receive
        self.send = send
        self._path_base = scope.get("root_path", "")

        scope.setdefault("user", Principal.anonymous())
        scope.setdefault(FEATURES_SCOPE_KEY, FeatureCollection())

    @property
    def path(self) -> str:
        return self.scope.get("path", "")

    @path.setter
    def path(self, value: str) -> None:
        self.scope["path"] = value

    @property
    def path_base(self) -> str:
        return self._path_base

    @property
    def principal(self) -> Principal:
        return self.scope["user"]

    @principal.setter
    def principal(self, value: Principal) -> None:
        self.scope["user"] = value

    @property
    def features(self) -> FeatureCollection:
        return self.scope[FEATURES_SCOPE_KEY]

    @property
    def tenant(self) -> str | None:
        """Tenant slug placed in request state by an upstream stage, if any."""
        state = self.scope.get("state") or {}
        return state.get("tenant_slug")
