"""Exceptions raised by the authentication resolution layer."""


class TenantAuthError(Exception):
    """Base class for tenant authentication errors."""

    pass


class InvalidArgumentError(TenantAuthError, ValueError):
    """Raised when a required collaborator is missing at construction time."""

    pass


class SchemeAlreadyExistsError(TenantAuthError, ValueError):
    """Raised when a scheme with the same name is already registered."""

    pass


class SchemeNotFoundError(TenantAuthError, LookupError):
    """Raised when authentication is requested for an unknown scheme."""

    pass


class SchemeConfigurationError(TenantAuthError, TypeError):
    """Raised when a configured handler path does not resolve to a handler class."""

    pass
