"""
Multi-tenant authentication resolution middleware
"""

__version__ = "0.1.0"

from .asgi import MultiTenantAuthenticationMiddleware, use_multi_tenant_authentication
from .context import AuthenticationFeature, FeatureCollection, RequestContext
from .errors import (
    InvalidArgumentError,
    SchemeAlreadyExistsError,
    SchemeConfigurationError,
    SchemeNotFoundError,
    TenantAuthError,
)
from .handlers import (
    AuthenticationHandler,
    AuthenticationHandlerProvider,
    HandlerProvider,
    RequestAuthenticationHandler,
)
from .middleware import RequestHandling, TenantAuthMiddleware
from .principal import Identity, Principal
from .results import AuthenticateResult, AuthenticationTicket
from .schemes import AuthenticationScheme, AuthenticationSchemeProvider, SchemeRegistry
from .service import AuthenticationService, SchemeAuthenticationService
from .tenancy import TenantSchemeProviders

__all__ = [
    "__version__",
    "AuthenticateResult",
    "AuthenticationFeature",
    "AuthenticationHandler",
    "AuthenticationHandlerProvider",
    "AuthenticationScheme",
    "AuthenticationSchemeProvider",
    "AuthenticationService",
    "AuthenticationTicket",
    "FeatureCollection",
    "HandlerProvider",
    "Identity",
    "InvalidArgumentError",
    "MultiTenantAuthenticationMiddleware",
    "Principal",
    "RequestAuthenticationHandler",
    "RequestContext",
    "RequestHandling",
    "SchemeAlreadyExistsError",
    "SchemeAuthenticationService",
    "SchemeConfigurationError",
    "SchemeNotFoundError",
    "SchemeRegistry",
    "TenantAuthError",
    "TenantAuthMiddleware",
    "TenantSchemeProviders",
    "use_multi_tenant_authentication",
]
