"""Unit tests for request context, principals and results."""

import pytest

from tenant_auth.context import AuthenticationFeature, FeatureCollection, RequestContext
from tenant_auth.principal import Identity, Principal
from tenant_auth.results import AuthenticateResult, AuthenticationTicket

from .conftest import make_scope


class TestRequestContext:
    """Test RequestContext over an ASGI scope."""

    def test_defaults_to_anonymous_principal(self):
        context = RequestContext(make_scope("/a"))

        assert context.principal.is_authenticated is False
        assert context.scope["user"] is context.principal
        assert not hasattr(context, "items")

    def test_path_base_captured_once(self):
        scope = make_scope("/a", root_path="/base")
        context = RequestContext(scope)
        scope["root_path"] = "/other"

        assert context.path_base == "/base"

    def test_principal_written_to_scope(self):
        context = RequestContext(make_scope())
        principal = Principal([Identity("cookie", {"sub": "u1"})])

        context.principal = principal

        assert context.scope["user"] is principal

    def test_tenant_from_state(self):
        assert RequestContext(make_scope(tenant="acme")).tenant == "acme"
        assert RequestContext(make_scope()).tenant is None

    def test_existing_features_reused(self):
        scope = make_scope()
        first = RequestContext(scope)
        second = RequestContext(scope)

        assert first.features is second.features


class TestFeatureCollection:
    def test_set_get_and_remove(self):
        features = FeatureCollection()
        feature = AuthenticationFeature("/a", "")

        features.set(AuthenticationFeature, feature)
        assert features.get(AuthenticationFeature) is feature
        assert AuthenticationFeature in features

        features.set(AuthenticationFeature, None)
        assert features.get(AuthenticationFeature) is None
        assert len(features) == 0


class TestPrincipal:
    def test_authenticated_identity(self):
        principal = Principal([Identity(), Identity("cookie", {"name": "Admin"})])

        assert principal.is_authenticated
        assert principal.find_claim("name") == "Admin"
        assert principal.find_claim("email") is None

    def test_display_name(self):
        assert Principal.anonymous().display_name == ""
        assert Principal([Identity("jwt", {"sub": "user-7"})]).display_name == "user-7"


class TestAuthenticateResult:
    def test_success_requires_ticket(self):
        with pytest.raises(ValueError):
            AuthenticateResult.success(None)

    def test_fail_wraps_message(self):
        result = AuthenticateResult.fail("expired")

        assert not result.succeeded
        assert str(result.failure) == "expired"
        assert result.principal is None

    def test_success_exposes_principal(self):
        principal = Principal([Identity("cookie")])
        result = AuthenticateResult.success(AuthenticationTicket(principal, "cookie"))

        assert result.succeeded
        assert result.principal is principal
