"""Tests for logging configuration and request context."""

import structlog

from tenant_auth.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    get_logger,
    get_tenant,
    set_request_context,
)


class TestRequestContextFilter:
    def test_adds_tenant(self):
        set_request_context(tenant="acme")
        try:
            event = RequestContextFilter()(None, "info", {"event": "x"})
        finally:
            clear_request_context()

        assert event["tenant"] == "acme"
        assert get_tenant() is None

    def test_explicit_tenant_field_kept(self):
        set_request_context(tenant="acme")
        try:
            event = RequestContextFilter()(None, "info", {"event": "x", "tenant": "globex"})
        finally:
            clear_request_context()

        assert event["tenant"] == "globex"

    def test_no_tenant_bound(self):
        assert RequestContextFilter()(None, "info", {"event": "x"}) == {"event": "x"}


class TestConfigureLogging:
    def test_json_renderer_in_production(self):
        configure_logging(debug=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert get_logger(__name__) is not None

    def test_console_renderer_in_debug(self):
        configure_logging(debug=True, log_level="warning")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
