"""Tests for the named gateway registry."""

import pytest

from paygate.config import MockGatewayConfig
from paygate.gateways import MockPaymentGateway
from paygate.registry import GatewayRegistry, UnsupportedGatewayError


@pytest.fixture
def registry():
    registry = GatewayRegistry()
    registry.register("mock", lambda: MockPaymentGateway(MockGatewayConfig()))
    return registry


class TestGatewayRegistry:
    """Tests for GatewayRegistry lookup."""

    def test_create_known_gateway(self, registry):
        assert isinstance(registry.create("mock"), MockPaymentGateway)

    def test_create_builds_fresh_gateway(self, registry):
        assert registry.create("mock") is not registry.create("mock")

    def test_lookup_is_case_insensitive(self, registry):
        """Test that names are matched after stripping and lowercasing."""
        assert isinstance(registry.create("  MOCK "), MockPaymentGateway)
        assert "Mock" in registry

    def test_unknown_gateway_raises(self, registry):
        """Test that an unknown selector fails with an unsupported error."""
        with pytest.raises(UnsupportedGatewayError, match="Unsupported gateway type: stripe"):
            registry.create("stripe")

    def test_empty_selector_raises(self, registry):
        with pytest.raises(UnsupportedGatewayError):
            registry.create("")

    def test_none_selector_raises(self, registry):
        with pytest.raises(UnsupportedGatewayError):
            registry.create(None)

    def test_unsupported_error_is_value_error(self, registry):
        with pytest.raises(ValueError) as exc_info:
            registry.create("fawry")
        assert exc_info.value.gateway_type == "fawry"

    def test_register_empty_name_raises(self):
        registry = GatewayRegistry()
        with pytest.raises(ValueError, match="cannot be empty"):
            registry.register("  ", lambda: None)

    def test_names_sorted(self, registry):
        registry.register("paymob", lambda: None)
        assert registry.names() == ["mock", "paymob"]
        assert "stripe" not in registry
