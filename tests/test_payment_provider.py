"""Tests for the payment gateway binding registration."""

import pytest
from unittest.mock import patch

from paygate.config import AppConfig, MockGatewayConfig, PaymobConfig
from paygate.container import Container
from paygate.gateways import MockPaymentGateway, PaymobPaymentService
from paygate.interfaces import PaymentGatewayInterface
from paygate.providers import PaymentServiceProvider, ServiceProvider
from paygate.registry import GatewayRegistry


@pytest.fixture
def container(test_config):
    container = Container()
    container.instance(AppConfig, test_config)
    PaymentServiceProvider(container).register()
    return container


class TestPaymentServiceProvider:
    """Tests for PaymentServiceProvider.register()."""

    def test_is_service_provider(self):
        assert issubclass(PaymentServiceProvider, ServiceProvider)

    def test_interface_resolves_to_paymob(self, container):
        """Resolving the gateway interface yields the Paymob service."""
        gateway = container.make(PaymentGatewayInterface)

        assert isinstance(gateway, PaymobPaymentService)

    def test_interface_always_resolves_to_paymob(self, container):
        """Every resolution yields a Paymob service, fresh each time."""
        gateways = [container.make(PaymentGatewayInterface) for _ in range(3)]

        assert all(isinstance(g, PaymobPaymentService) for g in gateways)
        assert len({id(g) for g in gateways}) == 3

    def test_binding_is_transient(self, container):
        binding = container.get_binding(PaymentGatewayInterface)

        assert binding.concrete is PaymobPaymentService
        assert binding.shared is False

    def test_resolved_gateway_uses_app_config(self, container, test_config):
        """The resolved gateway receives the application's Paymob config."""
        gateway = container.make(PaymentGatewayInterface)

        assert gateway.config is test_config.paymob

    def test_registration_does_not_initialize_gateway(self, container):
        """Resolution builds the gateway but opens no connection."""
        gateway = container.make(PaymentGatewayInterface)

        assert not gateway.is_initialized
        assert gateway._client is None

    def test_resolves_without_api_key(self):
        """Resolution works even when no credentials are configured."""
        with patch.dict("os.environ", {}, clear=True):
            config = AppConfig(paymob=PaymobConfig(api_key=None))

        container = Container()
        container.instance(AppConfig, config)
        PaymentServiceProvider(container).register()

        assert isinstance(container.make(PaymentGatewayInterface), PaymobPaymentService)

    def test_resolves_with_default_config_when_none_registered(self):
        """Without a registered AppConfig the defaults are used."""
        container = Container()
        PaymentServiceProvider(container).register()

        gateway = container.make(PaymentGatewayInterface)

        assert isinstance(gateway, PaymobPaymentService)
        assert gateway.config.base_url == PaymobConfig().base_url

    def test_registers_config_slices(self, container, test_config):
        assert container.make(PaymobConfig) is test_config.paymob
        assert container.make(MockGatewayConfig) is test_config.mock

    def test_registers_shared_registry(self, container):
        registry = container.make(GatewayRegistry)

        assert registry is container.make(GatewayRegistry)
        assert registry.names() == ["mock", "paymob"]

    def test_registry_builds_gateways_through_container(self, container):
        registry = container.make(GatewayRegistry)

        assert isinstance(registry.create("paymob"), PaymobPaymentService)
        assert isinstance(registry.create("mock"), MockPaymentGateway)

    def test_boot_registers_nothing(self):
        """Bindings come from register(); boot() adds none."""
        container = Container()

        PaymentServiceProvider(container).boot()

        assert not container.bound(PaymentGatewayInterface)
