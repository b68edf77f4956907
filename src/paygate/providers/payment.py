"""Payment gateway bindings."""

from ..config import AppConfig, GatewayType, MockGatewayConfig, PaymobConfig
from ..container import Container
from ..gateways import MockPaymentGateway, PaymobPaymentService
from ..interfaces import PaymentGatewayInterface
from ..registry import GatewayRegistry
from .base import ServiceProvider


class PaymentServiceProvider(ServiceProvider):
    """Binds ``PaymentGatewayInterface`` to ``PaymobPaymentService``.

    To pick a gateway per request instead, ask the container for
    ``GatewayRegistry`` and call ``create()`` with the gateway name.
    """

    def register(self) -> None:
        self.container.bind(PaymentGatewayInterface, PaymobPaymentService)

        # Config slices below resolve AppConfig, so it must never be autowired.
        if not self.container.bound(AppConfig):
            self.container.instance(AppConfig, AppConfig())
        self.container.bind(PaymobConfig, lambda c: c.make(AppConfig).paymob)
        self.container.bind(MockGatewayConfig, lambda c: c.make(AppConfig).mock)
        self.container.singleton(GatewayRegistry, _build_registry)


def _build_registry(container: Container) -> GatewayRegistry:
    registry = GatewayRegistry()
    registry.register(
        GatewayType.PAYMOB.value,
        lambda: container.make(PaymobPaymentService),
    )
    registry.register(
        GatewayType.MOCK.value,
        lambda: container.make(MockPaymentGateway),
    )
    return registry
