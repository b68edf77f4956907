"""Named gateway factories.

Lets a caller pick a gateway by a string such as ``"paymob"``. This is an
opt-in lookup: resolving ``PaymentGatewayInterface`` from the container
always goes through the default binding instead.
"""

from typing import Callable

from .interfaces import PaymentGatewayInterface

GatewayFactory = Callable[[], PaymentGatewayInterface]


class UnsupportedGatewayError(ValueError):
    """Raised when no gateway is registered under the requested name."""

    def __init__(self, gateway_type: str):
        self.gateway_type = gateway_type
        super().__init__(f"Unsupported gateway type: {gateway_type}")


class GatewayRegistry:
    """Registry of gateway factories keyed by name."""

    def __init__(self):
        self._factories: dict[str, GatewayFactory] = {}

    @staticmethod
    def _key(name: str) -> str:
        return (name or "").strip().lower()

    def register(self, name: str, factory: GatewayFactory) -> None:
        key = self._key(name)
        if not key:
            raise ValueError("Gateway name cannot be empty")
        self._factories[key] = factory

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._factories

    def create(self, gateway_type: str) -> PaymentGatewayInterface:
        """Build the gateway registered under ``gateway_type``.

        Raises:
            UnsupportedGatewayError: If the name is empty or unknown
        """
        factory = self._factories.get(self._key(gateway_type))
        if factory is None:
            raise UnsupportedGatewayError(gateway_type)
        return factory()
