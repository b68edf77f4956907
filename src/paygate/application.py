"""Application - boot sequence and high-level entry point.

Owns the container, runs service providers, and hands out gateways.
"""

import logging
from typing import Any, Optional

from .config import AppConfig
from .container import Container
from .interfaces import PaymentGatewayInterface
from .providers import PaymentServiceProvider, ServiceProvider
from .registry import GatewayRegistry

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: list[type[ServiceProvider]] = [PaymentServiceProvider]


class Application:
    """Application container and boot sequence.

    Usage:
        app = Application(AppConfig.from_env())
        app.boot()

        async with app.gateway() as gateway:
            await gateway.send_payment(payload)
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        providers: Optional[list[type[ServiceProvider]]] = None,
    ):
        self.config = config or AppConfig()
        self.container = Container()
        self.container.instance(AppConfig, self.config)
        self.container.instance(Container, self.container)
        self._providers: list[ServiceProvider] = []
        self._booted = False

        for provider_cls in (DEFAULT_PROVIDERS if providers is None else providers):
            self.register(provider_cls)

    def register(self, provider_cls: type[ServiceProvider]) -> ServiceProvider:
        """Add a service provider. Registers immediately if already booted."""
        provider = provider_cls(self.container)
        self._providers.append(provider)
        if self._booted:
            provider.register()
            provider.boot()
        return provider

    def boot(self) -> None:
        """Validate configuration, then register and boot every provider.

        Raises:
            ValueError: If the configuration is invalid
        """
        if self._booted:
            return

        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {errors}")

        for provider in self._providers:
            provider.register()
        for provider in self._providers:
            provider.boot()

        self._booted = True
        logger.info(
            f"Application booted with {len(self._providers)} service provider(s)"
        )

    @property
    def is_booted(self) -> bool:
        return self._booted

    def make(self, abstract: Any) -> Any:
        """Resolve an abstract from the container."""
        self._ensure_booted()
        return self.container.make(abstract)

    def gateway(self, gateway_type: Optional[str] = None) -> PaymentGatewayInterface:
        """Resolve a payment gateway.

        Without ``gateway_type`` the default binding is used. With it, the
        gateway is looked up by name in the registry.

        Raises:
            UnsupportedGatewayError: If ``gateway_type`` names no gateway
        """
        if gateway_type is None:
            return self.make(PaymentGatewayInterface)
        return self.make(GatewayRegistry).create(gateway_type)

    def _ensure_booted(self) -> None:
        if not self._booted:
            raise RuntimeError("Application not booted. Call boot() first.")
