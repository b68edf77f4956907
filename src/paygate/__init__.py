"""paygate - payment gateway bindings for a service container.

Consumers depend on ``PaymentGatewayInterface``; the application binds it
to a concrete gateway at boot.

Usage:
    from paygate import Application, AppConfig, PaymentGatewayInterface

    app = Application(AppConfig.from_env())
    app.boot()

    gateway = app.make(PaymentGatewayInterface)
"""

__version__ = "0.1.0"

from .application import Application
from .config import AppConfig
from .container import Container
from .interfaces import GatewayResponse, PaymentGatewayInterface
from .registry import GatewayRegistry, UnsupportedGatewayError

__all__ = [
    "Application",
    "AppConfig",
    "Container",
    "GatewayResponse",
    "PaymentGatewayInterface",
    "GatewayRegistry",
    "UnsupportedGatewayError",
]
