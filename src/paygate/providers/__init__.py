"""Service providers.

Each provider registers a group of bindings at application boot.
"""

from .base import ServiceProvider
from .payment import PaymentServiceProvider

__all__ = [
    "ServiceProvider",
    "PaymentServiceProvider",
]
