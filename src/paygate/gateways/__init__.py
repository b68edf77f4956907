"""Gateway implementations.

Each gateway implements ``PaymentGatewayInterface`` and is resolved
through the container rather than constructed directly.
"""

from .paymob import PaymobPaymentService
from .mock import MockPaymentGateway

__all__ = [
    "PaymobPaymentService",
    "MockPaymentGateway",
]
