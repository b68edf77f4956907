"""Gateway-specific configuration classes."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GatewayType(Enum):
    """Available payment gateways."""
    PAYMOB = "paymob"
    MOCK = "mock"


@dataclass
class PaymobConfig:
    """Configuration for the Paymob gateway.

    Attributes:
        api_key: Paymob secret key (falls back to PAYMOB_API_KEY)
        base_url: Paymob API root
        payment_path: Path payments are posted to, relative to base_url
        timeout_seconds: Request timeout
    """
    api_key: Optional[str] = None
    base_url: str = "https://accept.paymob.com/api"
    payment_path: str = "/acceptance/payments/pay"
    timeout_seconds: float = 30.0

    def __post_init__(self):
        if self.api_key is None:
            self.api_key = os.environ.get("PAYMOB_API_KEY")

    @property
    def payment_url(self) -> str:
        return self.base_url.rstrip("/") + "/" + self.payment_path.lstrip("/")


@dataclass
class MockGatewayConfig:
    """Configuration for the in-process mock gateway.

    Attributes:
        succeed: Whether send_payment reports success
    """
    succeed: bool = True
