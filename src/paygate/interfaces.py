"""Core interfaces for the payment gateway layer.

These interfaces define the contract every gateway implementation must satisfy.
Consumers ask the container for ``PaymentGatewayInterface`` and never name a
concrete gateway.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

# Type variable for gateway-specific configuration
TConfig = TypeVar('TConfig')


class GatewayStatus(Enum):
    """Gateway health status."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNAVAILABLE = "unavailable"
    INITIALIZING = "initializing"


@dataclass
class GatewayHealth:
    """Health check result for a gateway."""
    status: GatewayStatus
    latency_ms: Optional[float] = None
    message: Optional[str] = None
    last_check: datetime = None

    def __post_init__(self):
        if self.last_check is None:
            self.last_check = datetime.utcnow()


@dataclass
class GatewayResponse:
    """Outcome of a call into a payment gateway.

    Attributes:
        gateway: Name of the gateway that produced this response
        success: Whether the gateway reported success
        status_code: HTTP status returned by the gateway, if any
        data: Decoded response body (or the inbound payload for callbacks)
        error: Error description when ``success`` is False
    """
    gateway: str
    success: bool
    status_code: Optional[int] = None
    data: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None


class PaymentGatewayInterface(ABC, Generic[TConfig]):
    """Abstract payment gateway.

    Lifecycle:
    - ``initialize()`` opens whatever connection the gateway needs
    - ``shutdown()`` releases it
    - ``health_check()`` reports connectivity

    Payloads are opaque dictionaries built by the caller; the gateway
    forwards them and reports the outcome.
    """

    def __init__(self, config: TConfig):
        self.config = config
        self._initialized = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the gateway identifier (e.g. ``"paymob"``)."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the gateway. Called once before first use."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Gracefully shutdown the gateway."""
        pass

    @abstractmethod
    async def health_check(self) -> GatewayHealth:
        """Check gateway health and connectivity."""
        pass

    @abstractmethod
    async def send_payment(self, payload: dict[str, Any]) -> GatewayResponse:
        """Forward an outgoing payment payload to the gateway."""
        pass

    @abstractmethod
    async def callback(self, payload: dict[str, Any]) -> GatewayResponse:
        """Handle a payload the gateway posted back to us."""
        pass

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def __aenter__(self):
        if not self._initialized:
            await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()
