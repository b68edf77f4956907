"""Mock gateway for testing."""

import uuid
from typing import Any

from ..config.gateways import MockGatewayConfig
from ..interfaces import (
    GatewayHealth,
    GatewayResponse,
    GatewayStatus,
    PaymentGatewayInterface,
)


class MockPaymentGateway(PaymentGatewayInterface[MockGatewayConfig]):
    """In-process gateway that records every payload it receives."""

    def __init__(self, config: MockGatewayConfig):
        super().__init__(config)
        self.payments: list[dict[str, Any]] = []
        self.callbacks: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "mock"

    async def initialize(self) -> None:
        self._initialized = True

    async def shutdown(self) -> None:
        self._initialized = False

    async def health_check(self) -> GatewayHealth:
        return GatewayHealth(
            status=GatewayStatus.HEALTHY,
            latency_ms=0.1,
            message="Mock gateway always healthy",
        )

    async def send_payment(self, payload: dict[str, Any]) -> GatewayResponse:
        self.payments.append(payload)
        if not self.config.succeed:
            return GatewayResponse(
                gateway=self.name,
                success=False,
                status_code=402,
                data={},
                error="Mock gateway configured to decline",
            )
        return GatewayResponse(
            gateway=self.name,
            success=True,
            status_code=200,
            data={"id": str(uuid.uuid4()), "payload": payload},
        )

    async def callback(self, payload: dict[str, Any]) -> GatewayResponse:
        self.callbacks.append(payload)
        success = str(payload.get("success", "")).lower() == "true"
        return GatewayResponse(gateway=self.name, success=success, data=dict(payload))
