"""Paymob payment gateway."""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from ..config.gateways import PaymobConfig
from ..interfaces import (
    GatewayHealth,
    GatewayResponse,
    GatewayStatus,
    PaymentGatewayInterface,
)

logger = logging.getLogger(__name__)


class PaymobPaymentService(PaymentGatewayInterface[PaymobConfig]):
    """Paymob gateway implementation.

    Forwards caller-built payloads to Paymob over HTTP. One attempt per
    call; the outcome is reported as a ``GatewayResponse``.
    """

    def __init__(
        self,
        config: PaymobConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def name(self) -> str:
        return "paymob"

    async def initialize(self) -> None:
        """Initialize the HTTP client.

        Raises:
            ValueError: If API key is not configured
        """
        if not self.config.api_key:
            raise ValueError("Paymob API key required")

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout_seconds),
            transport=self._transport,
            headers={
                "Authorization": f"Token {self.config.api_key}",
                "Content-Type": "application/json",
            },
        )
        self._initialized = True

    async def shutdown(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
        self._initialized = False

    async def health_check(self) -> GatewayHealth:
        if not self._client:
            return GatewayHealth(
                status=GatewayStatus.UNAVAILABLE,
                message="Client not initialized",
            )

        try:
            start = datetime.utcnow()
            response = await self._client.get(self.config.base_url)
            latency = (datetime.utcnow() - start).total_seconds() * 1000
        except httpx.HTTPError as e:
            return GatewayHealth(
                status=GatewayStatus.UNAVAILABLE,
                message=f"Paymob unreachable: {e}",
            )

        # Any non-5xx answer means the API host is up and reachable.
        if response.status_code >= 500:
            return GatewayHealth(
                status=GatewayStatus.DEGRADED,
                latency_ms=latency,
                message=f"Paymob returned {response.status_code}",
            )
        return GatewayHealth(
            status=GatewayStatus.HEALTHY,
            latency_ms=latency,
            message=f"Paymob at {self.config.base_url}",
        )

    async def send_payment(self, payload: dict[str, Any]) -> GatewayResponse:
        if not self._client:
            raise RuntimeError("Gateway not initialized")

        start = datetime.utcnow()
        try:
            response = await self._client.post(self.config.payment_url, json=payload)
        except httpx.HTTPError as e:
            raise RuntimeError(f"Paymob request failed: {e}") from e

        latency = (datetime.utcnow() - start).total_seconds() * 1000
        logger.info(
            f"Paymob payment request returned {response.status_code} in {latency:.0f}ms"
        )

        data = self._decode(response)
        if response.is_success:
            return GatewayResponse(
                gateway=self.name,
                success=True,
                status_code=response.status_code,
                data=data,
            )

        error = data.get("detail") or data.get("message") or response.text
        return GatewayResponse(
            gateway=self.name,
            success=False,
            status_code=response.status_code,
            data=data,
            error=f"Paymob API error ({response.status_code}): {error}",
        )

    async def callback(self, payload: dict[str, Any]) -> GatewayResponse:
        success = str(payload.get("success", "")).lower() == "true"
        return GatewayResponse(
            gateway=self.name,
            success=success,
            data=dict(payload),
            error=None if success else "Gateway reported an unsuccessful transaction",
        )

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {"raw": response.text}
        return body if isinstance(body, dict) else {"data": body}
