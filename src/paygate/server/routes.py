"""API route handlers."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..application import Application
from ..interfaces import GatewayResponse, GatewayStatus, PaymentGatewayInterface
from ..registry import GatewayRegistry, UnsupportedGatewayError
from .models import (
    CallbackRequest,
    GatewayResponseModel,
    GatewaysResponse,
    HealthResponse,
    PaymentRequest,
)

logger = logging.getLogger("paygate.server")

router = APIRouter(prefix="/v1", tags=["payments"])


def get_application() -> Application:
    """Dependency injection for the booted application.

    This is set by the app during startup.
    """
    from .app import _application
    if _application is None or not _application.is_booted:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _application


def _resolve_gateway(
    application: Application,
    gateway_type: Optional[str],
) -> PaymentGatewayInterface:
    try:
        return application.gateway(gateway_type)
    except UnsupportedGatewayError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _to_response(result: GatewayResponse) -> GatewayResponseModel:
    return GatewayResponseModel(
        gateway=result.gateway,
        success=result.success,
        status_code=result.status_code,
        data=result.data,
        error=result.error,
    )


@router.get("/health", response_model=HealthResponse)
async def health(
    application: Application = Depends(get_application),
) -> HealthResponse:
    """Report the health of the default gateway."""
    gateway = application.gateway()
    try:
        async with gateway:
            result = await gateway.health_check()
    except ValueError as e:
        return HealthResponse(
            status="degraded",
            gateway=gateway.name,
            gateway_status=GatewayStatus.UNAVAILABLE.value,
            message=str(e),
        )

    return HealthResponse(
        status="ok" if result.status == GatewayStatus.HEALTHY else "degraded",
        gateway=gateway.name,
        gateway_status=result.status.value,
        message=result.message,
        last_check=result.last_check,
    )


@router.get("/gateways", response_model=GatewaysResponse)
async def gateways(
    application: Application = Depends(get_application),
) -> GatewaysResponse:
    """List registered gateways and the default binding."""
    registry: GatewayRegistry = application.make(GatewayRegistry)
    return GatewaysResponse(
        default=application.gateway().name,
        available=registry.names(),
    )


@router.post("/payments", response_model=GatewayResponseModel)
async def send_payment(
    request: PaymentRequest,
    application: Application = Depends(get_application),
) -> GatewayResponseModel:
    """Forward a payment payload to the selected gateway."""
    gateway = _resolve_gateway(application, request.gateway_type)
    try:
        async with gateway:
            result = await gateway.send_payment(request.payload)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except RuntimeError as e:
        logger.warning(f"Payment via {gateway.name} failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return _to_response(result)


@router.post("/payments/callback", response_model=GatewayResponseModel)
async def payment_callback(
    request: CallbackRequest,
    application: Application = Depends(get_application),
) -> GatewayResponseModel:
    """Hand a gateway callback payload to the selected gateway."""
    gateway = _resolve_gateway(application, request.gateway_type)
    result = await gateway.callback(request.payload)
    return _to_response(result)
