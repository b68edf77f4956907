"""Pydantic models for HTTP API request/response."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Request Models
# =============================================================================

class PaymentRequest(BaseModel):
    """Request to forward a payment payload to a gateway."""
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Gateway payload, forwarded as-is"
    )
    gateway_type: Optional[str] = Field(
        default=None,
        description="Gateway name; the default binding is used when omitted"
    )


class CallbackRequest(BaseModel):
    """Payload a gateway posted back to us."""
    payload: dict[str, Any] = Field(default_factory=dict)
    gateway_type: Optional[str] = Field(default=None)


# =============================================================================
# Response Models
# =============================================================================

class GatewayResponseModel(BaseModel):
    """Outcome of a gateway call."""
    gateway: str
    success: bool
    status_code: Optional[int] = None
    data: dict[str, Any] = Field(default_factory=dict)
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health of the default gateway."""
    status: str
    gateway: str
    gateway_status: str
    message: Optional[str] = None
    last_check: Optional[datetime] = None


class GatewaysResponse(BaseModel):
    """Registered gateways and the default binding."""
    default: str
    available: list[str]
