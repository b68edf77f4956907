"""Configuration system.

Provides strongly-typed configuration objects that can be loaded from:
- Environment variables
- YAML files
- Programmatic construction
"""

from .system import AppConfig, ServerConfig
from .gateways import GatewayType, PaymobConfig, MockGatewayConfig

__all__ = [
    "AppConfig",
    "ServerConfig",
    "GatewayType",
    "PaymobConfig",
    "MockGatewayConfig",
]
