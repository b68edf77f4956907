"""Application-wide configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .gateways import MockGatewayConfig, PaymobConfig

DEFAULT_CONFIG_PATH = "~/.paygate/config.yaml"


def _parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 18800


@dataclass
class AppConfig:
    """Complete application configuration.

    Combines all gateway configurations into a single object.
    Can be loaded from a YAML file, environment variables, or constructed
    programmatically.

    Attributes:
        paymob: Paymob gateway configuration
        mock: Mock gateway configuration
        server: HTTP server configuration
        debug: Enable debug logging
    """
    paymob: PaymobConfig = field(default_factory=PaymobConfig)
    mock: MockGatewayConfig = field(default_factory=MockGatewayConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    debug: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create configuration from dictionary."""
        paymob_data = data.get("paymob", {})
        mock_data = data.get("mock", {})
        server_data = data.get("server", {})

        return cls(
            paymob=PaymobConfig(**paymob_data) if paymob_data else PaymobConfig(),
            mock=MockGatewayConfig(**mock_data) if mock_data else MockGatewayConfig(),
            server=ServerConfig(**server_data) if server_data else ServerConfig(),
            debug=_parse_bool(data.get("debug", False)),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        A missing file yields the default configuration.
        """
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_env(cls, prefix: str = "PAYGATE") -> "AppConfig":
        """Load configuration from the environment.

        The YAML file named by ``{prefix}_CONFIG`` (default
        ``~/.paygate/config.yaml``) is read first, then individual
        variables override it:

            {prefix}_DEBUG: true|false
            {prefix}_HOST: Server bind address
            {prefix}_PORT: Server port
            {prefix}_PAYMOB_API_KEY: Paymob secret key (or PAYMOB_API_KEY)
            {prefix}_PAYMOB_BASE_URL: Paymob API root
            {prefix}_PAYMOB_TIMEOUT: Request timeout in seconds
        """
        def get(key: str, default: str = None) -> Optional[str]:
            return os.environ.get(f"{prefix}_{key}", default)

        config = cls.from_file(get("CONFIG", DEFAULT_CONFIG_PATH))

        debug = get("DEBUG")
        if debug is not None:
            config.debug = _parse_bool(debug)
        if get("HOST"):
            config.server.host = get("HOST")
        if get("PORT"):
            config.server.port = int(get("PORT"))
        if get("PAYMOB_API_KEY"):
            config.paymob.api_key = get("PAYMOB_API_KEY")
        if get("PAYMOB_BASE_URL"):
            config.paymob.base_url = get("PAYMOB_BASE_URL")
        if get("PAYMOB_TIMEOUT"):
            config.paymob.timeout_seconds = float(get("PAYMOB_TIMEOUT"))

        return config

    @classmethod
    def for_testing(cls) -> "AppConfig":
        """Create a configuration suitable for testing.

        Uses a placeholder API key and a local base URL so nothing
        reaches the real gateway.
        """
        return cls(
            paymob=PaymobConfig(
                api_key="test-key",
                base_url="http://paymob.test/api",
                timeout_seconds=5.0,
            ),
            debug=True,
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        A missing Paymob API key is not an error here: resolving the
        gateway must work without credentials, and the gateway itself
        refuses to initialize without one.
        """
        errors = []

        if not self.paymob.base_url.startswith(("http://", "https://")):
            errors.append(
                f"paymob.base_url must be an http(s) URL, got {self.paymob.base_url!r}"
            )
        if self.paymob.timeout_seconds <= 0:
            errors.append(
                f"paymob.timeout_seconds must be positive, got {self.paymob.timeout_seconds}"
            )
        if not (0 < self.server.port < 65536):
            errors.append(f"server.port must be between 1 and 65535, got {self.server.port}")

        return errors
