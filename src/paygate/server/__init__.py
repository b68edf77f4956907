"""paygate HTTP Server.

FastAPI-based HTTP interface for forwarding payments to the bound gateway.
"""

from .app import create_app, run_server

__all__ = ["create_app", "run_server"]
