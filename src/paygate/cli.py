"""paygate CLI: serve and inspect entry points.

Usage:
    paygate serve                   # Start the HTTP server
    paygate serve -c config.yaml    # Start with an explicit config file
    paygate gateways                # Show the default binding and registered gateways
"""

import argparse
import logging
import sys

from .config import AppConfig


def _load_config(path: str | None) -> AppConfig:
    if path:
        return AppConfig.from_file(path)
    return AppConfig.from_env()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    from .server.app import run_server

    config = _load_config(args.config)

    run_server(
        config=config,
        host=args.host,
        port=args.port,
        log_level=args.log_level or ("debug" if config.debug else "info"),
    )


def cmd_gateways(args: argparse.Namespace) -> int:
    """Print the default gateway binding and every registered gateway."""
    from .application import Application
    from .registry import GatewayRegistry

    config = _load_config(args.config)
    if config.debug:
        logging.basicConfig(level=logging.DEBUG)

    app = Application(config)
    try:
        app.boot()
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    default = app.gateway()
    registry: GatewayRegistry = app.make(GatewayRegistry)

    print(f"Default: {default.name} ({type(default).__name__})")
    print("Available:")
    for name in registry.names():
        print(f"  - {name}")
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="paygate",
        description="paygate: payment gateway service",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None)
    serve_parser.add_argument("--port", "-p", type=int, default=None)
    serve_parser.add_argument("--config", "-c", type=str, default=None)
    serve_parser.add_argument("--log-level", type=str, default=None,
                              choices=["debug", "info", "warning", "error"])

    # gateways
    gateways_parser = subparsers.add_parser(
        "gateways", help="Show the default binding and registered gateways"
    )
    gateways_parser.add_argument("--config", "-c", type=str, default=None)

    args = parser.parse_args()

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "gateways":
        sys.exit(cmd_gateways(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
