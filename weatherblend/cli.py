"""CLI entry point for the weather blend service."""

import argparse
import json
import logging

from weatherblend.blend.blender import run_blend
from weatherblend.config.loader import (
    ConfigurationError,
    load_runtime_config,
    masked_config_json,
)
from weatherblend.config.schema import BlendConfig


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherblend",
        description="Blend Home Assistant weather sensors into one reading",
    )
    parser.add_argument(
        "--config", default=None,
        help="Config YAML path (default: $WEATHERBLEND_CONFIG or built-in sources)",
    )

    sub = parser.add_subparsers(dest="command")

    # blend
    sub.add_parser("blend", help="Fetch all sources once and print the payload")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP endpoint")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_runtime_config(args.config)

    if args.command == "blend":
        return _cmd_blend(config)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_blend(config: BlendConfig) -> int:
    try:
        result = run_blend(config)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(result.to_payload(), indent=2))
    return 0


def _cmd_serve(config: BlendConfig, args: argparse.Namespace) -> int:
    import uvicorn

    from weatherblend.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config: BlendConfig, args: argparse.Namespace) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    print("Use: config show")
    return 1
