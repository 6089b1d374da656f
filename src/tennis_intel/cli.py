#!/usr/bin/env python3
"""
Command-line interface for Tennis Intel.

Usage:
    tennis-intel serve                          # Run the HTTP agent (PORT, default 3000)
    tennis-intel serve --port 8080 --reload
    tennis-intel entrypoints                    # List capabilities and prices
    tennis-intel invoke overview
    tennis-intel invoke news --input '{"tour": "atp", "limit": 5}'
    tennis-intel invoke player-search --input '{"query": "djok"}'
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .core.config import get_settings

logger = logging.getLogger("tennis_intel.cli")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the FastAPI app under uvicorn."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    logger.info(f"Tennis Intel Agent running on port {port}")
    if args.reload:
        uvicorn.run(
            "tennis_intel.api.main:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
        )
    else:
        from .api.main import create_app

        uvicorn.run(create_app(settings), host=host, port=port)
    return 0


def cmd_entrypoints(args: argparse.Namespace) -> int:
    """Print every capability with its price."""
    from .api.capabilities import build_registry

    registry = build_registry()

    print(f"\nTennis Intel Entrypoints ({len(registry)})")
    print("=" * 60)
    for ep in registry.entrypoints():
        price = "FREE" if ep.is_free else str(ep.price)
        print(f"{ep.key:<24} {price:>6}  {ep.description}")

    return 0


async def _invoke_async(key: str, payload: dict) -> object:
    from .api.capabilities import build_registry
    from .services.context import build_context

    ctx = build_context(get_settings())
    try:
        return await build_registry().invoke(key, payload, ctx)
    finally:
        await ctx.close()


def cmd_invoke(args: argparse.Namespace) -> int:
    """Invoke one capability and print its JSON output."""
    from .api.errors import APIError
    from .core.http import ExternalAPIError

    try:
        payload = json.loads(args.input) if args.input else {}
    except json.JSONDecodeError as e:
        logger.error("--input is not valid JSON: %s", e)
        return 2

    try:
        output = asyncio.run(_invoke_async(args.key, payload))
    except APIError as e:
        logger.error("%s: %s", e.message, e.error_detail or "")
        return 1
    except ExternalAPIError as e:
        logger.error("ESPN request failed: %s", e.message)
        return 1

    print(json.dumps(output, indent=2))
    return 0


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description="Tennis Intel - ATP/WTA rankings, news and live scores via ESPN",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP agent")
    serve_parser.add_argument("--host", help="Bind address (default: settings.host)")
    serve_parser.add_argument("--port", type=int, help="Port (default: PORT or 3000)")
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    # entrypoints command
    subparsers.add_parser("entrypoints", help="List capabilities and prices")

    # invoke command
    invoke_parser = subparsers.add_parser("invoke", help="Invoke a capability locally")
    invoke_parser.add_argument("key", help="Capability key, e.g. atp-rankings")
    invoke_parser.add_argument("--input", help="JSON object with the capability input")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "serve": cmd_serve,
        "entrypoints": cmd_entrypoints,
        "invoke": cmd_invoke,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
