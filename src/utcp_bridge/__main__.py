"""Command line entry point: `utcp-bridge` or `python -m utcp_bridge`."""

import argparse
import logging
import sys

import uvicorn

from utcp_bridge import __version__, create_app
from utcp_bridge.config import UtcpBridgeSettings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# CLI destination -> settings field; unset flags fall back to UTCP_BRIDGE_* env
SETTING_OVERRIDES = ("host", "port", "ollama_host", "model", "manual_urls", "log_level")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utcp-bridge",
        description="Serve a chat endpoint whose model can call tools from UTCP manuals",
    )
    parser.add_argument("--version", action="version", version=f"utcp-bridge {__version__}")
    parser.add_argument("--host", help="Bind address [UTCP_BRIDGE_HOST]")
    parser.add_argument("--port", type=int, help="Bind port [UTCP_BRIDGE_PORT]")
    parser.add_argument(
        "--ollama-host", help="Ollama server URL [UTCP_BRIDGE_OLLAMA_HOST]"
    )
    parser.add_argument("--model", help="Chat model name [UTCP_BRIDGE_MODEL]")
    parser.add_argument(
        "--manual-url",
        dest="manual_urls",
        action="append",
        metavar="URL",
        help="Manual to discover tools from, repeatable [UTCP_BRIDGE_MANUAL_URLS]",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, help="Log level [UTCP_BRIDGE_LOG_LEVEL]"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> UtcpBridgeSettings:
    """Build settings where given CLI flags win over the environment."""
    overrides = {
        name: getattr(args, name)
        for name in SETTING_OVERRIDES
        if getattr(args, name) is not None
    }
    return UtcpBridgeSettings(**overrides)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        f"Starting utcp-bridge {__version__} on {settings.host}:{settings.port} "
        f"with {len(settings.manual_urls)} manual URL(s)"
    )

    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=args.reload,
    )


if __name__ == "__main__":
    sys.exit(main())
