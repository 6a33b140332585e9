#!/usr/bin/env python3
"""
Open-Meteo MCP Server.

Lets an AI agent keep a list of named locations and read their weather
forecasts without handling raw coordinates:
- Configuration centralized in config.py
- Storage, provider clients and weather codes in utils/ package
- Tools and the call dispatcher in tools/ package

Runs over stdio by default, or streamable HTTP with --transport http.
Logs go to Config.LOG_DIR and stderr; stdout is reserved for the protocol.

ENV:
  OPEN_METEO_MCP_CONFIG_DIR -> where locations.json lives
  LOG_LEVEL, LOG_DIR        -> logging
"""

import argparse
import asyncio
import logging
import sys

from rich.console import Console

from config import Config
from tools.tool_registry import create_app
from utils.http_client import close_http_client

logger = logging.getLogger(__name__)


def configure_logging(daemon_mode=False):
    """Log to a file under Config.LOG_DIR, and to stderr unless running as a daemon."""
    Config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = Config.LOG_DIR / "mcp_server.log"

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(detailed_formatter)
    handlers = [file_handler]
    if not daemon_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(detailed_formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=Config.get_log_level(), handlers=handlers, force=True)
    # httpx logs full request URLs, which carry coordinates
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return log_file


def print_banner(app, transport, log_file):
    console = Console(stderr=True)
    console.print(f"[bold]{Config.SERVER_NAME}[/bold] {Config.SERVER_VERSION}")
    if transport == "http":
        console.print(f"Listening on http://{Config.SERVER_HOST}:{Config.SERVER_PORT}")
    else:
        console.print("Transport: stdio")
    console.print(f"Tools loaded: {len(app._tool_manager.list_tools())}")
    console.print(f"Locations file: {Config.LOCATIONS_FILE}")
    console.print(f"Logs: {log_file}")


async def run_server(transport, daemon_mode=False):
    """Create the app and serve it until the transport closes."""
    log_file = configure_logging(daemon_mode)
    app = create_app()
    if not daemon_mode:
        print_banner(app, transport, log_file)

    logger.info("%s starting (transport=%s)", Config.SERVER_NAME, transport)
    logger.info("Locations file: %s", Config.LOCATIONS_FILE)
    try:
        if transport == "http":
            await app.run_streamable_http_async()
        else:
            await app.run_stdio_async()
    except Exception:
        logger.exception("Server error")
        raise
    finally:
        await close_http_client()
        logger.info("Server shut down")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Open-Meteo MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=Config.TRANSPORT,
        help="Protocol transport (default: %(default)s)",
    )
    parser.add_argument(
        "--daemon", action="store_true", help="Run in daemon mode (no console output)"
    )
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_server(args.transport, args.daemon))
    except KeyboardInterrupt:
        logger.info("Server interrupted")


if __name__ == "__main__":
    main()
