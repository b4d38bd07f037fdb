"""MCP server initialization and stdio entry point."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from obsidian_bridge import __version__
from obsidian_bridge.config import BridgeSettings, load_settings
from obsidian_bridge.constants import LOG_LEVEL, SERVER_NAME
from obsidian_bridge.core.obsidian_client import ObsidianClient
from obsidian_bridge.dispatcher import Dispatcher
from obsidian_bridge.tools import build_registry

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log records to stderr; stdout carries the MCP stream."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_server(dispatcher: Dispatcher) -> Server:
    """Build the MCP server and wire its tool handlers to ``dispatcher``."""
    server: Server = Server(SERVER_NAME, version=__version__)
    call_lock = asyncio.Lock()

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema,
            )
            for descriptor in dispatcher.list_tools()
        ]

    # Arguments are validated by the dispatcher, not by the SDK. The SDK runs
    # requests as concurrent tasks; tool calls of a session are serialized.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        async with call_lock:
            return await dispatcher.dispatch(name, arguments)

    return server


async def serve(settings: BridgeSettings) -> None:
    """Run one MCP session over stdio until the host disconnects."""
    async with ObsidianClient(settings) as client:
        dispatcher = Dispatcher(build_registry(), client)
        server = create_server(dispatcher)
        logger.info(
            "Serving %d tools for Obsidian at %s",
            len(dispatcher.list_tools()),
            settings.base_url,
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def run_server() -> None:
    """Start the MCP server with stdio transport.

    Exits with status 1 if startup fails (for example a missing API key).
    """
    configure_logging()
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        logger.info("Connecting to Obsidian with settings %s", settings.as_payload())
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception:
        logger.exception("Unhandled exception in MCP server")
        sys.exit(1)
    logger.info("Shutting down %s", SERVER_NAME)


if __name__ == "__main__":
    run_server()
