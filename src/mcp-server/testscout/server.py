"""
TESTSCOUT - Main Server Module

Entry point for the MCP server.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import asyncio
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .config import VERSION, logger
from .tools import get_tool_definitions
from .handlers import handle_tool_call


# =============================================================================
# MCP Server Instance
# =============================================================================
server = Server("testscout")


# =============================================================================
# Tool Registration
# =============================================================================
@server.list_tools()
async def list_tools() -> List[Tool]:
    return await get_tool_definitions()


@server.call_tool()
async def call_tool(name: str, args: Dict[str, Any]) -> List[TextContent]:
    return await handle_tool_call(name, args)


# =============================================================================
# Main Entry Point
# =============================================================================
async def main():
    """Start the MCP server."""
    logger.info(f"Testscout MCP Server v{VERSION} starting...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())

    logger.info("Testscout MCP Server shutdown complete")


def run():
    """Entry point for console script."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
