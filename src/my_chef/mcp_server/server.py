#!/usr/bin/env python3
"""
MCP Server for my-chef.

This server exposes the recipe catalog and meal recommendation tools via
the Model Context Protocol.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..config import Settings, setup_logging
from ..data.cookbook import Cookbook
from ..planning.pools import RandomSource, UniformRandomSource
from .tools.recipe_tools import RecipeTools, build_tool_definitions

logger = logging.getLogger(__name__)

SERVER_NAME = "my-chef-mcp"


class MyChefServer:
    """MCP Server for recipe tools."""

    def __init__(
        self,
        cookbook: Optional[Cookbook] = None,
        settings: Optional[Settings] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the MCP server.

        Args:
            cookbook: Recipe catalog; loaded on run() if not loaded yet
            settings: Runtime settings (default: from environment)
            random_source: Index provider for the planners
        """
        self.settings = settings or Settings.from_env()
        self.app = Server(SERVER_NAME)
        self.cookbook = cookbook or Cookbook(self.settings)
        self.recipe_tools = RecipeTools(
            self.cookbook,
            random_source or UniformRandomSource(self.settings.random_seed),
        )

        # Register handlers
        self._register_handlers()

        logger.info("my-chef MCP Server initialized")

    def list_tool_objects(self) -> List[Tool]:
        """Tool definitions converted to MCP Tool objects."""
        return [
            Tool(
                name=tool_def["name"],
                description=tool_def["description"],
                inputSchema=tool_def["input_schema"],
            )
            for tool_def in build_tool_definitions(self.cookbook.categories)
        ]

    def handle_tool_call(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """
        Run a tool and format its result as MCP text content.

        Errors are reported to the caller as text rather than raised.
        """
        logger.info(f"Tool called: {name} with arguments: {arguments}")

        try:
            result = self.recipe_tools.dispatch(name, arguments)
            result_text = json.dumps(result, indent=2, ensure_ascii=False)
            return [TextContent(type="text", text=result_text)]

        except Exception as e:
            error_msg = f"Error executing tool {name}: {str(e)}"
            logger.error(error_msg, exc_info=True)
            return [TextContent(type="text", text=error_msg)]

    def _register_handlers(self):
        """Register MCP protocol handlers."""

        @self.app.list_tools()
        async def list_tools() -> List[Tool]:
            """List available tools."""
            tools = self.list_tool_objects()
            logger.info(f"Listed {len(tools)} tools")
            return tools

        @self.app.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            """Handle tool calls from clients."""
            return self.handle_tool_call(name, arguments)

    async def load_catalog(self):
        """Load the catalog once, off the event loop."""
        if not self.cookbook.is_loaded:
            await asyncio.to_thread(self.cookbook.load)

    async def run(self):
        """Run the MCP server."""
        await self.load_catalog()
        logger.info("Starting MCP server...")
        async with stdio_server() as (read_stream, write_stream):
            await self.app.run(
                read_stream,
                write_stream,
                self.app.create_initialization_options(),
            )


async def main(settings: Optional[Settings] = None):
    """Main entry point."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    server = MyChefServer(settings=settings)
    await server.run()


if __name__ == "__main__":
    asyncio.run(main())
