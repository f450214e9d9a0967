"""
MCP tool implementations.
"""

from .recipe_tools import RecipeTools, ToolArgumentError, build_tool_definitions

__all__ = ["RecipeTools", "ToolArgumentError", "build_tool_definitions"]
