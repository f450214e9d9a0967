"""
MCP server exposing the my-chef recipe tools over stdio.
"""
