"""Command-line interface for the Railway MCP server."""
