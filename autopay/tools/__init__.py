"""
MCP tools package.

Exposes the factory that builds the FastMCP server with every tool registered.
"""

from autopay.tools.server import DASHBOARD_RESOURCE_URI, SERVER_NAME, create_mcp_server

__all__ = ["DASHBOARD_RESOURCE_URI", "SERVER_NAME", "create_mcp_server"]
