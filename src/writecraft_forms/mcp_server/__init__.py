"""
MCP Server module for WriteCraft Forms.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from writecraft_forms.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from writecraft_forms.mcp_server.tools import dispatch_tool, get_mcp_tools

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "dispatch_tool",
    "get_mcp_tools",
]
