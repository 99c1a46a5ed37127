"""
WriteCraft Forms MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for desktop clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py

The package must be installed (``pip install -e .``); the same entry point
is available as the ``writecraft-forms-mcp`` command.
"""

from writecraft_forms.mcp_server.cli import main

if __name__ == "__main__":
    main()
