#!/usr/bin/env python3
"""
MCP Server SSE Example

Connects to a running WriteCraft Forms MCP server over SSE, lists its
tools and prints the form configuration of one content type.

Prerequisites:
    1. Start the server:
       writecraft-forms-mcp --transport sse --port 8080

    2. Health check:
       curl http://localhost:8080/health

Usage:
    python examples/mcp_sse_example.py [content_type]
"""

import asyncio
import json
import os
import sys

from mcp import ClientSession
from mcp.client.sse import sse_client


async def main(content_type: str) -> int:
    """Fetch a form configuration through the MCP server."""
    mcp_url = os.environ.get("MCP_URL", "http://localhost:8080/sse")

    print("=" * 60)
    print("WriteCraft Forms MCP SSE Example")
    print("=" * 60)
    print(f"MCP Server URL: {mcp_url}")
    print()

    async with sse_client(mcp_url) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            tools = await session.list_tools()
            print(f"Available tools ({len(tools.tools)}):")
            for tool in tools.tools:
                print(f"   - {tool.name}")
            print()

            result = await session.call_tool("get_form_config", {"content_type": content_type})
            payload = json.loads(result.content[0].text)
            if "error" in payload:
                print(f"Error: {payload['error']}")
                return 1

            form = payload["form"]
            print(f"{form['title']} ({len(form['tabs'])} tabs)")
            for tab in form["tabs"]:
                print(f"\n[{tab['label']}]")
                for field in tab["fields"]:
                    print(f"   {field['name']:<24} {field['type']}")

    return 0


if __name__ == "__main__":
    content_type = sys.argv[1] if len(sys.argv) > 1 else "character"
    sys.exit(asyncio.run(main(content_type)))
