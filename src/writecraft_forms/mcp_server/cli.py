"""
Command-line entry point for the WriteCraft Forms MCP server.
"""

import argparse
import asyncio
import logging
import sys

from writecraft_forms.config import get_config
from writecraft_forms.mcp_server.server import SERVICE_NAME, run_mcp_server


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        description="WriteCraft Forms MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Desktop client (stdio)
  writecraft-forms-mcp --transport stdio

  # Docker/Remote (SSE)
  writecraft-forms-mcp --transport sse --port 8080

  # Using environment variables
  MCP_TRANSPORT=sse MCP_PORT=8080 writecraft-forms-mcp

Environment Variables:
  MCP_TRANSPORT                Transport type: stdio or sse (default: stdio)
  MCP_HOST                     Host for SSE transport (default: 0.0.0.0)
  MCP_PORT                     Port for SSE transport (default: 8080)
  WRITECRAFT_LOG_LEVEL         Log level (default: INFO)
  WRITECRAFT_DEFAULT_TAB       Tab for fields without a tab hint (default: general)
  WRITECRAFT_STRICT_TAB_HINTS  Reject hints naming undeclared tabs (default: false)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default=config.mcp_host,
        help=f"Host for SSE transport (default: {config.mcp_host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=get_config().log_level)
    logger = logging.getLogger(SERVICE_NAME)

    # stdout carries the protocol in stdio mode, so announce on the log
    logger.info("WriteCraft Forms MCP Server, transport: %s", args.transport)
    if args.transport == "sse":
        logger.info("Listening on %s:%s", args.host, args.port)

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
