"""
MCP server entry point for pinout diagrams.
"""
import logging
import sys

from mcp.server.fastmcp import FastMCP

from . import config
from .tools.pinout_tools import register_pinout_tools

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    """Log to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_server() -> FastMCP:
    """Create the MCP server with all pinout tools registered."""
    mcp = FastMCP(config.SERVER_NAME)
    register_pinout_tools(mcp)
    logger.debug("Registered pinout tools on %s", config.SERVER_NAME)
    return mcp


def main() -> None:
    configure_logging()
    create_server().run()


if __name__ == "__main__":
    main()
