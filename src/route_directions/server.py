"""MCP server for route-directions.

Registers all tools and runs via stdio transport.
"""

import json

from mcp.server.fastmcp import FastMCP

from .state import state
from .tools.catalog import register_catalog_tools
from .tools.route import register_route_tools
from .tools.directions import register_directions_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "route-directions",
    instructions="Build a route from named street segments and get turn-by-turn walking or driving directions",
)

# Register all tool groups
register_catalog_tools(mcp)
register_route_tools(mcp)
register_directions_tools(mcp)
register_status_tools(mcp)


@mcp.resource("state://session")
def session_state() -> str:
    """Current session summary as JSON."""
    return json.dumps(state.summary(), indent=2)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
