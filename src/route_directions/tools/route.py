"""Route building tools: add_segment, reset_route."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.route import Route
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def register_route_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def add_segment(index: int, reverse: bool = False) -> str:
        """Append a catalog segment to the end of the route.

        The first segment picked starts the route. Every later segment must
        start where the route currently ends; otherwise the route is left
        unchanged and an error is returned.
        **Prior:** list_segments to find the index.
        **Next:** add more segments, or get_directions.

        Args:
            index: Catalog index as shown by list_segments.
            reverse: Travel the segment from its second point to its first.
        """
        try:
            require_state(state, catalog=True)
        except ValueError as e:
            return f"Error: {e}"

        if not 0 <= index < len(state.catalog):
            return f"Error: No segment at index {index} (catalog has {len(state.catalog)})."

        seg = state.catalog[index]
        if reverse:
            seg = seg.reverse()

        if state.route is None:
            state.route = Route(seg)
        else:
            try:
                state.route = state.route.add_segment(seg)
            except ValueError as e:
                logger.warning("Rejected segment %s: %s", seg, e)
                return f"Error: {e}"

        r = state.route
        return (
            f"Added {seg}. Route: {len(r.segments)} segment(s), "
            f"{len(r.features)} feature(s), {r.length:.3f} km, ends at {r.end}"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def reset_route() -> str:
        """Discard the current route. The catalog is kept."""
        state.route = None
        logger.info("Route reset")
        return "Route cleared. Pick a segment with add_segment to start a new one."
