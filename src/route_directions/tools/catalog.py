"""Segment catalog tools: load_segments_from_gpx, add_catalog_segment, list_segments, clear_catalog."""

import logging

import gpxpy.gpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.gpx import parse_gpx_file
from ..models import GeoPoint, GeoSegment
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def register_catalog_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_segments_from_gpx(file_path: str) -> str:
        """Add every track of a GPX file to the segment catalog.

        Each pair of consecutive track points becomes one segment named
        after its track.
        **Next:** list_segments, then add_segment to start building a route.

        Args:
            file_path: Absolute path to a .gpx file.
        """
        try:
            segments = parse_gpx_file(file_path)
        except FileNotFoundError:
            return f"Error: GPX file not found at {file_path}"
        except (ValueError, gpxpy.gpx.GPXException) as e:
            return f"Error: Could not read {file_path}: {e}"

        if not segments:
            return "Error: GPX file has no tracks with at least two distinct points."

        state.catalog.extend(segments)
        names = sorted({seg.name for seg in segments})
        logger.info("Loaded %d segment(s) from %s", len(segments), file_path)
        return (
            f"Loaded {len(segments)} segment(s) from {len(names)} track(s): "
            f"{', '.join(names)}. Catalog now holds {len(state.catalog)} segment(s)."
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def add_catalog_segment(
        name: str,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
    ) -> str:
        """Add a single named segment to the catalog.

        **Next:** add_segment with the returned index to put it on the route.

        Args:
            name: Street or feature name, e.g. 'Hanita'.
            lat1/lon1: Start point in decimal degrees.
            lat2/lon2: End point in decimal degrees.
        """
        try:
            seg = GeoSegment(name, GeoPoint.from_degrees(lat1, lon1), GeoPoint.from_degrees(lat2, lon2))
        except ValueError as e:
            return f"Error: {e}"

        state.catalog.append(seg)
        return f"Added [{len(state.catalog) - 1}] {seg} ({seg.length:.3f} km)"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def list_segments() -> str:
        """List the catalog with the index to pass to add_segment."""
        try:
            require_state(state, catalog=True)
        except ValueError as e:
            return f"Error: {e}"

        return "\n".join(
            f"[{i}] {seg} ({seg.length:.3f} km, heading {seg.heading:.0f}°)"
            for i, seg in enumerate(state.catalog)
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def clear_catalog() -> str:
        """Remove every segment from the catalog. The current route is kept."""
        count = len(state.catalog)
        state.catalog = []
        return f"Catalog cleared ({count} segment(s) removed)."
