"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, catalog: bool = False, route: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, route=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if catalog and not state.catalog:
        raise ValueError(
            "The segment catalog is empty. Load segments with "
            "load_segments_from_gpx or add_catalog_segment."
        )
    if route and state.route is None:
        raise ValueError(
            "No route yet. Start one by picking a segment with add_segment."
        )
