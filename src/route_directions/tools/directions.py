"""Directions tools: set_directions_params, get_directions."""

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state, DirectionsParams
from ..core.directions import format_route
from ._prereqs import require_state


def register_directions_tools(mcp: FastMCP):

    @mcp.tool()
    def set_directions_params(
        travel_mode: str | None = None,
        minutes_per_km: float | None = None,
        straight_deg: float | None = None,
        slight_deg: float | None = None,
        sharp_deg: float | None = None,
        start_heading: float | None = None,
        use_route_heading: bool = False,
    ) -> str:
        """Set how directions are worded.

        Can be called any time; get_directions always uses the current values.
        Nothing changes if any argument is invalid.

        Args:
            travel_mode: 'walking' (reports minutes) or 'driving' (reports kilometers).
            minutes_per_km: Walking pace (default 20). Rejected in driving mode.
                Switching back to walking from driving restores the default
                pace unless this is given too.
            straight_deg: Below this heading change the turn is 'Continue straight' (default 1).
            slight_deg: Below this it is a slight turn (default 45).
            sharp_deg: From this on it is a sharp turn (default 120).
            start_heading: Heading (0-360) the traveller faces before the first feature.
            use_route_heading: Forget start_heading and face along the route instead.
        """
        current = state.directions
        data = current.model_dump()

        if travel_mode is not None or minutes_per_km is not None:
            mode = travel_mode or current.formatter.mode
            if mode == "driving" and minutes_per_km is not None:
                return "Error: minutes_per_km only applies to walking directions."
            formatter = {"mode": mode}
            if minutes_per_km is not None:
                formatter["minutes_per_km"] = minutes_per_km
            elif mode == "walking" and current.formatter.mode == "walking":
                formatter["minutes_per_km"] = current.formatter.minutes_per_km
            data["formatter"] = formatter

        for key, value in (("straight", straight_deg), ("slight", slight_deg), ("sharp", sharp_deg)):
            if value is not None:
                data["thresholds"][key] = value

        if use_route_heading:
            data["start_heading"] = None
        elif start_heading is not None:
            data["start_heading"] = start_heading

        try:
            p = DirectionsParams.model_validate(data)
        except ValueError as e:
            return f"Error: {e}"
        state.directions = p

        t = p.thresholds
        heading = "route" if p.start_heading is None else f"{p.start_heading:g}°"
        return (
            f"Directions: mode={p.formatter.mode}, thresholds "
            f"straight<{t.straight:g}° slight<{t.slight:g}° sharp>={t.sharp:g}°, "
            f"start heading={heading}"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_directions(start_heading: float | None = None) -> str:
        """Return turn-by-turn directions for the current route, one line per feature.

        **Requires:** at least one add_segment.

        Args:
            start_heading: Override the configured starting heading (0-360) for this call.
        """
        try:
            require_state(state, route=True)
        except ValueError as e:
            return f"Error: {e}"

        p = state.directions
        if start_heading is not None:
            try:
                p = p.model_copy(update={"start_heading": None})
                p.start_heading = start_heading
            except ValueError as e:
                return f"Error: {e}"

        return format_route(
            state.route,
            start_heading=p.start_heading,
            formatter=p.formatter,
            thresholds=p.thresholds,
        )
