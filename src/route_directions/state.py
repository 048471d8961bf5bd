"""Session state for the route-directions MCP server.

Holds the catalog of segments the user can pick from, the route built so
far, and the parameters used to format directions.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from route_directions.core.directions import RouteFormatter, WalkingFormatter
from route_directions.core.models import TurnThresholds
from route_directions.core.route import Route
from route_directions.models import GeoSegment


class DirectionsParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    formatter: RouteFormatter = Field(default_factory=WalkingFormatter)
    thresholds: TurnThresholds = Field(default_factory=TurnThresholds)
    start_heading: Optional[float] = Field(default=None, ge=0, lt=360, allow_inf_nan=False)


class SessionState(BaseModel):
    catalog: list[GeoSegment] = []
    route: Optional[Route] = None
    directions: DirectionsParams = Field(default_factory=DirectionsParams)

    def summary(self) -> dict:
        route = self.route
        return {
            "catalog": {
                "segments": len(self.catalog),
                "names": sorted({seg.name for seg in self.catalog}),
            },
            "route": {
                "started": True,
                "start": str(route.start),
                "end": str(route.end),
                "length_km": round(route.length, 3),
                "segments": len(route.segments),
                "features": [f.name for f in route.features],
            } if route is not None else {"started": False},
            "directions": {
                "travel_mode": self.directions.formatter.mode,
                "start_heading": self.directions.start_heading,
                "thresholds": self.directions.thresholds.model_dump(),
            },
        }


# Global session state, one per MCP server process
state = SessionState()
