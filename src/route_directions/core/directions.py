"""Turn classification and turn-by-turn text formatting.

Each feature of a route becomes one line of the form

    Turn sharp left onto Hanita and walk for 27 minutes.

The turn is taken from the heading the traveller arrives with to the
feature's start heading. The duration phrase depends on the travel mode.
"""

import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from route_directions.core.feature import GeoFeature
from route_directions.core.models import DEFAULT_THRESHOLDS, TurnDescriptor, TurnThresholds
from route_directions.core.route import Route


def normalize_delta(from_heading: float, to_heading: float) -> float:
    """Signed heading change in (-180, 180]; positive turns are to the right."""
    delta = (to_heading - from_heading) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def classify_turn(
    from_heading: float,
    to_heading: float,
    thresholds: TurnThresholds = DEFAULT_THRESHOLDS,
) -> TurnDescriptor:
    """Classify the change from ``from_heading`` to ``to_heading``.

    A full reversal (delta of exactly 180) counts as a left turn.
    """
    delta = normalize_delta(from_heading, to_heading)
    magnitude = abs(delta)

    if magnitude < thresholds.straight:
        return TurnDescriptor(delta=delta, direction="straight", severity="straight")

    direction = "right" if 0 < delta < 180.0 else "left"
    if magnitude < thresholds.slight:
        severity = "slight"
    elif magnitude < thresholds.sharp:
        severity = "normal"
    else:
        severity = "sharp"
    return TurnDescriptor(delta=delta, direction=direction, severity=severity)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for non-negative values."""
    return int(math.floor(value + 0.5))


class WalkingFormatter(BaseModel):
    """Directions for a pedestrian: length is reported as walking time."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["walking"] = "walking"
    minutes_per_km: float = Field(default=20.0, gt=0)

    def duration_phrase(self, length_km: float) -> str:
        minutes = round_half_up(length_km * self.minutes_per_km)
        unit = "minute" if minutes == 1 else "minutes"
        return f"walk for {minutes} {unit}"


class DrivingFormatter(BaseModel):
    """Directions for a driver: length is reported as distance."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["driving"] = "driving"

    def duration_phrase(self, length_km: float) -> str:
        return f"go {length_km:.1f} kilometers"


RouteFormatter = Annotated[
    Union[WalkingFormatter, DrivingFormatter], Field(discriminator="mode")
]

WALKING = WalkingFormatter()
DRIVING = DrivingFormatter()


def format_feature_line(
    feature: GeoFeature,
    incoming_heading: float,
    formatter: RouteFormatter = WALKING,
    thresholds: TurnThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """One newline-terminated instruction for travelling along ``feature``."""
    turn = classify_turn(incoming_heading, feature.start_heading, thresholds)
    return f"{turn.phrase} onto {feature.name} and {formatter.duration_phrase(feature.length)}.\n"


def format_route(
    route: Route,
    start_heading: Optional[float] = None,
    formatter: RouteFormatter = WALKING,
    thresholds: TurnThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Directions for a whole route, one line per feature.

    The first feature is entered from ``start_heading`` (default: the
    route's own start heading, so it reads "Continue straight"). Every
    later feature is entered from the end heading of the one before it.
    """
    heading = route.start_heading if start_heading is None else start_heading
    lines = []
    for feature in route.geo_features():
        lines.append(format_feature_line(feature, heading, formatter, thresholds))
        heading = feature.end_heading
    return "".join(lines)
