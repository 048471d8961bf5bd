"""Route: a connected chain of segments, grouped into named features."""

import logging
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from route_directions.core.feature import GeoFeature
from route_directions.errors import DisconnectedError
from route_directions.models import GeoPoint, GeoSegment

logger = logging.getLogger(__name__)


class Route(BaseModel):
    """A path through arbitrary segments, regardless of their names.

    The same path is also available as a sequence of features, where
    consecutive same-named segments are merged and no two adjacent
    features share a name. Routes are immutable: ``add_segment`` returns a
    new route.
    """
    model_config = ConfigDict(frozen=True)

    segments: tuple[GeoSegment, ...] = Field(min_length=1)
    features: tuple[GeoFeature, ...] = Field(min_length=1)

    def __init__(self, segment: Optional[GeoSegment] = None, /, **data):
        if segment is not None:
            data["segments"] = (segment,)
            data["features"] = (GeoFeature(segment),)
        super().__init__(**data)

    @classmethod
    def from_segments(cls, segments: Iterable[GeoSegment]) -> "Route":
        """Build a route by appending each segment in turn.

        Raises:
            ValueError: no segments were given.
            DisconnectedError: a segment does not continue the chain.
        """
        route = None
        for seg in segments:
            route = cls(seg) if route is None else route.add_segment(seg)
        if route is None:
            raise ValueError("A route needs at least one segment")
        return route

    @model_validator(mode="after")
    def features_must_cover_segments(self) -> "Route":
        self.check_invariants()
        return self

    def check_invariants(self) -> None:
        """Scan segments and features and raise ValueError on a broken invariant."""
        for i in range(1, len(self.segments)):
            if self.segments[i - 1].p2 != self.segments[i].p1:
                raise ValueError(f"Segment {i} does not start where segment {i - 1} ends")

        covered: list[GeoSegment] = []
        for i, feature in enumerate(self.features):
            feature.check_invariants()
            if i > 0:
                prev = self.features[i - 1]
                if prev.name == feature.name:
                    raise ValueError(f"Features {i - 1} and {i} are both named {feature.name!r}")
                if prev.end != feature.start:
                    raise ValueError(f"Feature {i} does not start where feature {i - 1} ends")
            covered.extend(feature.segments)

        if tuple(covered) != self.segments:
            raise ValueError("Features do not cover the route's segments in order")

    @property
    def start(self) -> GeoPoint:
        return self.segments[0].p1

    @property
    def end(self) -> GeoPoint:
        return self.segments[-1].p2

    @property
    def start_heading(self) -> float:
        return self.segments[0].heading

    @property
    def end_heading(self) -> float:
        return self.segments[-1].heading

    @property
    def length(self) -> float:
        return sum(seg.length for seg in self.segments)

    def add_segment(self, gs: GeoSegment) -> "Route":
        """Return a new route equal to this one with ``gs`` appended.

        A segment named like the last feature extends that feature;
        any other name starts a new feature.

        Raises:
            DisconnectedError: gs does not start at this route's end.
        """
        if gs.p1 != self.end:
            raise DisconnectedError(
                f"Segment must start at the route end {self.end}, got {gs.p1}"
            )

        last = self.features[-1]
        if gs.name == last.name:
            features = self.features[:-1] + (last.add_segment(gs),)
        else:
            logger.debug("Starting feature %r at %s", gs.name, gs.p1)
            features = self.features + (GeoFeature(gs),)

        return Route.model_construct(segments=self.segments + (gs,), features=features)

    def geo_features(self) -> Iterator[GeoFeature]:
        """Iterate over the features from start to end."""
        return iter(self.features)

    def geo_segments(self) -> Iterator[GeoSegment]:
        """Iterate over the segments from start to end."""
        return iter(self.segments)

    def __eq__(self, other: object) -> bool:
        # features fully determine the segments
        if not isinstance(other, Route):
            return NotImplemented
        return self.features == other.features

    def __hash__(self) -> int:
        return hash(self.features)

    def __str__(self) -> str:
        return (
            f"Route: {self.start} -> {self.end} "
            f"({self.length:.3f} km, {len(self.features)} features, {len(self.segments)} segments)"
        )
