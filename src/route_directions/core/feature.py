"""GeoFeature: a run of connected segments sharing one name."""

import logging
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from route_directions.errors import DisconnectedError, NameMismatchError
from route_directions.models import GeoPoint, GeoSegment

logger = logging.getLogger(__name__)


class GeoFeature(BaseModel):
    """A route along a single geographic feature, e.g. one street or river.

    Built from one segment and extended only at its end. Every append
    returns a new feature; the original is left as it was. Because the
    feature need not be straight, ``length`` is the distance travelled
    along it, not the distance between its endpoints.

    Two features are equal when their segment sequences are equal, so the
    same stretch of road split at different points is a different feature.
    """
    model_config = ConfigDict(frozen=True)

    segments: tuple[GeoSegment, ...] = Field(min_length=1)

    def __init__(self, segment: Optional[GeoSegment] = None, /, **data):
        if segment is not None:
            data["segments"] = (segment,)
        super().__init__(**data)

    @model_validator(mode="after")
    def segments_must_form_one_feature(self) -> "GeoFeature":
        self.check_invariants()
        return self

    def check_invariants(self) -> None:
        """Scan the whole segment sequence and raise ValueError on a broken invariant."""
        if not self.segments:
            raise ValueError("A feature needs at least one segment")
        name = self.segments[0].name
        for i, seg in enumerate(self.segments):
            if seg.name != name:
                raise ValueError(
                    f"Segment {i} is named {seg.name!r}, feature is named {name!r}"
                )
            if i > 0 and self.segments[i - 1].p2 != seg.p1:
                raise ValueError(f"Segment {i} does not start where segment {i - 1} ends")

    @property
    def name(self) -> str:
        return self.segments[0].name

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

    def add_segment(self, gs: GeoSegment) -> "GeoFeature":
        """Return a new feature equal to this one with ``gs`` appended.

        Raises:
            NameMismatchError: gs is named differently from this feature.
            DisconnectedError: gs does not start at this feature's end.
        """
        if gs.name != self.name:
            raise NameMismatchError(
                f"Segment {gs.name!r} cannot extend feature {self.name!r}"
            )
        if gs.p1 != self.end:
            raise DisconnectedError(
                f"Segment must start at {self.end}, got {gs.p1}"
            )
        logger.debug("Extending feature %r to %d segments", self.name, len(self.segments) + 1)
        # preconditions above keep the invariants; skip the full rescan
        return GeoFeature.model_construct(segments=self.segments + (gs,))

    def geo_segments(self) -> Iterator[GeoSegment]:
        """Iterate over the segments from start to end."""
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return f"GeoFeature: {self.name} ({self.length:.3f} km, {len(self.segments)} segments)"
