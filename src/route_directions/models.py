"""Pydantic domain models for points and segments on the map."""

import functools

from pydantic import BaseModel, ConfigDict, Field

from route_directions.core.coords import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    flat_earth_offset_km,
    from_micro_degrees,
    offset_distance_km,
    offset_heading,
    to_micro_degrees,
)
from route_directions.errors import OutOfRangeError


@functools.total_ordering
class GeoPoint(BaseModel):
    """A point on the earth, stored in millionths of a degree.

    North latitudes and east longitudes are positive. Equality, hashing and
    ordering only ever look at the two integers.
    """
    model_config = ConfigDict(frozen=True)

    latitude: int = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    longitude: int = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)

    def __init__(self, latitude: int, longitude: int, **data):
        if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
            raise OutOfRangeError(
                f"Latitude {latitude} is outside [{MIN_LATITUDE}, {MAX_LATITUDE}]"
            )
        if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
            raise OutOfRangeError(
                f"Longitude {longitude} is outside [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
            )
        super().__init__(latitude=latitude, longitude=longitude, **data)

    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> "GeoPoint":
        """Build a point from decimal degrees, rounding to micro-degrees."""
        return cls(to_micro_degrees(lat), to_micro_degrees(lon))

    @property
    def lat_degrees(self) -> float:
        return from_micro_degrees(self.latitude)

    @property
    def lon_degrees(self) -> float:
        return from_micro_degrees(self.longitude)

    def distance_to(self, other: "GeoPoint") -> float:
        """Flat-earth distance to ``other`` in kilometers."""
        north_km, east_km = flat_earth_offset_km(
            self.latitude, self.longitude, other.latitude, other.longitude
        )
        return offset_distance_km(north_km, east_km)

    def heading_to(self, other: "GeoPoint") -> float:
        """Compass heading from this point to ``other``, in [0, 360).

        The heading between identical points is undefined, so asking for it
        is an error. Callers with possibly zero-length segments should use
        GeoSegment.heading instead.
        """
        if self == other:
            raise ValueError(f"Heading from {self} to itself is undefined")
        north_km, east_km = flat_earth_offset_km(
            self.latitude, self.longitude, other.latitude, other.longitude
        )
        return offset_heading(north_km, east_km)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return (self.latitude, self.longitude) < (other.latitude, other.longitude)

    def __str__(self) -> str:
        return f"({self.lat_degrees:.6f}°, {self.lon_degrees:.6f}°)"


class GeoSegment(BaseModel):
    """A named straight line between two points.

    The name tells apart segments with identical endpoints, e.g. two streets
    sharing a stretch. Length is in kilometers and heading is the compass
    heading from p1 to p2.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    p1: GeoPoint
    p2: GeoPoint

    def __init__(self, name: str, p1: GeoPoint, p2: GeoPoint, **data):
        super().__init__(name=name, p1=p1, p2=p2, **data)

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    @property
    def heading(self) -> float:
        # zero-length segments have no direction; report north
        if self.p1 == self.p2:
            return 0.0
        return self.p1.heading_to(self.p2)

    def reverse(self) -> "GeoSegment":
        return GeoSegment(self.name, self.p2, self.p1)

    def __str__(self) -> str:
        return f"GeoSegment: {self.name} [{self.p1}, {self.p2}]"
