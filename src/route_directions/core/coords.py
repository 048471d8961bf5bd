"""Flat-earth coordinate helpers.

Distances and headings use fixed km-per-degree factors measured near the
Technion (Haifa). They are only meaningful for points within a small
local area; no great-circle math is done anywhere.
"""

import math

MICRO_DEGREES = 1_000_000

MIN_LATITUDE = -90 * MICRO_DEGREES
MAX_LATITUDE = 90 * MICRO_DEGREES
MIN_LONGITUDE = -180 * MICRO_DEGREES
MAX_LONGITUDE = 180 * MICRO_DEGREES

KM_PER_DEGREE_LATITUDE = 110.901
KM_PER_DEGREE_LONGITUDE = 93.681


def to_micro_degrees(degrees: float) -> int:
    """Convert decimal degrees to the nearest millionth of a degree."""
    return int(round(degrees * MICRO_DEGREES))


def from_micro_degrees(micro: int) -> float:
    return micro / MICRO_DEGREES


def flat_earth_offset_km(
    lat1: int, lon1: int, lat2: int, lon2: int
) -> tuple[float, float]:
    """Return the (north_km, east_km) offset from point 1 to point 2.

    Inputs are in micro-degrees.
    """
    d_lat = (lat2 - lat1) / MICRO_DEGREES
    d_lon = (lon2 - lon1) / MICRO_DEGREES
    return d_lat * KM_PER_DEGREE_LATITUDE, d_lon * KM_PER_DEGREE_LONGITUDE


def offset_distance_km(north_km: float, east_km: float) -> float:
    return math.sqrt(north_km * north_km + east_km * east_km)


def offset_heading(north_km: float, east_km: float) -> float:
    """Compass heading of an offset: 0 = north, 90 = east, in [0, 360)."""
    h = math.degrees(math.atan2(east_km, north_km))
    if h < 0:
        h += 360.0
    return h
