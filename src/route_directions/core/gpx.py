"""GPX file parsing into named segments."""

import logging

import gpxpy

from route_directions.models import GeoPoint, GeoSegment

logger = logging.getLogger(__name__)


def parse_gpx_file(filepath: str) -> list[GeoSegment]:
    """Parse a GPX file and turn each track into consecutive segments.

    Segments take the track's name. Track segments (GPX <trkseg>) are
    chained in order; consecutive duplicate points are skipped so no
    zero-length segments are produced.
    """
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)

    segments = []
    for track in gpx.tracks:
        name = track.name or "Unnamed Track"
        prev = None
        skipped = 0
        for trkseg in track.segments:
            for point in trkseg.points:
                current = GeoPoint.from_degrees(point.latitude, point.longitude)
                if prev is not None:
                    if current == prev:
                        skipped += 1
                        continue
                    segments.append(GeoSegment(name, prev, current))
                prev = current
        if skipped:
            logger.debug("Skipped %d duplicate point(s) in track %r", skipped, name)

    return segments
