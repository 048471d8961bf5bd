"""Tests for GeoFeature."""
import pytest
from pydantic import ValidationError

BASE_LAT = 32780000
BASE_LON = 35010000


def _pt(dlat: int = 0, dlon: int = 0):
    from route_directions.models import GeoPoint
    return GeoPoint(BASE_LAT + dlat, BASE_LON + dlon)


def _seg(name, a, b):
    from route_directions.models import GeoSegment
    return GeoSegment(name, _pt(*a), _pt(*b))


class TestGeoFeatureConstruction:
    def test_single_segment_mirrors_segment(self):
        from route_directions.core.feature import GeoFeature
        s = _seg("Hanita", (0, 0), (0, 1000))
        f = GeoFeature(s)
        assert f.name == "Hanita"
        assert f.start == s.p1
        assert f.end == s.p2
        assert f.start_heading == s.heading
        assert f.end_heading == s.heading
        assert f.length == pytest.approx(s.length)
        assert len(f) == 1

    def test_raw_sequence_is_validated(self):
        from route_directions.core.feature import GeoFeature
        a = _seg("Hanita", (0, 0), (1000, 0))
        b = _seg("Hanita", (1000, 0), (1000, 1000))
        f = GeoFeature(segments=(a, b))
        assert f.end == b.p2

    def test_raw_sequence_with_mixed_names_fails(self):
        from route_directions.core.feature import GeoFeature
        with pytest.raises(ValidationError):
            GeoFeature(segments=(
                _seg("Hanita", (0, 0), (1000, 0)),
                _seg("Hagalil", (1000, 0), (2000, 0)),
            ))

    def test_raw_sequence_with_gap_fails(self):
        from route_directions.core.feature import GeoFeature
        with pytest.raises(ValidationError):
            GeoFeature(segments=(
                _seg("Hanita", (0, 0), (1000, 0)),
                _seg("Hanita", (1001, 0), (2000, 0)),
            ))

    def test_empty_feature_fails(self):
        from route_directions.core.feature import GeoFeature
        with pytest.raises(ValidationError):
            GeoFeature(segments=())


class TestGeoFeatureAddSegment:
    def test_add_segment_extends_end(self):
        from route_directions.core.feature import GeoFeature
        first = _seg("Hanita", (0, 0), (1000, 0))
        second = _seg("Hanita", (1000, 0), (1000, 1000))
        f = GeoFeature(first)
        g = f.add_segment(second)
        assert g.end == second.p2
        assert g.end_heading == pytest.approx(90.0)
        assert g.start == first.p1
        assert g.start_heading == 0.0
        assert g.length == pytest.approx(f.length + second.length)
        assert list(g.geo_segments()) == [first, second]
        g.check_invariants()

    def test_add_segment_leaves_original_untouched(self):
        from route_directions.core.feature import GeoFeature
        first = _seg("Hanita", (0, 0), (1000, 0))
        f = GeoFeature(first)
        f.add_segment(_seg("Hanita", (1000, 0), (2000, 0)))
        assert list(f.geo_segments()) == [first]
        assert f.end == first.p2

    def test_name_mismatch(self):
        from route_directions.core.feature import GeoFeature
        from route_directions.errors import NameMismatchError
        f = GeoFeature(_seg("Hanita", (0, 0), (1000, 0)))
        before = f.model_copy()
        with pytest.raises(NameMismatchError):
            f.add_segment(_seg("Hagalil", (1000, 0), (2000, 0)))
        assert f == before

    def test_disconnected(self):
        from route_directions.core.feature import GeoFeature
        from route_directions.errors import DisconnectedError
        f = GeoFeature(_seg("Hanita", (0, 0), (1000, 0)))
        with pytest.raises(DisconnectedError):
            f.add_segment(_seg("Hanita", (1001, 0), (2000, 0)))
        assert len(f) == 1

    def test_name_is_checked_before_connectivity(self):
        from route_directions.core.feature import GeoFeature
        from route_directions.errors import NameMismatchError
        f = GeoFeature(_seg("Hanita", (0, 0), (1000, 0)))
        with pytest.raises(NameMismatchError):
            f.add_segment(_seg("Hagalil", (5, 5), (6, 6)))


class TestGeoFeatureTraversalAndEquality:
    def test_geo_segments_is_restartable(self):
        from route_directions.core.feature import GeoFeature
        f = GeoFeature(_seg("A", (0, 0), (1, 0))).add_segment(_seg("A", (1, 0), (2, 0)))
        first = f.geo_segments()
        second = f.geo_segments()
        assert next(first) == next(second)
        assert len(list(first)) == 1
        assert len(list(f.geo_segments())) == 2

    def test_equality_is_structural(self):
        from route_directions.core.feature import GeoFeature
        a = GeoFeature(_seg("A", (0, 0), (1, 0))).add_segment(_seg("A", (1, 0), (2, 0)))
        b = GeoFeature(_seg("A", (0, 0), (1, 0))).add_segment(_seg("A", (1, 0), (2, 0)))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_decomposition_is_not_equal(self):
        from route_directions.core.feature import GeoFeature
        split = GeoFeature(_seg("A", (0, 0), (1000, 0))).add_segment(_seg("A", (1000, 0), (2000, 0)))
        whole = GeoFeature(_seg("A", (0, 0), (2000, 0)))
        assert split.start == whole.start and split.end == whole.end
        assert split.length == pytest.approx(whole.length)
        assert split != whole

    def test_appended_feature_equals_validated_feature(self):
        from route_directions.core.feature import GeoFeature
        a = _seg("A", (0, 0), (1, 0))
        b = _seg("A", (1, 0), (2, 0))
        assert GeoFeature(a).add_segment(b) == GeoFeature(segments=(a, b))

    def test_str(self):
        from route_directions.core.feature import GeoFeature
        f = GeoFeature(_seg("Hanita", (0, 0), (1000, 0)))
        assert str(f) == "GeoFeature: Hanita (0.111 km, 1 segments)"
