import pytest

from geojsonspec import (
    InvalidObjectError,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def ring(*positions):
    return LineString([Point(p) for p in positions])


class TestPoint:
    def test_decode(self):
        p = Point.decode([1.0, 1.0])
        assert p.longitude == 1.0
        assert p.latitude == 1.0
        assert p.easting == 1.0
        assert p.northing == 1.0
        assert p.altitude is None
        assert len(p) == 2

    def test_decode_with_altitude(self):
        p = Point.decode([1, 2, 3.5])
        assert p.coordinates == (1.0, 2.0, 3.5)
        assert p.altitude == 3.5
        assert list(p) == [1.0, 2.0, 3.5]
        assert p[2] == 3.5

    def test_ints_become_floats(self):
        p = Point((1, 2))
        assert all(type(c) is float for c in p.coordinates)

    def test_encode_integral_values_as_ints(self):
        out = Point.decode([1.0, 0.0]).encode()
        assert out == [1, 0]
        assert all(type(c) is int for c in out)

    def test_encode_preserves_fractions_and_altitude(self):
        assert Point.decode([1.5, -2.25, 10.0]).encode() == [1.5, -2.25, 10]

    @pytest.mark.parametrize(
        "obj",
        [
            [],
            [1.0],
            "ab",
            None,
            1.0,
            {"x": 1, "y": 2},
            [1.0, "2"],
            [True, 1.0],
            [1.0, None],
            [float("nan"), 0.0],
            [0.0, float("inf")],
            {2.0, 1.0},
            frozenset([1.0, 2.0]),
        ],
    )
    def test_decode_invalid(self, obj):
        with pytest.raises(InvalidObjectError):
            Point.decode(obj)

    def test_construct_too_short(self):
        with pytest.raises(InvalidObjectError, match="at least 2"):
            Point((1.0,))

    def test_equality(self):
        assert Point((1, 2)) == Point((1.0, 2.0))
        assert Point((1, 2)) != Point((1, 3))
        assert Point((1, 2)) != Point((1, 2, 0))

    def test_frozen(self):
        p = Point((1, 2))
        with pytest.raises(AttributeError):
            p.coordinates = (3.0, 4.0)

    def test_replace(self):
        p = Point((1, 2))
        p2 = p.replace(0, 5)
        assert p2 == Point((5, 2))
        assert p == Point((1, 2))

    def test_replace_out_of_range(self):
        with pytest.raises(IndexError):
            Point((1, 2)).replace(2, 1.0)

    def test_replace_invalid(self):
        with pytest.raises(InvalidObjectError):
            Point((1, 2)).replace(0, "x")


class TestLineString:
    def test_decode(self):
        line = LineString.decode([[0, 0], [1, 1]])
        assert len(line) == 2
        assert line[1] == Point((1, 1))
        assert not line.is_linear_ring()

    def test_empty(self):
        line = LineString.decode([])
        assert len(line) == 0
        assert line.encode() == []
        assert not line.is_linear_ring()

    def test_is_linear_ring(self):
        line = LineString.decode([[0, 0], [1, 1], [2, 2], [0, 0]])
        assert line.is_linear_ring()
        # pure predicate
        assert line.is_linear_ring()

    @pytest.mark.parametrize(
        "coords",
        [
            [[0, 0], [1, 1], [0, 0]],
            [[0, 0], [1, 1], [2, 2], [3, 3]],
            [[0, 0], [1, 1], [2, 2], [0, 0, 0]],
        ],
    )
    def test_not_linear_ring(self, coords):
        assert not LineString.decode(coords).is_linear_ring()

    @pytest.mark.parametrize(
        "obj",
        [
            None,
            "abc",
            {"coordinates": []},
            [[0, 0], [1]],
            [[0, 0], 1],
            {(0.0, 0.0), (1.0, 1.0)},
            frozenset([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]),
        ],
    )
    def test_decode_invalid(self, obj):
        with pytest.raises(InvalidObjectError):
            LineString.decode(obj)

    def test_construct_requires_points(self):
        with pytest.raises(InvalidObjectError, match="Expected `Point`"):
            LineString([[0.0, 0.0]])

    def test_encode(self):
        line = LineString.decode([[0.5, 0], [1, 1.5]])
        assert line.encode() == [[0.5, 0], [1, 1.5]]

    def test_replace(self):
        line = LineString.decode([[0, 0], [1, 1]])
        assert line.replace(1, Point((2, 2))).encode() == [[0, 0], [2, 2]]
        with pytest.raises(InvalidObjectError):
            line.replace(1, [2, 2])


class TestMultiPoint:
    def test_decode_encode(self):
        mp = MultiPoint.decode([[0, 0], [1.5, 2]])
        assert mp.points == (Point((0, 0)), Point((1.5, 2)))
        assert mp.encode() == [[0, 0], [1.5, 2]]

    def test_invalid_member(self):
        with pytest.raises(InvalidObjectError):
            MultiPoint.decode([[0, 0], [1]])


class TestMultiLineString:
    def test_members_need_not_be_rings(self):
        mls = MultiLineString.decode([[[0, 0], [1, 1]], [], [[2, 2], [3, 3]]])
        assert [len(line) for line in mls] == [2, 0, 2]
        assert mls.encode() == [[[0, 0], [1, 1]], [], [[2, 2], [3, 3]]]

    def test_invalid_member(self):
        with pytest.raises(InvalidObjectError):
            MultiLineString.decode([[[0, 0], [1, 1]], [0, 0]])


class TestPolygon:
    def test_decode(self):
        polygon = Polygon.decode([[[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [0.0, 0.0]]])
        assert len(polygon.linear_rings) == 1
        assert len(polygon.linear_rings[0]) == 4
        assert polygon.linear_rings[0].is_linear_ring()
        assert polygon[0][2].longitude == 2.0
        assert polygon.encode() == [[[0, 0], [1, 1], [2, 2], [0, 0]]]

    def test_zero_rings(self):
        polygon = Polygon.decode([])
        assert len(polygon.linear_rings) == 0
        assert polygon.encode() == []

    def test_encode_two_rings(self):
        polygon = Polygon(
            [
                ring((0, 0), (1, 1), (2, 2), (0, 0)),
                ring((10, 10), (11, 11), (12, 12), (10, 10)),
            ]
        )
        assert polygon.encode() == [
            [[0, 0], [1, 1], [2, 2], [0, 0]],
            [[10, 10], [11, 11], [12, 12], [10, 10]],
        ]

    @pytest.mark.parametrize(
        "obj",
        [
            [[[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]],
            [[[0.0, 0.0], [1.0, 1.0], [0.0, 0.0]]],
            [[0.0, 1.0], {"invalid": 2.0}],
            [[[0, 0], [1, 1], [2, 2], [0, 0]], [[0, 0], [1, 1]]],
            {"coordinates": []},
        ],
    )
    def test_decode_invalid(self, obj):
        with pytest.raises(InvalidObjectError):
            Polygon.decode(obj)

    def test_construct_with_open_ring(self):
        with pytest.raises(InvalidObjectError, match="closed"):
            Polygon([ring((0, 0), (1, 1), (2, 2), (3, 3))])

    def test_replace_revalidates(self):
        polygon = Polygon([ring((0, 0), (1, 1), (2, 2), (0, 0))])
        with pytest.raises(InvalidObjectError):
            polygon.replace(0, ring((0, 0), (1, 1)))
        assert polygon.linear_rings[0].is_linear_ring()


class TestMultiPolygon:
    def test_decode(self):
        mp = MultiPolygon.decode(
            [
                [
                    [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [0.0, 0.0]],
                    [[0.5, 0.5], [1.5, 1.5], [2.5, 2.5], [0.5, 0.5]],
                ],
                [[[10.0, 10.0], [11.0, 11.0], [12.0, 12.0], [10.0, 10.0]]],
            ]
        )
        assert len(mp.polygons) == 2
        assert len(mp.polygons[0].linear_rings) == 2
        assert len(mp.polygons[1].linear_rings) == 1
        assert mp.polygons[1].linear_rings[0].points[2].latitude == 12.0

    def test_empty(self):
        mp = MultiPolygon.decode([])
        assert len(mp.polygons) == 0
        assert mp.encode() == []

    def test_encode(self):
        first = Polygon([ring((0, 0), (1, 1), (2, 2), (0, 0))])
        second = Polygon([ring((10, 10), (11, 11), (12, 12), (10, 10))])
        assert MultiPolygon([first, second]).encode() == [
            [[[0, 0], [1, 1], [2, 2], [0, 0]]],
            [[[10, 10], [11, 11], [12, 12], [10, 10]]],
        ]

    @pytest.mark.parametrize(
        "obj",
        [
            [[[0.0, 0.0]]],
            [[0.0, 1.0], {"invalid": 2.0}],
            [[[[0, 0], [1, 1], [2, 2], [3, 3]]]],
        ],
    )
    def test_decode_invalid(self, obj):
        with pytest.raises(InvalidObjectError):
            MultiPolygon.decode(obj)
