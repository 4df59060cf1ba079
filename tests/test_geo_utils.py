import math
import random

import pytest

from geo_utils import (
    InvalidGeometryError,
    bbox_contains,
    bounding_box,
    extract_polygons,
    make_point,
    point_in_polygon,
    polygon_centroid,
    ray_cast_contains,
)

SQUARE = [[[0, 0], [0, 10], [10, 10], [10, 0]]]
SQUARE_WITH_HOLE = [
    [[0, 0], [0, 10], [10, 10], [10, 0]],
    [[4, 4], [4, 6], [6, 6], [6, 4]],
]
L_SHAPE = [[[0, 0], [10, 0], [10, 2], [2, 2], [2, 10], [0, 10]]]


def test_point_inside_square():
    assert point_in_polygon((5, 5), SQUARE) is True


def test_point_outside_square():
    assert point_in_polygon((15, 15), SQUARE) is False
    assert point_in_polygon((-1, 5), SQUARE) is False


def test_point_in_hole_is_excluded():
    assert point_in_polygon((5, 5), SQUARE_WITH_HOLE) is False


def test_point_between_exterior_and_hole():
    assert point_in_polygon((1, 1), SQUARE_WITH_HOLE) is True


def test_later_hole_still_excludes():
    polygon = SQUARE_WITH_HOLE + [[[7, 7], [7, 9], [9, 9], [9, 7]]]
    assert point_in_polygon((8, 8), polygon) is False
    assert point_in_polygon((1, 1), polygon) is True


def test_closed_ring_matches_open_ring():
    closed = [[[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]]]
    for pt in [(5, 5), (15, 15), (0.5, 9.5), (-0.5, 5)]:
        assert point_in_polygon(pt, closed) == point_in_polygon(pt, SQUARE)


def test_concave_polygon():
    assert point_in_polygon((1, 5), L_SHAPE) is True
    assert point_in_polygon((5, 1), L_SHAPE) is True
    assert point_in_polygon((5, 5), L_SHAPE) is False


def test_degenerate_polygons_are_outside():
    assert point_in_polygon((0, 0), []) is False
    assert point_in_polygon((0, 0), [[]]) is False
    assert point_in_polygon((0, 0), [[[0, 0]]]) is False
    assert point_in_polygon((1, 0), [[[0, 0], [2, 0]]]) is False
    assert point_in_polygon((0, 0), [[[0, 0], [1], [2, 2]]]) is False
    assert point_in_polygon((1, 1), [[[0, 0], [], None, [2, 2]]]) is False


def test_short_vertices_are_skipped():
    ring = [[0, 0], [0, 10], [5], [10, 10], [10, 0]]
    assert point_in_polygon((5, 5), [ring]) is True
    assert bounding_box([ring]) == (0, 0, 10, 10)
    assert bounding_box([[[3]]]) == bounding_box([])


@pytest.mark.parametrize('point, expected', [
    ((0, 5), True),
    ((10, 5), False),
    ((5, 0), True),
    ((5, 10), False),
    ((0, 0), True),
])
def test_edge_points_follow_strict_comparisons(point, expected):
    assert point_in_polygon(point, SQUARE) is expected


def test_feature_wrapped_inputs():
    polygon = {
        'type': 'Feature',
        'geometry': {'type': 'Polygon', 'coordinates': SQUARE_WITH_HOLE},
        'properties': {'name': 'square'},
    }
    geometry = {'type': 'Polygon', 'coordinates': SQUARE}

    assert point_in_polygon(make_point([1, 1]), polygon) is True
    assert point_in_polygon(make_point([5, 5]), polygon) is False
    assert point_in_polygon({'type': 'Point', 'coordinates': [5, 5]}, geometry) is True
    assert point_in_polygon([5, 5, 120.0], geometry) is True


@pytest.mark.parametrize('point', [None, 'here', {}, {'geometry': {}}, [1], ()])
def test_bad_point_shape_raises(point):
    with pytest.raises(InvalidGeometryError):
        point_in_polygon(point, SQUARE)


@pytest.mark.parametrize('polygon', [None, 42, {}, {'properties': {}}, {'geometry': None}])
def test_bad_polygon_shape_raises(polygon):
    with pytest.raises(InvalidGeometryError):
        point_in_polygon((5, 5), polygon)


def test_invalid_geometry_error_is_value_error():
    assert issubclass(InvalidGeometryError, ValueError)


def test_ray_cast_single_ring():
    ring = SQUARE[0]
    assert ray_cast_contains(5, 5, ring) is True
    assert ray_cast_contains(5, 11, ring) is False


def test_bounding_box_square():
    assert bounding_box(SQUARE) == (0, 0, 10, 10)


def test_bounding_box_includes_holes():
    polygon = [[[0, 0], [0, 1], [1, 1]], [[-5, 3], [2, 20], [1, 1]]]
    assert bounding_box(polygon) == (-5, 0, 2, 20)


def test_bounding_box_of_feature():
    feature = {'type': 'Feature', 'geometry': {'type': 'Polygon', 'coordinates': SQUARE}}
    assert bounding_box(feature) == (0, 0, 10, 10)


def test_bounding_box_empty_polygon():
    inf = float('inf')
    assert bounding_box([]) == (inf, inf, -inf, -inf)
    assert bounding_box([[]]) == (inf, inf, -inf, -inf)


def test_centroid_is_bbox_midpoint():
    assert polygon_centroid(SQUARE) == (5, 5)
    assert polygon_centroid(SQUARE_WITH_HOLE) == (5, 5)


def test_centroid_differs_from_area_centroid_for_l_shape():
    # Area-weighted centroid of the L: two rectangles 10x2 and 2x8
    area_x = (20 * 5 + 16 * 1) / 36
    area_y = (20 * 1 + 16 * 6) / 36

    cx, cy = polygon_centroid(L_SHAPE)

    assert (cx, cy) == (5, 5)
    assert not math.isclose(cx, area_x)
    assert not math.isclose(cy, area_y)


def test_centroid_of_empty_polygon_raises():
    with pytest.raises(InvalidGeometryError):
        polygon_centroid([])


def test_make_point_shape():
    feature = make_point([-118.4, 34.1], {'name': 'Beverly Hills'})
    assert feature == {
        'type': 'Feature',
        'geometry': {'type': 'Point', 'coordinates': [-118.4, 34.1]},
        'properties': {'name': 'Beverly Hills'},
    }
    assert make_point([0, 0])['properties'] == {}


def test_bbox_contains_is_inclusive():
    bbox = (0, 0, 10, 10)
    assert bbox_contains(bbox, (0, 0))
    assert bbox_contains(bbox, (10, 5))
    assert not bbox_contains(bbox, (10.01, 5))


def test_extract_polygons():
    assert extract_polygons({'type': 'Polygon', 'coordinates': SQUARE}) == [
        [[(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]]
    ]
    multi = extract_polygons({'type': 'MultiPolygon', 'coordinates': [SQUARE, SQUARE_WITH_HOLE]})
    assert len(multi) == 2
    assert len(multi[1]) == 2
    assert extract_polygons({'type': 'Point', 'coordinates': [0, 0]}) == []
    assert extract_polygons({}) == []


def test_results_are_repeatable_for_random_polygons():
    rng = random.Random(1234)
    for _ in range(50):
        ring = [[rng.uniform(-180, 180), rng.uniform(-90, 90)] for _ in range(rng.randint(3, 12))]
        polygon = [ring]
        point = (rng.uniform(-180, 180), rng.uniform(-90, 90))

        first = point_in_polygon(point, polygon)
        bbox = bounding_box(polygon)
        for _ in range(3):
            assert point_in_polygon(point, polygon) == first
            assert bounding_box(polygon) == bbox
