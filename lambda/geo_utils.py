"""Pure Python point-in-polygon using ray casting. No external dependencies.

Points are (lon, lat) pairs and polygons are lists of rings, GeoJSON style:
ring 0 is the exterior boundary and any further rings are holes. Both may
also be passed wrapped in a GeoJSON geometry or Feature dict.
"""

import json


class InvalidGeometryError(ValueError):
    """Raised when a point or polygon argument has no recognizable coordinates."""


def _unwrap(value, label):
    """Return the raw coordinates held by value.

    Accepts raw coordinate lists/tuples, GeoJSON geometries
    ({'coordinates': ...}) and GeoJSON Features ({'geometry': {...}}).
    """
    if isinstance(value, (list, tuple)):
        return value
    if isinstance(value, dict):
        if value.get('coordinates') is not None:
            return value['coordinates']
        geom = value.get('geometry')
        if isinstance(geom, dict) and geom.get('coordinates') is not None:
            return geom['coordinates']
    raise InvalidGeometryError(f'Invalid {label} format: {value!r}')


def _point_coords(point):
    coords = _unwrap(point, 'point')
    if len(coords) < 2:
        raise InvalidGeometryError(f'Invalid point format: {point!r}')
    return coords[0], coords[1]


def _valid_coords(ring):
    return [c for c in ring if isinstance(c, (list, tuple)) and len(c) >= 2]


def ray_cast_contains(point_lon, point_lat, polygon_coords):
    """Check if point (lon, lat) is inside a polygon ring.

    Uses the ray casting algorithm. polygon_coords is a list of [lon, lat] pairs.
    Vertices with fewer than two values are skipped.
    """
    polygon_coords = _valid_coords(polygon_coords)
    n = len(polygon_coords)
    inside = False
    x, y = point_lon, point_lat
    j = n - 1

    for i in range(n):
        xi, yi = polygon_coords[i][0], polygon_coords[i][1]
        xj, yj = polygon_coords[j][0], polygon_coords[j][1]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


def point_in_polygon(point, polygon):
    """Return True if point lies inside the polygon's exterior ring and no hole.

    Points exactly on an edge may land on either side.
    """
    x, y = _point_coords(point)
    rings = _unwrap(polygon, 'polygon')

    if not rings:
        return False

    # GeoJSON polygons: first ring is exterior, rest are holes
    if not ray_cast_contains(x, y, rings[0]):
        return False
    for hole in rings[1:]:
        if ray_cast_contains(x, y, hole):
            return False
    return True


def bounding_box(polygon):
    """Return (min_lon, min_lat, max_lon, max_lat) over every ring, holes included.

    A polygon without coordinates yields (inf, inf, -inf, -inf).
    Vertices with fewer than two values are ignored.
    """
    min_x = min_y = float('inf')
    max_x = max_y = float('-inf')
    for ring in _unwrap(polygon, 'polygon'):
        for coord in _valid_coords(ring):
            x, y = coord[0], coord[1]
            min_x = min(min_x, x)
            min_y = min(min_y, y)
            max_x = max(max_x, x)
            max_y = max(max_y, y)
    return min_x, min_y, max_x, max_y


def polygon_centroid(polygon):
    """Midpoint of the polygon's bounding box as (lon, lat).

    This is not the area-weighted centroid; it is only meant for placing labels.
    """
    min_x, min_y, max_x, max_y = bounding_box(polygon)
    if min_x > max_x:
        raise InvalidGeometryError('Cannot compute centroid of an empty polygon')
    return (min_x + max_x) / 2, (min_y + max_y) / 2


def bbox_contains(bbox, point):
    """Inclusive test of a (lon, lat) point against a bounding box."""
    x, y = _point_coords(point)
    min_x, min_y, max_x, max_y = bbox
    return min_x <= x <= max_x and min_y <= y <= max_y


def make_point(coordinates, properties=None):
    """Wrap a [lon, lat] pair in a GeoJSON Point Feature."""
    return {
        'type': 'Feature',
        'geometry': {
            'type': 'Point',
            'coordinates': coordinates,
        },
        'properties': properties if properties is not None else {},
    }


def extract_polygons(geometry):
    """Return the list of polygons held by a GeoJSON geometry dict.

    Polygon yields one polygon, MultiPolygon one per member; any other type
    yields an empty list.
    """
    geom_type = geometry.get('type')
    coords = geometry.get('coordinates')
    if not geom_type or coords is None:
        return []
    if geom_type == 'Polygon':
        return [[[(float(c[0]), float(c[1])) for c in ring] for ring in coords]]
    if geom_type == 'MultiPolygon':
        return [
            [[(float(c[0]), float(c[1])) for c in ring] for ring in polygon]
            for polygon in coords
        ]
    return []


def load_geojson(path):
    """Read a GeoJSON file from disk."""
    with open(path, 'r') as f:
        return json.load(f)
