"""Maps geocoded locations onto bioregion polygons."""

import logging
import os

from config import BIOREGION_GEOJSON_FILENAME, BIOREGION_S3_KEY
from geo_utils import (
    bbox_contains,
    bounding_box,
    extract_polygons,
    load_geojson,
    point_in_polygon,
)
from geocoder import get_geocoder
from state_centroids import STATE_CENTROIDS

logger = logging.getLogger(__name__)


def load_regions(geojson):
    """Build region records from a GeoJSON FeatureCollection.

    Returns:
        list of dicts with keys: id, name, properties, polygons, bbox.
        Order follows the feature order of the collection.
    """
    regions = []
    for index, feature in enumerate(geojson.get('features', [])):
        props = feature.get('properties') or {}
        polygons = extract_polygons(feature.get('geometry') or {})
        if not polygons:
            logger.warning(f'Skipping feature {index}: no polygon geometry')
            continue

        min_xs, min_ys, max_xs, max_ys = zip(*(bounding_box(p) for p in polygons))
        regions.append({
            'id': str(props.get('id', feature.get('id', index))),
            'name': props.get('name', ''),
            'properties': props,
            'polygons': polygons,
            'bbox': (min(min_xs), min(min_ys), max(max_xs), max(max_ys)),
        })

    return regions


def load_region_file(geojson_path=None):
    """Load bioregions from a GeoJSON file, the bundled one by default."""
    if geojson_path is None:
        geojson_path = os.path.join(os.path.dirname(__file__), BIOREGION_GEOJSON_FILENAME)
    return load_regions(load_geojson(geojson_path))


def find_region(point, regions):
    """Return the first region containing point (lon, lat), or None.

    Overlapping regions are not disambiguated: iteration order wins.
    """
    for region in regions:
        if not bbox_contains(region['bbox'], point):
            continue
        for polygon in region['polygons']:
            if point_in_polygon(point, polygon):
                return region
    return None


def region_summary(region):
    """JSON-friendly view of a region, without its geometry."""
    if region is None:
        return None
    return {
        'id': region['id'],
        'name': region['name'],
        'properties': region['properties'],
    }


class RegionMapper:
    def __init__(self, s3=None, geocoder=None):
        self.s3 = s3
        self.geocoder = geocoder or get_geocoder()
        self._regions = None

    def get_regions(self):
        """Load bioregions from S3 if uploaded there, else from the bundled GeoJSON."""
        if self._regions is None:
            geojson = self.s3.read_json(BIOREGION_S3_KEY) if self.s3 else None
            if geojson:
                self._regions = load_regions(geojson)
                logger.info(f'Loaded {len(self._regions)} bioregions from s3://{self.s3.bucket}/{BIOREGION_S3_KEY}')
            else:
                self._regions = load_region_file()
                logger.info(f'Loaded {len(self._regions)} bundled bioregions')
        return self._regions

    def locate(self, location_text):
        """Geocode location_text and find the bioregion it falls in.

        Returns None if the location cannot be resolved. Network failures
        from the ZIP lookup propagate.
        """
        location = self.geocoder.geocode(location_text)
        if location is None:
            return None

        region = find_region((location.lng, location.lat), self.get_regions())
        return {
            'location': location.to_dict(),
            'bioregion': region_summary(region),
        }

    def build_state_bioregions(self):
        """Map every state abbreviation to the bioregion containing its centroid."""
        regions = self.get_regions()
        mapping = {}
        for code, data in STATE_CENTROIDS.items():
            region = find_region((data['lng'], data['lat']), regions)
            mapping[code] = {
                'name': data['name'],
                'bioregion': region_summary(region),
            }
        return mapping
