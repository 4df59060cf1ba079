"""Geocoder: resolves US ZIP codes and state names/abbreviations to lat/lng."""

import json
import logging
import re
import time
import urllib.error
import urllib.request
from collections import OrderedDict, namedtuple

from config import (
    GEOCODE_CACHE_MAX,
    GEOCODE_CACHE_TTL,
    ZIP_LOOKUP_TIMEOUT,
    ZIP_LOOKUP_URL,
)
from state_centroids import STATE_CENTROIDS

logger = logging.getLogger(__name__)

ZIP_PATTERN = re.compile(r'\d{5}', re.ASCII)


class LocationResult(namedtuple('LocationResult', ['lat', 'lng', 'name'])):
    __slots__ = ()

    def to_dict(self):
        return {'lat': self.lat, 'lng': self.lng, 'name': self.name}


class ZipLookupClient:
    """Client for the Zippopotam.us ZIP code lookup service."""

    def __init__(self, timeout=ZIP_LOOKUP_TIMEOUT):
        self.timeout = timeout

    def _get(self, zip_code):
        """GET the lookup JSON for a ZIP. Returns None on a non-2xx response."""
        url = ZIP_LOOKUP_URL.format(zip=zip_code)
        req = urllib.request.Request(url)
        req.add_header('Accept', 'application/json')

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return json.loads(resp.read().decode('utf-8'))
        except urllib.error.HTTPError as e:
            logger.warning(f'ZIP code not found: {zip_code} (HTTP {e.code})')
            return None

    def lookup(self, zip_code):
        """Resolve a 5-digit ZIP to a LocationResult, or None if unknown.

        Network errors and malformed responses propagate to the caller.
        """
        data = self._get(zip_code)
        if data is None:
            return None
        if not isinstance(data, dict) or not isinstance(data.get('places', []), list):
            raise ValueError(f'Unexpected ZIP lookup response for {zip_code}: {data!r}')
        if not data.get('places'):
            return None

        place = data['places'][0]
        try:
            return LocationResult(
                lat=float(place['latitude']),
                lng=float(place['longitude']),
                name=f"{place['place name']}, {place['state abbreviation']} {zip_code}",
            )
        except (TypeError, AttributeError) as e:
            raise ValueError(f'Malformed place for {zip_code}: {place!r}') from e


class TTLCache:
    """Small in-memory cache with per-entry expiry and oldest-first eviction."""

    def __init__(self, max_size=GEOCODE_CACHE_MAX, ttl=GEOCODE_CACHE_TTL, clock=time.monotonic):
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._items = OrderedDict()

    def get(self, key):
        item = self._items.get(key)
        if item is None:
            return None
        value, expires = item
        if self._clock() > expires:
            del self._items[key]
            return None
        return value

    def set(self, key, value):
        if key in self._items:
            del self._items[key]
        elif len(self._items) >= self.max_size:
            self._items.popitem(last=False)
        self._items[key] = (value, self._clock() + self.ttl)

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)


def geocode_state(state_input):
    """Get the centroid for a state name or two-letter abbreviation."""
    text = state_input.upper().strip()

    entry = STATE_CENTROIDS.get(text)
    if entry is None:
        entry = next(
            (data for data in STATE_CENTROIDS.values() if data['name'].upper() == text),
            None,
        )
    if entry is None:
        return None

    return LocationResult(lat=entry['lat'], lng=entry['lng'], name=entry['name'])


def list_states():
    """State options for dropdowns, in table order."""
    return [
        {
            'code': code,
            'label': f"{data['name']} ({code})",
            'coordinates': {'lat': data['lat'], 'lng': data['lng']},
        }
        for code, data in STATE_CENTROIDS.items()
    ]


class Geocoder:
    """Dispatches location text to the ZIP or state path, caching ZIP hits."""

    def __init__(self, zip_client=None, cache=None):
        self.zip_client = zip_client or ZipLookupClient()
        self.cache = cache if cache is not None else TTLCache()

    def geocode(self, location):
        text = location.strip()

        if not ZIP_PATTERN.fullmatch(text):
            return geocode_state(text)

        cached = self.cache.get(text)
        if cached is not None:
            return cached

        result = self.zip_client.lookup(text)
        if result is not None:
            self.cache.set(text, result)
        return result


_default_geocoder = None


def get_geocoder():
    global _default_geocoder
    if _default_geocoder is None:
        _default_geocoder = Geocoder()
    return _default_geocoder


def geocode(location):
    """Resolve a ZIP code or state to a LocationResult, or None if not found."""
    return get_geocoder().geocode(location)
