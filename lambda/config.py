"""Configuration constants for the Bioregion Locator."""

# ZIP code lookup service
ZIP_LOOKUP_URL = 'https://api.zippopotam.us/us/{zip}'
ZIP_LOOKUP_TIMEOUT = 10  # seconds

# Geocode result cache
GEOCODE_CACHE_MAX = 1000
GEOCODE_CACHE_TTL = 7 * 24 * 60 * 60  # 7 days, in seconds

# S3 key prefixes
DATA_PREFIX = 'data/'

# Bioregion GeoJSON bundled with Lambda (overridable by an upload to S3)
BIOREGION_GEOJSON_FILENAME = 'bioregions.geojson'
BIOREGION_S3_KEY = f'{DATA_PREFIX}{BIOREGION_GEOJSON_FILENAME}'

# Published files for the static frontend
STATE_OPTIONS_KEY = f'{DATA_PREFIX}state-options.json'
STATE_BIOREGIONS_KEY = f'{DATA_PREFIX}state-bioregions.json'
LAST_UPDATED_KEY = f'{DATA_PREFIX}last-updated.json'

# User-facing messages returned by the lookup endpoint
MSG_EMPTY_INPUT = 'Please enter a ZIP code or state name'
MSG_NOT_FOUND = 'Location not found. Please try a valid ZIP code or state name.'
MSG_LOOKUP_ERROR = 'Error finding location. Please try again.'
