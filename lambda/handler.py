"""Lambda handlers for the Bioregion Locator.

lookup_handler answers API Gateway requests: it geocodes a ZIP code or
state and returns the bioregion containing it.

handler is triggered by EventBridge (and after a bioregion upload). It
precomputes state dropdown options and the state-to-bioregion map and
writes them as static JSON files to S3 for the frontend.
"""

import json
import logging
import os

from config import (
    MSG_EMPTY_INPUT,
    MSG_LOOKUP_ERROR,
    MSG_NOT_FOUND,
    STATE_BIOREGIONS_KEY,
    STATE_OPTIONS_KEY,
)
from geocoder import list_states
from region_mapper import RegionMapper
from s3_io import S3IO

logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO'))

_mapper = None


def _get_mapper():
    """Reuse the mapper (and its loaded regions) across warm invocations."""
    global _mapper
    if _mapper is None:
        bucket = os.environ.get('BUCKET_NAME')
        _mapper = RegionMapper(s3=S3IO(bucket=bucket) if bucket else None)
    return _mapper


def _response(status, body):
    return {
        'statusCode': status,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def _location_param(event):
    params = (event or {}).get('queryStringParameters') or {}
    location = params.get('location') or (event or {}).get('location') or ''
    return str(location).strip()


def lookup_handler(event, context):
    location = _location_param(event)
    if not location:
        return _response(400, {'error': MSG_EMPTY_INPUT})

    # URLError and socket timeouts are OSErrors; bad JSON raises ValueError
    try:
        result = _get_mapper().locate(location)
    except (OSError, ValueError, KeyError):
        logger.exception(f'Lookup failed for {location!r}')
        return _response(502, {'error': MSG_LOOKUP_ERROR})

    if result is None:
        logger.info(f'No match for {location!r}')
        return _response(404, {'error': MSG_NOT_FOUND})

    bioregion = result['bioregion']
    logger.info(f"{location!r} -> {bioregion['name'] if bioregion else 'no bioregion'}")
    return _response(200, result)


def handler(event, context):
    global _mapper
    s3 = S3IO(bucket=os.environ['BUCKET_NAME'])
    mapper = RegionMapper(s3=s3)

    # 1. Load bioregion boundaries
    regions = mapper.get_regions()

    # 2. State options for the location dropdown
    states = list_states()
    s3.write_json(STATE_OPTIONS_KEY, {'states': states})

    # 3. Map each state centroid to a bioregion
    state_bioregions = mapper.build_state_bioregions()
    mapped = sum(1 for s in state_bioregions.values() if s['bioregion'] is not None)
    s3.write_json(STATE_BIOREGIONS_KEY, {'states': state_bioregions})
    logger.info(f'Mapped {mapped} of {len(state_bioregions)} states to bioregions')

    # 4. Write status file
    s3.write_last_updated(len(states), mapped, len(regions))

    # Lookups in this container reload the regions on their next call
    _mapper = None

    msg = f'Published {len(states)} states across {len(regions)} bioregions'
    logger.info(msg)
    return {'statusCode': 200, 'body': msg}
