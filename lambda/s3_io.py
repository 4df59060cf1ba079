"""S3 I/O helpers for reading bioregion data and writing published JSON."""

import boto3
import json
import logging
from datetime import datetime, timezone

from botocore.exceptions import ClientError

from config import LAST_UPDATED_KEY

logger = logging.getLogger(__name__)


class S3IO:
    def __init__(self, bucket, client=None):
        self.s3 = client or boto3.client('s3')
        self.bucket = bucket

    def write_json(self, key, data):
        """Write JSON file to S3 with cache headers."""
        self.s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=json.dumps(data, separators=(',', ':')).encode('utf-8'),
            ContentType='application/json',
            CacheControl='public, max-age=3600',
        )
        logger.info(f'Wrote s3://{self.bucket}/{key}')

    def read_json(self, key):
        """Read JSON file from S3. Returns None if not found."""
        try:
            obj = self.s3.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') in ('NoSuchKey', '404'):
                return None
            raise
        return json.loads(obj['Body'].read().decode('utf-8'))

    def write_last_updated(self, state_count, mapped_count, region_count):
        """Write status file."""
        self.write_json(LAST_UPDATED_KEY, {
            'last_run': datetime.now(timezone.utc).isoformat(),
            'status': 'success',
            'states': state_count,
            'states_in_bioregion': mapped_count,
            'bioregions': region_count,
        })
