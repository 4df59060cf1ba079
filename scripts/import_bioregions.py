#!/usr/bin/env python3
"""Upload a bioregion GeoJSON file to S3 and republish the static data files.

The file is validated by loading it the same way the Lambda does; features
without Polygon/MultiPolygon geometry are reported and skipped. Once
uploaded it replaces the bundled bioregions. The publisher reads it on
every run; lookup containers that are already warm keep their loaded
regions until their next cold start.

Usage:
    python3 scripts/import_bioregions.py path/to/bioregions.geojson
    python3 scripts/import_bioregions.py regions.geojson --bucket my-bucket --no-invoke
"""

import argparse
import json
import os
import sys

import boto3

# Add lambda dir to path for shared modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'lambda'))
from config import BIOREGION_S3_KEY
from geo_utils import load_geojson
from region_mapper import load_regions

STACK_NAME = 'bioregion-locator'
PUBLISH_FUNCTION = 'bioregion-locator-publisher'


def get_bucket_name(stack_name=STACK_NAME, cf=None):
    """Get bucket name from CloudFormation stack outputs."""
    cf = cf or boto3.client('cloudformation')
    resp = cf.describe_stacks(StackName=stack_name)
    for output in resp['Stacks'][0]['Outputs']:
        if output['OutputKey'] == 'BucketName':
            return output['OutputValue']
    raise RuntimeError("Could not find BucketName in stack outputs")


def validate(geojson):
    """Load regions from the GeoJSON and print a summary. Returns the regions."""
    regions = load_regions(geojson)
    total = len(geojson.get('features', []))
    print(f"Read {total} features, {len(regions)} usable bioregions")
    for region in regions:
        min_lng, min_lat, max_lng, max_lat = region['bbox']
        print(f"  {region['id']}: {region['name']} "
              f"[{min_lng:.2f}, {min_lat:.2f}, {max_lng:.2f}, {max_lat:.2f}]")
    return regions


def upload(geojson, bucket, s3=None):
    s3 = s3 or boto3.client('s3')
    s3.put_object(
        Bucket=bucket,
        Key=BIOREGION_S3_KEY,
        Body=json.dumps(geojson, separators=(',', ':')).encode('utf-8'),
        ContentType='application/geo+json',
    )
    print(f"Uploaded s3://{bucket}/{BIOREGION_S3_KEY}")


def invoke_publisher(function_name=PUBLISH_FUNCTION, lam=None):
    lam = lam or boto3.client('lambda')
    resp = lam.invoke(
        FunctionName=function_name,
        InvocationType='RequestResponse',
    )
    payload = json.loads(resp['Payload'].read())
    print(f"Lambda response: {payload}")
    return payload


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('path', help='GeoJSON FeatureCollection of bioregions')
    parser.add_argument('--bucket', help='target bucket (default: from CloudFormation outputs)')
    parser.add_argument('--stack', default=STACK_NAME, help='CloudFormation stack name')
    parser.add_argument('--no-invoke', action='store_true', help='skip republishing')
    args = parser.parse_args(argv)

    geojson = load_geojson(args.path)
    if not validate(geojson):
        print("No usable bioregions found, aborting.")
        return 1

    bucket = args.bucket or get_bucket_name(args.stack)
    print(f"Bucket: {bucket}")
    upload(geojson, bucket)

    if not args.no_invoke:
        print("\nInvoking Lambda to republish state data...")
        invoke_publisher()

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
