"""S3-compatible object store adapter.

Mental model refresher:
- This is outbound adapter code for the content store (Cloudflare R2 speaks
  the S3 API, so boto3 is used as-is).
- The domain locator only sees a `list_keys(bucket, prefix)` callable.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config

from ..config import StoreConfig
from ..types import ListKeysFn


def build_store_client(config: StoreConfig) -> Any:
    """Build one boto3 S3 client for the configured endpoint."""
    return boto3.client(
        "s3",
        endpoint_url=config.endpoint_url,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=config.region,
        config=Config(signature_version="s3v4"),
    )


def list_object_keys(client: Any, bucket: str, prefix: str) -> list[str]:
    """Return object keys under `prefix` from a single listing call.

    Only the first page is read; objects past the store's page size
    (1000 keys for S3) are not returned.
    """
    response = client.list_objects_v2(Bucket=bucket, Prefix=prefix)
    keys: list[str] = []
    for item in response.get("Contents", []) or []:
        key = item.get("Key")
        if key:
            keys.append(key)
    return keys


def make_list_keys(client: Any) -> ListKeysFn:
    """Bind a client into the `list_keys(bucket, prefix)` shape."""

    def list_keys(bucket: str, prefix: str) -> list[str]:
        return list_object_keys(client, bucket, prefix)

    return list_keys
