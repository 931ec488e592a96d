"""S3 implementation of ObjectStorage."""

import boto3

from .client_config import client_config

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class S3ObjectStorage:
    """ObjectStorage implementation using S3."""

    def __init__(
        self,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._client = boto3.client(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
            config=client_config(timeout_seconds),
        )

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        *,
        content_type: str | None = None,
    ) -> None:
        """Upload bytes to the given bucket and key, keeping the declared content type."""
        self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=body,
            ContentType=content_type or DEFAULT_CONTENT_TYPE,
        )
