"""AWS implementations of the reels cloud interfaces."""

from .client_config import client_config
from .dynamodb_stores import DynamoDBReelStore
from .mediaconvert_jobs import (
    MediaConvertJobSubmitter,
    build_job_settings,
    discover_mediaconvert_endpoint,
)
from .s3_storage import S3ObjectStorage

__all__ = [
    "DynamoDBReelStore",
    "MediaConvertJobSubmitter",
    "S3ObjectStorage",
    "build_job_settings",
    "client_config",
    "discover_mediaconvert_endpoint",
]
