"""Shared types and conventions for the reels publishing service."""

from .errors import (
    DependencyError,
    DependencyTimeoutError,
    InputValidationError,
    PersistenceError,
    ReelNotFoundError,
    ReelsError,
    TranscodeSubmissionError,
    UploadError,
)
from .interfaces import ObjectStorage, ReelStore, TranscodeJobSubmitter
from .keys import (
    build_hls_prefix,
    build_media_url,
    build_upload_key,
    hls_manifest_key_for,
    s3_uri,
)
from .logging_config import configure_logging
from .models import (
    DEFAULT_TRANSCODE_PROFILE,
    ErrorResponse,
    FeatureReelResponse,
    LikeReelRequest,
    LikeReelResponse,
    LikeState,
    PublishResult,
    Reel,
    ReelSummary,
    TranscodeProfile,
    VideoUpload,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TRANSCODE_PROFILE",
    "DependencyError",
    "DependencyTimeoutError",
    "ErrorResponse",
    "FeatureReelResponse",
    "InputValidationError",
    "LikeReelRequest",
    "LikeReelResponse",
    "LikeState",
    "ObjectStorage",
    "PersistenceError",
    "PublishResult",
    "Reel",
    "ReelNotFoundError",
    "ReelStore",
    "ReelSummary",
    "ReelsError",
    "TranscodeJobSubmitter",
    "TranscodeProfile",
    "TranscodeSubmissionError",
    "UploadError",
    "VideoUpload",
    "build_hls_prefix",
    "build_media_url",
    "build_upload_key",
    "configure_logging",
    "hls_manifest_key_for",
    "s3_uri",
]
