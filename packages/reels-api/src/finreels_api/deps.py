"""Dependencies and app state for FastAPI routes.

Collaborators are looked up on app.state (tests put in-memory fakes there). When absent
they are built once from ReelsSettings and cached on app.state.
"""

from fastapi import Depends, Request
from finreels_shared import ObjectStorage, ReelStore, TranscodeJobSubmitter

from .config import ReelsSettings, get_settings as settings_from_env
from .feed import FeedReader
from .likes import LikeMutator
from .publish import ReelPublisher

_UNSET = object()


def get_settings(request: Request) -> ReelsSettings:
    """Return ReelsSettings from app state or build from env."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = settings_from_env()
        request.app.state.settings = settings
    return settings


def get_object_storage(
    request: Request,
    settings: ReelsSettings = Depends(get_settings),
) -> ObjectStorage:
    """Return ObjectStorage from app state or build S3ObjectStorage from settings."""
    storage = getattr(request.app.state, "object_storage", None)
    if storage is not None:
        return storage
    from finreels_aws_adapters import S3ObjectStorage

    storage = S3ObjectStorage(
        region_name=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
        timeout_seconds=settings.remote_call_timeout_seconds,
    )
    request.app.state.object_storage = storage
    return storage


def get_reel_store(
    request: Request,
    settings: ReelsSettings = Depends(get_settings),
) -> ReelStore:
    """Return ReelStore from app state or build DynamoDBReelStore from settings."""
    store = getattr(request.app.state, "reel_store", None)
    if store is not None:
        return store
    from finreels_aws_adapters import DynamoDBReelStore

    store = DynamoDBReelStore(
        settings.reels_table_name,
        region_name=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
        timeout_seconds=settings.remote_call_timeout_seconds,
    )
    request.app.state.reel_store = store
    return store


def get_transcoder(
    request: Request,
    settings: ReelsSettings = Depends(get_settings),
) -> TranscodeJobSubmitter | None:
    """Return the transcode submitter, or None when transcoding is disabled (direct mode)."""
    transcoder = getattr(request.app.state, "transcoder", _UNSET)
    if transcoder is not _UNSET:
        return transcoder
    transcoder = None
    if settings.transcode_enabled:
        from finreels_aws_adapters import MediaConvertJobSubmitter

        transcoder = MediaConvertJobSubmitter(
            settings.mediaconvert_role or "",
            region_name=settings.aws_region,
            endpoint_url=settings.mediaconvert_endpoint,
            timeout_seconds=settings.remote_call_timeout_seconds,
        )
    request.app.state.transcoder = transcoder
    return transcoder


def get_publisher(
    storage: ObjectStorage = Depends(get_object_storage),
    reel_store: ReelStore = Depends(get_reel_store),
    settings: ReelsSettings = Depends(get_settings),
    transcoder: TranscodeJobSubmitter | None = Depends(get_transcoder),
) -> ReelPublisher:
    return ReelPublisher(storage, reel_store, settings, transcoder=transcoder)


def get_feed_reader(
    reel_store: ReelStore = Depends(get_reel_store),
    settings: ReelsSettings = Depends(get_settings),
) -> FeedReader:
    return FeedReader(reel_store, settings)


def get_like_mutator(
    reel_store: ReelStore = Depends(get_reel_store),
    settings: ReelsSettings = Depends(get_settings),
) -> LikeMutator:
    return LikeMutator(reel_store, settings)
