"""Reel routes: feature (publish), latest feed, like."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from finreels_shared import (
    DependencyError,
    ErrorResponse,
    FeatureReelResponse,
    LikeReelRequest,
    LikeReelResponse,
    ReelSummary,
    VideoUpload,
)

from ..constants import DEFAULT_UPLOAD_CONTENT_TYPE, SUCCESS_FEATURED, SUCCESS_LIKED
from ..deps import get_feed_reader, get_like_mutator, get_publisher
from ..feed import FeedReader
from ..likes import LikeMutator
from ..publish import ReelPublisher

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _failure(action: str, error: DependencyError) -> JSONResponse:
    """500 response for a downstream failure, embedding the underlying detail."""
    return JSONResponse(status_code=500, content={"error": f"Failed to {action}: {error}"})


async def _read_video(file: UploadFile | None) -> VideoUpload | None:
    if file is None:
        return None
    body = await file.read()
    return VideoUpload(
        body=body,
        content_type=file.content_type or DEFAULT_UPLOAD_CONTENT_TYPE,
        filename=file.filename,
    )


@router.post(
    "/feature-reel",
    response_model=FeatureReelResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
)
async def feature_reel(
    caption: str | None = Form(None),
    stock_identifier: str | None = Form(None),
    file: UploadFile | None = File(None),
    publisher: ReelPublisher = Depends(get_publisher),
):
    """Upload a video, optionally submit it for HLS transcoding, and record the reel."""
    video = await _read_video(file)
    try:
        result = await publisher.publish(stock_identifier, video, caption=caption)
    except DependencyError as e:
        return _failure("feature reel", e)
    return FeatureReelResponse(
        message=SUCCESS_FEATURED,
        media_url=result.media_url,
        job_id=result.job_id,
    )


@router.get("/reels-latest", response_model=list[ReelSummary], responses=_ERRORS)
async def reels_latest(
    limit: int | None = None,
    feed: FeedReader = Depends(get_feed_reader),
):
    """Latest reels, most recent first, optionally capped at limit."""
    try:
        return await feed.list_latest(limit)
    except DependencyError as e:
        return _failure("fetch latest reels", e)


@router.post(
    "/like-reel",
    response_model=LikeReelResponse,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
)
async def like_reel(
    body: LikeReelRequest,
    likes: LikeMutator = Depends(get_like_mutator),
):
    """Increment a reel's likes and append the client to its liker log."""
    try:
        state = await likes.like(body.reel_id, body.client_id)
    except DependencyError as e:
        return _failure("like reel", e)
    return LikeReelResponse(message=SUCCESS_LIKED, updated_reel=state)
