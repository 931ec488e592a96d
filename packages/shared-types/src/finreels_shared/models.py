"""Pydantic models for reels, transcode profile, and API DTOs."""

from pydantic import BaseModel, ConfigDict, Field


class Reel(BaseModel):
    """Reel record (DynamoDB reels table, one item per reel)."""

    stock_identifier: str = Field(..., min_length=1, description="Caller-supplied grouping key")
    reel_id: str = Field(..., description="Unique reel identifier (UUID v4)")
    s3_key: str = Field(..., description="Object key of the original upload")
    caption: str | None = Field(None, description="Optional caption")
    likes: int = Field(0, ge=0, description="Like counter")
    liked_by: list[str] = Field(
        default_factory=list,
        description="Client ids in like order; a client may appear more than once",
    )
    timestamp: int = Field(..., description="Epoch milliseconds when the reel was published")
    job_id: str | None = Field(
        None, description="Transcode job id (only when a job was submitted)"
    )

    @property
    def transcoded(self) -> bool:
        return self.job_id is not None


class VideoUpload(BaseModel):
    """Raw video bytes as received from the client."""

    body: bytes
    content_type: str = "video/mp4"
    filename: str | None = None


# --- Transcode profile (fixed, not user-controllable) ---

class TranscodeProfile(BaseModel):
    """Encoding profile for the HLS transcode job: H.264 + AAC, segmented HLS output."""

    model_config = ConfigDict(frozen=True)

    output_group_name: str = "Apple HLS"
    segment_length_seconds: int = Field(10, ge=1)

    video_codec: str = "H_264"
    rate_control_mode: str = "QVBR"
    scene_change_detect: str = "TRANSITION_DETECTION"
    quality_tuning_level: str = "SINGLE_PASS"

    audio_codec: str = "AAC"
    audio_bitrate: int = 96000
    audio_sample_rate: int = 48000
    audio_coding_mode: str = "CODING_MODE_2_0"

    container: str = "M3U8"


DEFAULT_TRANSCODE_PROFILE = TranscodeProfile()


# --- Service results ---

class PublishResult(BaseModel):
    """Outcome of a successful publish: where the reel can be played from."""

    reel_id: str
    media_url: str
    job_id: str | None = None


class LikeState(BaseModel):
    """Like counter and liker log after an update."""

    likes: int = Field(..., ge=0)
    liked_by: list[str] = Field(default_factory=list)


# --- API DTOs ---

class ReelSummary(BaseModel):
    """Item in the latest-reels feed (GET /reels-latest)."""

    reel_id: str
    media_url: str
    stock_identifier: str
    caption: str | None = None
    likes: int = 0
    liked_by: list[str] = Field(default_factory=list)
    timestamp: int
    job_id: str | None = None


class FeatureReelResponse(BaseModel):
    """Response for POST /feature-reel."""

    message: str
    media_url: str
    job_id: str | None = Field(None, description="Transcode job id when transcoding is enabled")


class LikeReelRequest(BaseModel):
    """Request body for POST /like-reel. Presence of fields is checked by the like mutator."""

    stock_identifier: str | None = None
    reel_id: str | None = None
    client_id: str | None = None


class LikeReelResponse(BaseModel):
    """Response for POST /like-reel."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    updated_reel: LikeState = Field(..., alias="updatedReel")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
