"""
Publish pipeline: upload the raw video, optionally submit an HLS transcode job,
record the reel, and return the playable URL.

Steps run strictly in order and the first failure aborts the request. Nothing already
done is undone: a failed transcode submission or record write leaves the uploaded
object (and any submitted job) orphaned. Orphans are logged at WARNING so they can be
reconciled by hand.
"""

import logging
import time
import uuid
from typing import Callable

from finreels_shared import (
    DEFAULT_TRANSCODE_PROFILE,
    DependencyError,
    InputValidationError,
    ObjectStorage,
    PersistenceError,
    PublishResult,
    Reel,
    ReelStore,
    TranscodeJobSubmitter,
    TranscodeProfile,
    TranscodeSubmissionError,
    UploadError,
    VideoUpload,
    build_hls_prefix,
    build_media_url,
    build_upload_key,
    s3_uri,
)

from .config import ReelsSettings
from .remote import call_remote

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def new_reel_id() -> str:
    return str(uuid.uuid4())


class ReelPublisher:
    """Orchestrates upload -> optional transcode submission -> record write -> media URL."""

    def __init__(
        self,
        storage: ObjectStorage,
        reel_store: ReelStore,
        settings: ReelsSettings,
        *,
        transcoder: TranscodeJobSubmitter | None = None,
        profile: TranscodeProfile = DEFAULT_TRANSCODE_PROFILE,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_reel_id,
    ) -> None:
        self._storage = storage
        self._reel_store = reel_store
        self._settings = settings
        self._transcoder = transcoder
        self._profile = profile
        self._clock = clock
        self._id_factory = id_factory

    async def publish(
        self,
        stock_identifier: str | None,
        video: VideoUpload | None,
        caption: str | None = None,
    ) -> PublishResult:
        """
        Publish one reel.

        Raises InputValidationError before any remote call when the video or the stock
        identifier is missing; UploadError, TranscodeSubmissionError, PersistenceError or
        DependencyTimeoutError when a collaborator fails.
        """
        if video is None or not video.body:
            raise InputValidationError("Video file is required")
        stock_identifier = (stock_identifier or "").strip()
        if not stock_identifier:
            raise InputValidationError("Stock identifier is required")

        timeout = self._settings.remote_call_timeout_seconds
        reel_id = self._id_factory()
        s3_key = build_upload_key(stock_identifier, reel_id)

        await call_remote(
            "S3 upload",
            UploadError,
            timeout,
            self._storage.upload,
            self._settings.s3_bucket,
            s3_key,
            video.body,
            content_type=video.content_type,
        )
        logger.info(
            "reel_id=%s uploaded key=%s bytes=%d content_type=%s",
            reel_id,
            s3_key,
            len(video.body),
            video.content_type,
        )

        job_id = None
        if self._transcoder is not None:
            output_prefix = s3_uri(
                self._settings.transcode_output_bucket,
                build_hls_prefix(stock_identifier, reel_id),
            )
            try:
                job_id = await call_remote(
                    "MediaConvert job submission",
                    TranscodeSubmissionError,
                    timeout,
                    self._transcoder.submit,
                    s3_uri(self._settings.s3_bucket, s3_key),
                    output_prefix,
                    self._profile,
                )
            except DependencyError:
                logger.warning("reel_id=%s orphaned upload key=%s (transcode not submitted)", reel_id, s3_key)
                raise
            logger.info("reel_id=%s transcode submitted job_id=%s output=%s", reel_id, job_id, output_prefix)

        reel = Reel(
            stock_identifier=stock_identifier,
            reel_id=reel_id,
            s3_key=s3_key,
            caption=caption,
            likes=0,
            liked_by=[],
            timestamp=self._clock(),
            job_id=job_id,
        )
        try:
            await call_remote(
                "DynamoDB put",
                PersistenceError,
                timeout,
                self._reel_store.put,
                reel,
            )
        except DependencyError:
            logger.warning(
                "reel_id=%s orphaned upload key=%s job_id=%s (record not written)",
                reel_id,
                s3_key,
                job_id,
            )
            raise

        media_url = build_media_url(
            self._settings.public_base_url, s3_key, transcoded=reel.transcoded
        )
        logger.info("reel_id=%s published stock_identifier=%s media_url=%s", reel_id, stock_identifier, media_url)
        return PublishResult(reel_id=reel_id, media_url=media_url, job_id=job_id)
