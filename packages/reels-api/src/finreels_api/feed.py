"""Feed reader: latest reels, most recent first."""

import logging

from finreels_shared import (
    InputValidationError,
    PersistenceError,
    Reel,
    ReelStore,
    ReelSummary,
    build_media_url,
)

from .config import ReelsSettings
from .remote import call_remote

logger = logging.getLogger(__name__)


def summarize(reel: Reel, public_base_url: str) -> ReelSummary:
    """Project a stored reel to its feed summary; the URL matches the one returned at publish."""
    return ReelSummary(
        reel_id=reel.reel_id,
        media_url=build_media_url(public_base_url, reel.s3_key, transcoded=reel.transcoded),
        stock_identifier=reel.stock_identifier,
        caption=reel.caption,
        likes=reel.likes,
        liked_by=list(reel.liked_by),
        timestamp=reel.timestamp,
        job_id=reel.job_id,
    )


class FeedReader:
    """
    Lists reels by full scan of the record store.

    Every call re-scans the whole table (no cache, no pagination); that is the capacity
    ceiling of this reader. Scan order is arbitrary, so results are always sorted here.
    """

    def __init__(self, reel_store: ReelStore, settings: ReelsSettings) -> None:
        self._reel_store = reel_store
        self._settings = settings

    async def list_latest(self, limit: int | None = None) -> list[ReelSummary]:
        """Return reels sorted by timestamp descending, truncated to limit when given."""
        if limit is not None and limit < 1:
            raise InputValidationError("limit must be a positive integer")
        reels = await call_remote(
            "DynamoDB scan",
            PersistenceError,
            self._settings.remote_call_timeout_seconds,
            self._reel_store.scan_all,
        )
        reels = sorted(reels, key=lambda r: r.timestamp, reverse=True)
        if limit is not None:
            reels = reels[:limit]
        logger.info("feed listed count=%d limit=%s", len(reels), limit)
        return [summarize(r, self._settings.public_base_url) for r in reels]
