"""
Like mutator: increment a reel's like counter and append the liking client.

The increment and append happen in one conditional store update, so concurrent likes on
the same reel never lose an update, and liking a missing reel writes nothing. Repeated
likes from the same client are counted each time; liked_by is a log, not a set.
"""

import logging

from finreels_shared import (
    InputValidationError,
    LikeState,
    PersistenceError,
    ReelNotFoundError,
    ReelStore,
)

from .config import ReelsSettings
from .remote import call_remote

logger = logging.getLogger(__name__)


class LikeMutator:
    """Applies likes through ReelStore.atomic_update."""

    def __init__(self, reel_store: ReelStore, settings: ReelsSettings) -> None:
        self._reel_store = reel_store
        self._settings = settings

    async def like(self, reel_id: str | None, client_id: str | None) -> LikeState:
        """Record one like by client_id and return the post-update counter and liker log."""
        if not reel_id or not client_id:
            raise InputValidationError("Reel ID and Client ID are required")

        updated = await call_remote(
            "DynamoDB update",
            PersistenceError,
            self._settings.remote_call_timeout_seconds,
            self._reel_store.atomic_update,
            reel_id,
            increments={"likes": 1},
            appends={"liked_by": [client_id]},
        )
        if updated is None:
            logger.info("reel_id=%s like rejected: not found", reel_id)
            raise ReelNotFoundError(reel_id)

        state = LikeState(
            likes=int(updated.get("likes", 0)),
            liked_by=list(updated.get("liked_by") or []),
        )
        logger.info("reel_id=%s liked client_id=%s likes=%d", reel_id, client_id, state.likes)
        return state
