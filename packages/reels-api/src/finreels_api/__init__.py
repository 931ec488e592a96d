"""FinReels HTTP API: publish pipeline, latest-reels feed, and likes."""

from .feed import FeedReader
from .likes import LikeMutator
from .publish import ReelPublisher

__all__ = ["FeedReader", "LikeMutator", "ReelPublisher"]
