"""Unit tests for the feed reader: ordering, limit, media URL reconstruction."""

import asyncio

import pytest
from finreels_shared import InputValidationError, PersistenceError, VideoUpload

from finreels_api.feed import FeedReader, summarize
from finreels_api.publish import ReelPublisher


def test_empty_store_returns_empty_list(mock_reel_store, settings) -> None:
    assert asyncio.run(FeedReader(mock_reel_store, settings).list_latest()) == []


def test_reels_sorted_most_recent_first(mock_reel_store, settings, reel_factory) -> None:
    mock_reel_store.put(reel_factory("r2", 2000))
    mock_reel_store.put(reel_factory("r3", 3000))
    mock_reel_store.put(reel_factory("r1", 1000))

    feed = asyncio.run(FeedReader(mock_reel_store, settings).list_latest())

    assert [s.reel_id for s in feed] == ["r3", "r2", "r1"]


def test_limit_truncates_after_sorting(mock_reel_store, settings, reel_factory) -> None:
    for i, ts in enumerate([1000, 5000, 3000, 4000, 2000]):
        mock_reel_store.put(reel_factory(f"r{i}", ts))

    feed = asyncio.run(FeedReader(mock_reel_store, settings).list_latest(limit=2))

    assert [s.timestamp for s in feed] == [5000, 4000]


def test_limit_larger_than_store_returns_all(mock_reel_store, settings, reel_factory) -> None:
    mock_reel_store.put(reel_factory("r1", 1000))
    feed = asyncio.run(FeedReader(mock_reel_store, settings).list_latest(limit=50))
    assert len(feed) == 1


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_is_rejected(limit, mock_reel_store, settings) -> None:
    with pytest.raises(InputValidationError, match="limit must be a positive integer"):
        asyncio.run(FeedReader(mock_reel_store, settings).list_latest(limit=limit))


def test_scan_failure_is_persistence_error(mock_reel_store, settings) -> None:
    mock_reel_store.scan_error = RuntimeError("ResourceNotFoundException")
    with pytest.raises(PersistenceError, match="ResourceNotFoundException"):
        asyncio.run(FeedReader(mock_reel_store, settings).list_latest())


def test_summary_carries_likes_caption_and_url(settings, reel_factory) -> None:
    reel = reel_factory("r1", 1000, caption="Guidance raised", likes=2, liked_by=["a", "b"])

    summary = summarize(reel, settings.public_base_url)

    assert summary.media_url == "https://cdn.example.com/reels/ACME_r1.mp4"
    assert summary.caption == "Guidance raised"
    assert summary.likes == 2
    assert summary.liked_by == ["a", "b"]
    assert summary.stock_identifier == "ACME"
    assert summary.job_id is None


def test_transcoded_reel_summary_points_at_manifest(settings, reel_factory) -> None:
    reel = reel_factory("r1", 1000, job_id="job-9")
    summary = summarize(reel, settings.public_base_url)
    assert summary.media_url == "https://cdn.example.com/reels/ACME_r1/index.m3u8"
    assert summary.job_id == "job-9"


@pytest.mark.parametrize("with_transcoder", [False, True])
def test_feed_url_matches_publish_url(
    with_transcoder, mock_object_storage, mock_reel_store, mock_transcoder, settings
) -> None:
    """The URL a reel is listed with is the URL returned when it was published."""
    publisher = ReelPublisher(
        mock_object_storage,
        mock_reel_store,
        settings,
        transcoder=mock_transcoder if with_transcoder else None,
    )
    published = asyncio.run(publisher.publish("ACME", VideoUpload(body=b"video")))

    feed = asyncio.run(FeedReader(mock_reel_store, settings).list_latest())

    assert len(feed) == 1
    assert feed[0].reel_id == published.reel_id
    assert feed[0].media_url == published.media_url
