"""Pytest fixtures: app with in-memory ObjectStorage, ReelStore and transcode submitter."""

import threading
from typing import Any

import pytest
from fastapi.testclient import TestClient
from finreels_shared import Reel, TranscodeProfile

from finreels_api.config import ReelsSettings
from finreels_api.main import app

PUBLIC_BASE_URL = "https://cdn.example.com"
BUCKET = "reels-bucket"


class MockObjectStorage:
    """ObjectStorage for tests: records uploads; raises `error` when set."""

    def __init__(self) -> None:
        self.uploads: list[dict[str, Any]] = []
        self.error: Exception | None = None

    def upload(self, bucket: str, key: str, body: bytes, *, content_type: str | None = None) -> None:
        if self.error is not None:
            raise self.error
        self.uploads.append(
            {"bucket": bucket, "key": key, "body": body, "content_type": content_type}
        )


class MockReelStore:
    """ReelStore for tests: in-memory, atomic_update serialized by a lock; counts writes."""

    def __init__(self) -> None:
        self._reels: dict[str, Reel] = {}
        self._lock = threading.Lock()
        self.writes = 0
        self.put_error: Exception | None = None
        self.scan_error: Exception | None = None
        self.update_error: Exception | None = None

    def put(self, reel: Reel) -> None:
        if self.put_error is not None:
            raise self.put_error
        with self._lock:
            self._reels[reel.reel_id] = reel
            self.writes += 1

    def get(self, reel_id: str) -> Reel | None:
        return self._reels.get(reel_id)

    def scan_all(self) -> list[Reel]:
        if self.scan_error is not None:
            raise self.scan_error
        return list(self._reels.values())

    def atomic_update(
        self,
        reel_id: str,
        *,
        increments: dict[str, int] | None = None,
        appends: dict[str, list[str]] | None = None,
    ) -> dict[str, Any] | None:
        if self.update_error is not None:
            raise self.update_error
        with self._lock:
            reel = self._reels.get(reel_id)
            if reel is None:
                return None
            data = reel.model_dump()
            changed: dict[str, Any] = {}
            for name, delta in (increments or {}).items():
                changed[name] = (data.get(name) or 0) + delta
            for name, values in (appends or {}).items():
                changed[name] = list(data.get(name) or []) + list(values)
            self._reels[reel_id] = reel.model_copy(update=changed)
            self.writes += 1
            return changed


class MockTranscoder:
    """TranscodeJobSubmitter for tests: records submissions, returns a fixed job id."""

    def __init__(self, job_id: str = "job-123") -> None:
        self.job_id = job_id
        self.submissions: list[tuple[str, str, TranscodeProfile]] = []
        self.error: Exception | None = None

    def submit(self, input_s3_uri: str, output_s3_prefix: str, profile: TranscodeProfile) -> str:
        if self.error is not None:
            raise self.error
        self.submissions.append((input_s3_uri, output_s3_prefix, profile))
        return self.job_id


def make_settings(**overrides: Any) -> ReelsSettings:
    values: dict[str, Any] = {
        "s3_bucket": BUCKET,
        "public_base_url": PUBLIC_BASE_URL,
        "reels_table_name": "reels-table",
        "transcode_enabled": False,
        "remote_call_timeout_seconds": 5,
    }
    values.update(overrides)
    return ReelsSettings(**values)


def make_reel(reel_id: str, timestamp: int, **fields: Any) -> Reel:
    stock = fields.pop("stock_identifier", "ACME")
    return Reel(
        stock_identifier=stock,
        reel_id=reel_id,
        s3_key=f"reels/{stock}_{reel_id}.mp4",
        timestamp=timestamp,
        **fields,
    )


@pytest.fixture
def settings() -> ReelsSettings:
    return make_settings()


@pytest.fixture
def mock_object_storage() -> MockObjectStorage:
    return MockObjectStorage()


@pytest.fixture
def mock_reel_store() -> MockReelStore:
    return MockReelStore()


@pytest.fixture
def mock_transcoder() -> MockTranscoder:
    return MockTranscoder()


@pytest.fixture
def app_with_mocks(
    settings: ReelsSettings,
    mock_object_storage: MockObjectStorage,
    mock_reel_store: MockReelStore,
) -> None:
    """Set app.state so routes use mocks; transcoding off unless a test sets a transcoder."""
    app.state.settings = settings
    app.state.object_storage = mock_object_storage
    app.state.reel_store = mock_reel_store
    app.state.transcoder = None


@pytest.fixture
def client(app_with_mocks: None) -> TestClient:
    """TestClient for the app (requires app_with_mocks to set app.state)."""
    return TestClient(app)


@pytest.fixture
def settings_factory():
    """Build ReelsSettings with test defaults; keyword overrides win."""
    return make_settings


@pytest.fixture
def reel_factory():
    """Build a stored Reel for ACME (or stock_identifier=...) at the given timestamp."""
    return make_reel
