"""
Cloud-agnostic interfaces for object storage, transcode job submission, and the reel
record store.

Implementations (e.g. AWS via S3, MediaConvert, DynamoDB) live in separate packages
(e.g. aws-adapters). The publish pipeline, feed reader and like mutator depend on these
interfaces and receive the implementation by config.
"""

from typing import Any, Protocol, runtime_checkable

from .models import Reel, TranscodeProfile


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: durable put of raw bytes."""

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        *,
        content_type: str | None = None,
    ) -> None:
        """Upload bytes to the given bucket and key. Raises on failure."""
        ...


@runtime_checkable
class TranscodeJobSubmitter(Protocol):
    """Asynchronous encoding service. Completion is never observed by the caller."""

    def submit(
        self,
        input_s3_uri: str,
        output_s3_prefix: str,
        profile: TranscodeProfile,
    ) -> str:
        """Submit a transcode job and return its job id. Raises if the job is rejected."""
        ...


@runtime_checkable
class ReelStore(Protocol):
    """Store for reel records keyed by reel_id."""

    def put(self, reel: Reel) -> None:
        """Create or overwrite a reel record."""
        ...

    def get(self, reel_id: str) -> Reel | None:
        """Return the reel if it exists, otherwise None."""
        ...

    def scan_all(self) -> list[Reel]:
        """Return every reel in the store, in no particular order."""
        ...

    def atomic_update(
        self,
        reel_id: str,
        *,
        increments: dict[str, int] | None = None,
        appends: dict[str, list[str]] | None = None,
    ) -> dict[str, Any] | None:
        """
        Atomically add to numeric attributes and append to list attributes of an existing
        reel in a single store operation (missing attributes start at 0 / []).

        Returns the updated attributes, or None if the reel does not exist (in which case
        nothing is written).
        """
        ...
