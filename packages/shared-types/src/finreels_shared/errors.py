"""
Error taxonomy for the reels pipeline.

Every error carries the HTTP status the API surfaces for it. DependencyError and its
subclasses mean a remote collaborator (S3, MediaConvert, DynamoDB) failed or timed out;
the request is aborted on the first one and nothing already done is rolled back.
"""


class ReelsError(Exception):
    """Base class for all errors raised by the reels services."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputValidationError(ReelsError):
    """A required input is missing or malformed (client error)."""

    status_code = 400


class ReelNotFoundError(ReelsError):
    """The referenced reel does not exist."""

    status_code = 404

    def __init__(self, reel_id: str) -> None:
        super().__init__("Reel not found")
        self.reel_id = reel_id


class DependencyError(ReelsError):
    """A remote collaborator call failed."""

    status_code = 500


class UploadError(DependencyError):
    """Object storage rejected the upload or was unreachable."""


class TranscodeSubmissionError(DependencyError):
    """The encoding service rejected the job submission."""


class PersistenceError(DependencyError):
    """The record store failed to read or write."""


class DependencyTimeoutError(DependencyError):
    """A remote call exceeded its time bound."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        super().__init__(f"{operation} timed out after {timeout_seconds:g}s")
        self.operation = operation
        self.timeout_seconds = timeout_seconds
