"""botocore client configuration shared by all adapters."""

from botocore.config import Config


def client_config(timeout_seconds: float | None = None) -> Config | None:
    """
    Return a botocore Config bounding connect/read time for each request, or None to use
    botocore defaults. Retries are left to botocore's standard mode; the service layer
    itself never retries.
    """
    if timeout_seconds is None:
        return None
    return Config(
        connect_timeout=timeout_seconds,
        read_timeout=timeout_seconds,
        retries={"mode": "standard", "max_attempts": 2},
    )
