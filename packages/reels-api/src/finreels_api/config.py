"""
App config from environment with defaults.
Single settings object built once at startup and passed to every component.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_REMOTE_TIMEOUT_SEC = 1.0
MAX_REMOTE_TIMEOUT_SEC = 120.0


class ReelsSettings(BaseSettings):
    """
    All environment variables used by the reels API.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(
        env_file=None,  # We load .env via bootstrap_env() so env is ready
        extra="ignore",
        populate_by_name=True,
    )

    # Object storage and public URLs
    s3_bucket: str
    public_base_url: str = Field(
        validation_alias=AliasChoices("public_base_url", "cloudfront_url"),
    )

    # Record store
    reels_table_name: str = "finreels"

    # AWS
    aws_region: str = "ap-south-1"
    aws_endpoint_url: str | None = None

    # Transcoding (MediaConvert)
    transcode_enabled: bool = False
    mediaconvert_role: str | None = None
    mediaconvert_endpoint: str | None = None
    mediaconvert_output_bucket: str | None = None

    # Bound on every remote call (S3, MediaConvert, DynamoDB)
    remote_call_timeout_seconds: float = 10.0

    log_level: str = "INFO"
    port: int = 3000

    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("remote_call_timeout_seconds", mode="before")
    @classmethod
    def parse_and_clamp_timeout(cls, v: object) -> float:
        try:
            n = float(v)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 10.0
        return max(MIN_REMOTE_TIMEOUT_SEC, min(n, MAX_REMOTE_TIMEOUT_SEC))

    @field_validator("aws_endpoint_url", "mediaconvert_endpoint", "mediaconvert_role", mode="before")
    @classmethod
    def empty_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def require_role_when_transcoding(self) -> ReelsSettings:
        if self.transcode_enabled and not self.mediaconvert_role:
            raise ValueError("MEDIACONVERT_ROLE is required when TRANSCODE_ENABLED is true")
        return self

    @property
    def transcode_output_bucket(self) -> str:
        return self.mediaconvert_output_bucket or self.s3_bucket


def get_settings() -> ReelsSettings:
    """Return validated settings from current environment."""
    return ReelsSettings()


def bootstrap_env() -> None:
    """
    Load .env from path in FINREELS_ENV_FILE if set.
    Call once at app startup before using get_settings() so vars from the file are in os.environ.
    """
    import os

    import dotenv

    path = os.environ.get("FINREELS_ENV_FILE")
    if path:
        dotenv.load_dotenv(Path(path).resolve())
