"""Tests for call_remote: error wrapping and time bound."""

import asyncio
import time

import pytest
from botocore.exceptions import ReadTimeoutError
from finreels_shared import (
    DependencyTimeoutError,
    PersistenceError,
    UploadError,
)

from finreels_api.remote import call_remote


def test_returns_result_and_passes_arguments() -> None:
    def add(a, b, *, scale=1):
        return (a + b) * scale

    assert asyncio.run(call_remote("add", PersistenceError, 1.0, add, 2, 3, scale=10)) == 50


def test_exception_is_wrapped_with_detail() -> None:
    def boom():
        raise ValueError("bucket does not exist")

    with pytest.raises(UploadError, match="bucket does not exist") as excinfo:
        asyncio.run(call_remote("S3 upload", UploadError, 1.0, boom))
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_slow_call_times_out() -> None:
    def slow():
        time.sleep(0.5)

    with pytest.raises(DependencyTimeoutError) as excinfo:
        asyncio.run(call_remote("DynamoDB scan", PersistenceError, 0.05, slow))
    assert excinfo.value.message == "DynamoDB scan timed out after 0.05s"
    assert excinfo.value.status_code == 500


def test_client_read_timeout_is_timeout_error() -> None:
    def read_timeout():
        raise ReadTimeoutError(endpoint_url="https://dynamodb.ap-south-1.amazonaws.com")

    with pytest.raises(DependencyTimeoutError, match="DynamoDB put timed out after 3s"):
        asyncio.run(call_remote("DynamoDB put", PersistenceError, 3, read_timeout))


def test_dependency_errors_pass_through_unchanged() -> None:
    def already_wrapped():
        raise PersistenceError("inner")

    with pytest.raises(PersistenceError, match="^inner$"):
        asyncio.run(call_remote("outer", UploadError, 1.0, already_wrapped))
