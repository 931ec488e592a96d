"""Pytest fixtures for aws-adapters tests (moto-backed AWS resources)."""

import os

import pytest
from moto import mock_aws


@pytest.fixture(scope="function")
def aws_credentials():
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def moto_aws(aws_credentials):
    """Enable moto mock for DynamoDB and S3."""
    with mock_aws():
        yield


@pytest.fixture
def reels_table(moto_aws):
    """Create the reels DynamoDB table (reel_id hash key only)."""
    import boto3

    client = boto3.client("dynamodb", region_name="us-east-1")
    client.create_table(
        TableName="test-reels",
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "reel_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "reel_id", "AttributeType": "S"},
        ],
    )
    return "test-reels"


@pytest.fixture
def s3_bucket(moto_aws):
    """Create the upload bucket."""
    import boto3

    client = boto3.client("s3", region_name="us-east-1")
    client.create_bucket(Bucket="test-reels-bucket")
    return "test-reels-bucket"
