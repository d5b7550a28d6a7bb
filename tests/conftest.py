"""Test configuration and fixtures for obs-adapter."""

import boto3
import pytest

from fakes import TEST_BUCKET, TEST_ENDPOINT, FakeObjectStoreClient
from obs_adapter.schemas import ObsStorageConfig


@pytest.fixture(autouse=True)
def clear_obs_env(monkeypatch):
    """Keep real OBS_* settings in the environment out of the tests."""
    for name in ("ENDPOINT", "BUCKET", "ACCESS_KEY", "SECRET_KEY", "REGION_NAME"):
        monkeypatch.delenv(f"OBS_{name}", raising=False)


@pytest.fixture
def obs_config():
    """A complete storage configuration pointed at the mocked endpoint."""
    return ObsStorageConfig(
        endpoint=TEST_ENDPOINT,
        bucket=TEST_BUCKET,
        access_key="accesskey",
        secret_key="secretkey",
    )


@pytest.fixture
def boto_client():
    """A real boto3 S3 client, for use with botocore's Stubber."""
    return boto3.client(
        "s3",
        aws_access_key_id="accesskey",
        aws_secret_access_key="secretkey",
        region_name="us-east-1",
    )


@pytest.fixture
def fake_client():
    """An empty in-memory object store client."""
    return FakeObjectStoreClient()
