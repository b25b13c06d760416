"""Test configuration and fixtures for cos-tools."""

import json

import boto3
import pytest
from moto import mock_aws

from cos_tools.core import settings

REGION = "us-east-1"
BUCKET = "test-bucket"


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Point the configuration store at a per-test file."""
    path = tmp_path / "cos-tools" / "config.json"
    monkeypatch.setattr(settings, "config_file", path)
    monkeypatch.setattr(settings, "default_region", None)
    return path


@pytest.fixture
def write_config(config_file):
    """Write a configuration document for the test."""

    def write(values):
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(json.dumps(values))
        return config_file

    return write


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials for the default credential chain."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def s3(aws_credentials):
    """Mocked S3 with one empty bucket."""
    with mock_aws():
        client = boto3.client("s3", region_name=REGION)
        client.create_bucket(Bucket=BUCKET)
        yield client


@pytest.fixture
def sample_file(tmp_path):
    """A small file to upload or reference with file://."""
    path = tmp_path / "payload.txt"
    path.write_text("hello from cos-tools")
    return path
