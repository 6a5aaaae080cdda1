"""
Pytest configuration file for the Assets sync backend tests.

This file contains fixtures and configuration for pytest tests.
"""

import os
import sys

import boto3
import pytest
from moto import mock_aws

# Handlers import their siblings as top level packages, as they do inside the Lambda runtime
BACKEND_SOURCE_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'backend'))
TESTS_PATH = os.path.abspath(os.path.dirname(__file__))
for path in (TESTS_PATH, BACKEND_SOURCE_PATH):
    if path not in sys.path:
        sys.path.insert(0, path)

TEST_WORKSPACE_ID = "9639f74b-a7d7-4189-9acb-9a493cbfe46f"
TEST_EMAIL = "integration@example.com"
TEST_API_TOKEN = "test-api-token"

# Set environment variables for testing
os.environ['AWS_REGION'] = 'us-east-1'
os.environ['AWS_DEFAULT_REGION'] = 'us-east-1'
os.environ['AWS_ACCESS_KEY_ID'] = 'test-access-key'
os.environ['AWS_SECRET_ACCESS_KEY'] = 'test-secret-key'
os.environ['AWS_SESSION_TOKEN'] = 'test-session-token'
os.environ['POWERTOOLS_LOG_LEVEL'] = 'DEBUG'

from models.assets import AssetsApiConfigModel  # noqa: E402
from utils.lambda_test_utils import LambdaContext  # noqa: E402
from utils.remote_assets_store import RemoteAssetsStore  # noqa: E402


@pytest.fixture(scope="function")
def assets_env(monkeypatch):
    """Environment for a handler reading its configuration without SSM"""
    monkeypatch.setenv("ASSETS_WORKSPACE_ID", TEST_WORKSPACE_ID)
    monkeypatch.setenv("ASSETS_API_EMAIL", TEST_EMAIL)
    monkeypatch.setenv("ASSETS_API_TOKEN", TEST_API_TOKEN)
    monkeypatch.delenv("ASSETS_API_TOKEN_SSM_PARAM", raising=False)
    monkeypatch.delenv("ASSETS_OBJECT_SCHEMA_ID", raising=False)
    monkeypatch.delenv("ASSETS_API_BASE_URL", raising=False)
    monkeypatch.delenv("ASSETS_QUERY_PAGE_SIZE", raising=False)
    monkeypatch.delenv("NETWORK_ASSETS_OBJECT_TYPE", raising=False)
    return os.environ


@pytest.fixture(scope="function")
def assets_api_config():
    """Configuration with every optional setting at its default"""
    return AssetsApiConfigModel(
        workspaceId=TEST_WORKSPACE_ID,
        email=TEST_EMAIL,
        apiToken=TEST_API_TOKEN,
    )


@pytest.fixture(scope="function")
def remote_store():
    """In-memory remote Assets API"""
    return RemoteAssetsStore()


@pytest.fixture(scope="function")
def lambda_context():
    """
    Fixture that provides a mock Lambda context object.
    """
    return LambdaContext()


@pytest.fixture(scope="function")
def ssm_client():
    """
    Fixture that provides a mocked SSM client.
    """
    with mock_aws():
        yield boto3.client("ssm", region_name="us-east-1")
