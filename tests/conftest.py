"""
Shared fixtures for source credential tests.
"""

import pytest

from sourcecreds.registry import ValidatorRegistry
from sourcecreds.secret import SecretValue

CONNECTION_ARN = (
    "arn:aws:codeconnections:us-east-1:123456789012:"
    "connection/12345678-abcd-12ab-34cdef5678gh"
)
LEGACY_CONNECTION_ARN = (
    "arn:aws:codestar-connections:eu-west-1:123456789012:"
    "connection/abcdef01-2345-6789-abcd-ef0123456789"
)


@pytest.fixture
def connection_arn():
    return CONNECTION_ARN


@pytest.fixture
def legacy_connection_arn():
    return LEGACY_CONNECTION_ARN


@pytest.fixture
def access_token():
    return SecretValue("ghp_exampletoken123")


@pytest.fixture
def registry():
    return ValidatorRegistry()


@pytest.fixture
def credentials_file(tmp_path):
    """Write a credentials file and return its path."""
    def _write(content: str):
        path = tmp_path / "credentials.yaml"
        path.write_text(content)
        return path
    return _write
