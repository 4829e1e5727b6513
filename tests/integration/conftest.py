"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_TUSK_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TUSK_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TUSK_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def instance_url() -> str:
    """Instance to test against; override with TUSK_INSTANCE_URL."""
    return os.environ.get("TUSK_INSTANCE_URL", "https://mastodon.social")
