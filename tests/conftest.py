"""
Pytest configuration for CineSuggest tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from cinesuggest.schemas.recommendations import MovieRecommendation  # noqa: E402


@pytest.fixture
def sample_recommendations():
    """Two recommendations in a fixed order."""
    return [
        MovieRecommendation(title="Memento"),
        MovieRecommendation(title="Oldboy"),
    ]


@pytest.fixture
def fake_provider(sample_recommendations):
    """
    Async provider stand-in that records every call.

    `fake_provider.calls` lists the texts it was called with;
    set `fake_provider.error` to make it raise instead of returning.
    """
    async def provider(user_input: str):
        provider.calls.append(user_input)
        if provider.error is not None:
            raise provider.error
        return provider.result

    provider.calls = []
    provider.error = None
    provider.result = sample_recommendations
    return provider
