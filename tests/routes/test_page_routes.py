"""
Tests for the HTML page routes (GET / and POST /).
"""

import pytest
from fastapi.testclient import TestClient

from cinesuggest.config import settings
from cinesuggest.dependencies import get_recommendation_provider
from cinesuggest.main import app
from cinesuggest.routes.pages import too_long_message
from cinesuggest.views.render import EMPTY_PLACEHOLDER, RESULTS_HEADING


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_provider(fake_provider):
    async def provider_dependency():
        return fake_provider

    app.dependency_overrides[get_recommendation_provider] = provider_dependency
    yield fake_provider
    app.dependency_overrides.clear()


def test_index_renders_idle_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    body = response.text
    assert "<title>CineSuggest AI</title>" in body
    assert 'id="recommend-form"' in body
    assert EMPTY_PLACEHOLDER in body
    assert 'id="error-banner"' not in body


def test_submit_renders_results(client, override_provider):
    response = client.post("/", data={"movies": "Parasite, Inception"})

    assert response.status_code == 200
    body = response.text
    assert RESULTS_HEADING in body
    assert body.index("Memento") < body.index("Oldboy")
    assert ">Parasite, Inception</textarea>" in body
    assert EMPTY_PLACEHOLDER not in body
    assert override_provider.calls == ["Parasite, Inception"]


def test_submit_blank_renders_validation_error(client, override_provider):
    response = client.post("/", data={"movies": "   "})

    assert response.status_code == 200
    assert "Please enter some movies you like." in response.text
    assert override_provider.calls == []


def test_submit_without_field_renders_validation_error(client, override_provider):
    response = client.post("/", data={})

    assert response.status_code == 200
    assert "Please enter some movies you like." in response.text


def test_submit_provider_failure_renders_error(client, override_provider):
    override_provider.error = TimeoutError("timeout")

    response = client.post("/", data={"movies": "Amelie"})

    assert response.status_code == 200
    assert 'id="error-banner"' in response.text
    assert "Failed to get recommendations. timeout" in response.text
    assert RESULTS_HEADING not in response.text


def test_index_limits_textarea_length(client):
    response = client.get("/")

    assert f'maxlength="{settings.MAX_INPUT_LENGTH}"' in response.text


def test_submit_too_long_renders_error_page(client, override_provider):
    response = client.post("/", data={"movies": "x" * (settings.MAX_INPUT_LENGTH + 1)})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'id="error-banner"' in response.text
    assert too_long_message() in response.text
    assert override_provider.calls == []


def test_submit_at_length_limit_is_sent(client, override_provider):
    text = "x" * settings.MAX_INPUT_LENGTH

    response = client.post("/", data={"movies": text})

    assert response.status_code == 200
    assert RESULTS_HEADING in response.text
    assert override_provider.calls == [text]
