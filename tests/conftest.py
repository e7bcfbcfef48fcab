import pytest
from fastapi.testclient import TestClient

from mentor_api.core.config import Settings, get_settings
from mentor_api.main import app
from mentor_api.services.store import MemoryStore, get_store


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, GROQ_API_KEY="test-key", STORE_DIR=str(tmp_path / "store"))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(settings, store):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_provider(monkeypatch):
    """Replace the Groq call made by the mentor endpoint and record what it was sent."""
    calls = []
    state = {"answer": "Mentor view: keep it short.", "error": None}

    async def fake_generate_text(system_prompt, messages, settings=None, transport=None):
        calls.append({"system_prompt": system_prompt, "messages": messages, "settings": settings})
        if state["error"] is not None:
            raise state["error"]
        return state["answer"]

    monkeypatch.setattr("mentor_api.api.mentor.generate_text", fake_generate_text)
    fake_generate_text.calls = calls
    fake_generate_text.state = state
    return fake_generate_text
