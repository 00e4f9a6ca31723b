import pytest

from petnames import config, langchain_helper


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv(config.API_KEY_ENV, "test-key")
    monkeypatch.delenv(config.FALLBACK_API_KEY_ENV, raising=False)
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv(config.API_KEY_ENV, raising=False)
    monkeypatch.delenv(config.FALLBACK_API_KEY_ENV, raising=False)


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace the Gemini client factory; returns the list of recorded builds."""
    calls = []

    def install(model):
        def build(api_key, schema):
            calls.append({"api_key": api_key, "schema": schema})
            return model

        monkeypatch.setattr(langchain_helper, "_build_llm", build)
        return calls

    return install
