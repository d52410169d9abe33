"""Tests for the Ollama wrapper."""
from unittest.mock import MagicMock, patch

import pytest

from services.analyzer import config, llm


@pytest.fixture(autouse=True)
def reset_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(llm, "_client", None)
    monkeypatch.setattr(config, "USE_AI", True)


def test_disabled_ai_returns_none_without_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that nothing is contacted when AI is switched off."""
    monkeypatch.setattr(config, "USE_AI", False)

    with patch("services.analyzer.llm.ollama.Client") as client_cls:
        assert llm.generate("prompt") is None
        client_cls.assert_not_called()


def test_generate_returns_model_text() -> None:
    """Test that the response text is passed through."""
    client = MagicMock()
    client.generate.return_value = {"response": '{"gaps": []}'}

    with patch("services.analyzer.llm.ollama.Client", return_value=client) as client_cls:
        assert llm.generate("prompt") == '{"gaps": []}'
        assert llm.generate("again") == '{"gaps": []}'

    client_cls.assert_called_once_with(host=config.OLLAMA_HOST, timeout=config.LLM_TIMEOUT)
    _, kwargs = client.generate.call_args
    assert kwargs["model"] == config.MODEL
    assert kwargs["format"] == "json"
    assert kwargs["prompt"] == "again"


def test_generate_swallows_call_errors() -> None:
    """Test that a failing call degrades to None."""
    client = MagicMock()
    client.generate.side_effect = ConnectionError("ollama unreachable")

    with patch("services.analyzer.llm.ollama.Client", return_value=client):
        assert llm.generate("prompt") is None


def test_empty_response_is_none() -> None:
    """Test that an empty completion counts as unavailable."""
    client = MagicMock()
    client.generate.return_value = {"response": ""}

    with patch("services.analyzer.llm.ollama.Client", return_value=client):
        assert llm.generate("prompt") is None


def test_client_init_failure_is_none() -> None:
    """Test that a client that cannot be created disables AI for the call."""
    with patch("services.analyzer.llm.ollama.Client", side_effect=ValueError("bad host")):
        assert llm.generate("prompt") is None
