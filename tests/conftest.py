"""Pytest configuration file."""
import os
import tempfile

# Must be set before the service module is imported
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="prompt-analyzer-"))
os.environ["USE_AI"] = "false"

import pytest
from fastapi.testclient import TestClient

from services.analyzer import main
from services.analyzer.analyzer import RuleBasedAnalyzer
from services.analyzer.storage import PromptStore


@pytest.fixture
def store(tmp_path) -> PromptStore:
    """Create an empty prompt store in a temporary directory."""
    return PromptStore(tmp_path / "prompts")


@pytest.fixture
def client(store: PromptStore, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """Create a test client backed by the temporary store."""
    monkeypatch.setattr(main, "storage", store)
    monkeypatch.setattr(main, "analyzer", RuleBasedAnalyzer())
    return TestClient(main.app)
