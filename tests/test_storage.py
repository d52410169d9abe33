"""Tests for the JSONL prompt store."""
import pytest

from services.analyzer.models import PromptRecord, PromptVersion
from services.analyzer.storage import PromptStore


def _record(prompt_id: str, *labels: str) -> PromptRecord:
    return PromptRecord(
        prompt_id=prompt_id,
        versions=[PromptVersion(label=label, text=f"text {label}") for label in labels],
        constraints={"language": "Python", "examples": ["Include examples"]},
    )


def test_get_returns_latest_snapshot(store: PromptStore) -> None:
    store.save(_record("prm_one", "v0_raw", "v1_structured"))
    store.save(_record("prm_one", "v0_raw", "v1_structured", "v2_refined"))

    record = store.get("prm_one")

    assert record is not None
    assert [v.label for v in record.versions] == ["v0_raw", "v1_structured", "v2_refined"]
    assert record.constraints["examples"] == ["Include examples"]


def test_unknown_prompt_is_none(store: PromptStore) -> None:
    assert store.get("prm_missing") is None


def test_invalid_lines_are_skipped(store: PromptStore) -> None:
    store.save(_record("prm_two", "v0_raw"))
    with open(store.data_dir / "prm_two.jsonl", "a") as f:
        f.write("{not json\n")
        f.write('{"prompt_id": "prm_two", "versions": "nope"}\n')

    record = store.get("prm_two")

    assert record is not None
    assert [v.label for v in record.versions] == ["v0_raw"]


def test_invalid_prompt_ids_are_rejected(store: PromptStore) -> None:
    assert store.get("../etc/passwd") is None
    with pytest.raises(ValueError):
        store.save(_record("../escape", "v0_raw"))


def test_list_prompts(store: PromptStore) -> None:
    store.save(_record("prm_b", "v0_raw"))
    store.save(_record("prm_a", "v0_raw"))

    assert store.list_prompts() == ["prm_a", "prm_b"]
