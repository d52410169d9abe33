"""Storage layer for analyzer service."""
import json
import re
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from .models import PromptRecord

logger = structlog.get_logger()

_PROMPT_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class PromptStore:
    """Append-only JSONL snapshots, one file per prompt id."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.info("prompt_store_initialized", data_dir=str(self.data_dir))

    def _path(self, prompt_id: str) -> Optional[Path]:
        if not _PROMPT_ID_RE.match(prompt_id or ""):
            logger.warning("invalid_prompt_id", prompt_id=prompt_id)
            return None
        return self.data_dir / f"{prompt_id}.jsonl"

    def save(self, record: PromptRecord) -> None:
        """Append a full snapshot; the latest line wins on read."""
        file_path = self._path(record.prompt_id)
        if file_path is None:
            raise ValueError(f"Invalid prompt id: {record.prompt_id!r}")

        with open(file_path, "a") as f:
            f.write(record.model_dump_json() + "\n")
            f.flush()

        logger.info(
            "prompt_saved",
            prompt_id=record.prompt_id,
            versions=len(record.versions),
            file=str(file_path)
        )

    def get(self, prompt_id: str) -> Optional[PromptRecord]:
        """Return the most recent snapshot for a prompt."""
        file_path = self._path(prompt_id)
        if file_path is None or not file_path.exists():
            logger.debug("prompt_not_found", prompt_id=prompt_id)
            return None

        latest = None
        with open(file_path, "r") as f:
            for line_num, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    latest = PromptRecord(**json.loads(line))
                except (json.JSONDecodeError, ValidationError) as e:
                    logger.warning(
                        "invalid_jsonl_line",
                        prompt_id=prompt_id,
                        line_num=line_num,
                        error=str(e)
                    )
                    continue

        return latest

    def list_prompts(self) -> list[str]:
        """List all stored prompt ids."""
        prompts = sorted(f.stem for f in self.data_dir.glob("*.jsonl"))
        logger.debug("prompts_listed", count=len(prompts))
        return prompts
