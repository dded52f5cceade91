from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .models import ParsedDescription

logger = logging.getLogger(__name__)

DESCRIPTION_FILENAME = "description.md"
PARSED_OUTPUT_FILENAME = "parsed.json"


@dataclass
class StoragePaths:
    root: Path

    def works_dir(self) -> Path:
        return self.root / "works"

    def work_dir(self, work_id: str) -> Path:
        return self.works_dir() / str(work_id)

    def description_path(self, work_id: str) -> Path:
        return self.work_dir(work_id) / DESCRIPTION_FILENAME

    def parsed_output_path(self, work_id: str) -> Path:
        return self.work_dir(work_id) / PARSED_OUTPUT_FILENAME


class LocalWorkStorage:
    """
    Filesystem layout for works: one directory per work holding its
    description.md and, once parsed, the parser's JSON output.
    """

    def __init__(self, storage_paths: StoragePaths):
        self.paths = storage_paths

    def ensure_work_dir(self, work_id: str) -> Path:
        target = self.paths.work_dir(work_id)
        target.mkdir(parents=True, exist_ok=True)
        return target

    def list_works(self) -> List[str]:
        works_dir = self.paths.works_dir()
        if not works_dir.exists():
            return []
        return sorted(
            entry.name
            for entry in works_dir.iterdir()
            if entry.is_dir() and (entry / DESCRIPTION_FILENAME).exists()
        )

    def find_description(self, work_id: str) -> Optional[Path]:
        path = self.paths.description_path(work_id)
        return path if path.exists() else None

    def read_description(self, work_id: str) -> str:
        path = self.find_description(work_id)
        if path is None:
            raise FileNotFoundError(f"No {DESCRIPTION_FILENAME} for work {work_id}")
        return path.read_text(encoding="utf-8")

    def write_description(self, work_id: str, markdown_raw: str) -> Path:
        self.ensure_work_dir(work_id)
        target = self.paths.description_path(work_id)
        target.write_text(markdown_raw, encoding="utf-8")
        return target

    def write_parsed_output(self, work_id: str, parsed: ParsedDescription) -> Path:
        self.ensure_work_dir(work_id)
        target = self.paths.parsed_output_path(work_id)
        with target.open("w", encoding="utf-8") as f:
            json.dump(parsed.to_dict(), f, ensure_ascii=False, indent=2, default=str)
        logger.info("Wrote parsed description for work %s to %s", work_id, target)
        return target
