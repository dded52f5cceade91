from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from portfolio.parsing import LocalWorkStorage, MarkdownParsingEngine, ParserConfig, StoragePaths


@lru_cache(maxsize=1)
def get_storage() -> LocalWorkStorage:
    root = Path(os.getenv("WORKS_ROOT", "./data"))
    return LocalWorkStorage(StoragePaths(root))


@lru_cache(maxsize=1)
def get_engine() -> MarkdownParsingEngine:
    return MarkdownParsingEngine(ParserConfig.from_env())
