from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

DEFAULT_MARKDOWN_EXTENSIONS: Tuple[str, ...] = (
    "footnotes",
    "attr_list",
    "toc",
    "nl2br",
    "fenced_code",
    "tables",
)


@dataclass(frozen=True)
class ParserConfig:
    default_language: str = "default"
    footnotes_class: str = "footnote"
    max_workers: int = 1
    markdown_extensions: Tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS

    @classmethod
    def from_env(cls) -> "ParserConfig":
        return cls(
            default_language=os.getenv("DESCRIPTION_DEFAULT_LANGUAGE", "default"),
            footnotes_class=os.getenv("DESCRIPTION_FOOTNOTES_CLASS", "footnote"),
            max_workers=int(os.getenv("DESCRIPTION_MAX_WORKERS", "1")),
        )
