from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .models import LanguageLayout

LANGUAGE_MARKER = re.compile(r"^::\s+(.+)$")


class _ScanState(Enum):
    PREAMBLE = "preamble"
    IN_LANGUAGE = "in_language"


def match_language_marker(line: str) -> Optional[str]:
    """Return the language code if `line` is a `:: <code>` marker."""
    match = LANGUAGE_MARKER.match(line.rstrip("\r\n"))
    if not match:
        return None
    return match.group(1).strip() or None


@dataclass
class LanguageBlocks:
    """
    A description body cut on its language markers.

    `preamble` is the text before the first marker, shared by every language.
    `segments` maps each language code to its raw text, marker line included.
    """

    preamble: str
    segments: Dict[str, str] = field(default_factory=dict)

    def layout(self, implicit_language: str) -> LanguageLayout:
        if not self.segments:
            return LanguageLayout.unlocalized(implicit_language)
        return LanguageLayout.localized(self.segments.keys())

    def raw_for(self, language: str) -> str:
        # Unknown keys (the implicit language) only see the shared preamble.
        return self.preamble + self.segments.get(language, "")


def split_language_blocks(body: str) -> LanguageBlocks:
    state = _ScanState.PREAMBLE
    current: Optional[str] = None
    preamble: List[str] = []
    buffers: Dict[str, List[str]] = {}

    for line in body.splitlines(keepends=True):
        code = match_language_marker(line)
        if code is not None:
            state, current = _ScanState.IN_LANGUAGE, code
            buffers.setdefault(code, [])

        if state == _ScanState.PREAMBLE:
            preamble.append(line)
        else:
            buffers[current].append(line)

    return LanguageBlocks(
        preamble="".join(preamble),
        segments={code: "".join(lines) for code, lines in buffers.items()},
    )
