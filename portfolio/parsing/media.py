"""
Media embed syntax.

Any file can be embedded with the image syntax, and the alt text carries a
small language of its own:

    ![demo video “The demo, in slow motion” ~>](demo.mp4)

An optional title goes between curly quotes (the opening quote must follow a
space), and trailing attribute characters, separated from the alt text by a
space, switch HTML media attributes on or off:

    ~   loop
    >   autoplay (and muted, since browsers refuse unmuted autoplay)
    =   no controls (and playsinline)

`>[text](target)` on its own line is accepted as a shorthand for `![text](target)`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Tuple

from .models import MediaAttributes

ALT_EMBED_SYNTAX = re.compile(r"^>(\[[^\]]+\]\([^)]+\)[^\S\n]*)$", re.MULTILINE)

ATTRIBUTE_LOOPED = "~"
ATTRIBUTE_AUTOPLAY = ">"
ATTRIBUTE_NO_CONTROLS = "="
ATTRIBUTE_CHARACTERS = frozenset((ATTRIBUTE_LOOPED, ATTRIBUTE_AUTOPLAY, ATTRIBUTE_NO_CONTROLS))

TITLE_OPEN = "“"
TITLE_CLOSE = "”"


class _AltScanState(Enum):
    IN_ATTRIBUTE_ZONE = "in_attribute_zone"
    IN_ALT_TEXT = "in_alt_text"


def rewrite_alt_embed_syntax(markdown_raw: str) -> str:
    return ALT_EMBED_SYNTAX.sub(r"!\1", markdown_raw)


def extract_title_from_alt(alt_attribute: str) -> Tuple[str, str]:
    """Split `alt “title”` into (alt, title), both stripped."""
    alt: List[str] = []
    title: List[str] = []
    in_title = False
    previous = ""
    for char in alt_attribute:
        if char == TITLE_OPEN and previous == " ":
            in_title = True
        elif char == TITLE_CLOSE and in_title:
            in_title = False
        elif in_title:
            title.append(char)
        else:
            alt.append(char)
        previous = char
    return "".join(alt).strip(), "".join(title).strip()


def extract_attributes_from_alt(alt: str) -> Tuple[str, MediaAttributes]:
    defaults = MediaAttributes()
    if not alt or alt[-1] not in ATTRIBUTE_CHARACTERS:
        return alt, defaults

    state = _AltScanState.IN_ATTRIBUTE_ZONE
    markers: List[str] = []
    reversed_alt: List[str] = []
    for char in reversed(alt):
        if state == _AltScanState.IN_ALT_TEXT:
            reversed_alt.append(char)
        elif char == " ":
            state = _AltScanState.IN_ALT_TEXT
        elif char in ATTRIBUTE_CHARACTERS:
            markers.append(char)
        # Other characters in the attribute zone are dropped.

    # No space, as in "foo~": plain alt text.
    if state == _AltScanState.IN_ATTRIBUTE_ZONE:
        return alt, defaults

    return "".join(reversed(reversed_alt)).rstrip(), MediaAttributes(
        looped=ATTRIBUTE_LOOPED in markers,
        autoplay=ATTRIBUTE_AUTOPLAY in markers,
        muted=ATTRIBUTE_AUTOPLAY in markers,
        playsinline=ATTRIBUTE_NO_CONTROLS in markers,
        controls=ATTRIBUTE_NO_CONTROLS not in markers,
    )


def parse_media_alt(alt_attribute: str) -> Tuple[str, str, MediaAttributes]:
    """Decode an image alt attribute into (alt, title, attributes)."""
    alt, title = extract_title_from_alt(alt_attribute)
    alt, attributes = extract_attributes_from_alt(alt)
    return alt, title, attributes
