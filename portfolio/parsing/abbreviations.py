from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Comment

from .models import Abbreviation, Paragraph

ABBREVIATION_DEFINITION = re.compile(r"^\s*\*\[([^\]]+)\]:\s+(.+)$")


def substitute_abbreviations(paragraph: Paragraph, abbreviations: Iterable[Abbreviation]) -> Paragraph:
    """
    Wrap whole-word occurrences of each abbreviation in `<abbr title="...">`.

    Abbreviations are applied in declaration order, each one on the output of
    the previous ones. Tag attributes and text already inside an `<abbr>` are
    left alone.
    """
    abbreviations = list(abbreviations)
    if not abbreviations or not paragraph.content:
        return paragraph

    fragment = BeautifulSoup(paragraph.content, "html.parser")
    changed = False
    for abbreviation in abbreviations:
        if _wrap_occurrences(fragment, abbreviation):
            changed = True
    if not changed:
        return paragraph
    return replace(paragraph, content=fragment.decode_contents())


def _wrap_occurrences(fragment: BeautifulSoup, abbreviation: Abbreviation) -> bool:
    pattern = re.compile(r"\b" + re.escape(abbreviation.name) + r"\b")
    wrapped = False
    for text in list(fragment.find_all(string=True)):
        if isinstance(text, Comment) or text.find_parent("abbr") is not None:
            continue
        pieces = pattern.split(str(text))
        if len(pieces) == 1:
            continue
        replacement = []
        for index, piece in enumerate(pieces):
            if index:
                abbr = fragment.new_tag("abbr", attrs={"title": abbreviation.definition})
                abbr.string = abbreviation.name
                replacement.append(abbr)
            if piece:
                replacement.append(NavigableString(piece))
        text.replace_with(*replacement)
        wrapped = True
    return wrapped
