from __future__ import annotations

from typing import Iterable

import markdown
from bs4 import BeautifulSoup

from .config import DEFAULT_MARKDOWN_EXTENSIONS


class MarkdownRenderer:
    """
    Thin wrapper around Python-Markdown. A new `markdown.Markdown` instance is
    built on every call since instances keep state between conversions, which
    also makes a single renderer safe to share between threads.
    """

    def __init__(self, extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS):
        self.extensions = list(extensions)

    def render(self, markdown_raw: str) -> str:
        return markdown.Markdown(extensions=self.extensions).convert(markdown_raw)

    def to_tree(self, markdown_raw: str) -> BeautifulSoup:
        return BeautifulSoup(self.render(markdown_raw), "html.parser")
