from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from slugify import slugify

from .abbreviations import ABBREVIATION_DEFINITION, substitute_abbreviations
from .errors import MalformedContentNode
from .languages import LANGUAGE_MARKER
from .media import parse_media_alt
from .models import (
    Abbreviation,
    ContentIssue,
    Footnote,
    Link,
    MediaEmbedDeclaration,
    Paragraph,
)

logger = logging.getLogger(__name__)

FOOTNOTE_ID_PREFIX = "fn:"
NODE_EXCERPT_LENGTH = 80

Entity = Union[Paragraph, MediaEmbedDeclaration, Link, Abbreviation]


@dataclass
class ClassifiedContent:
    title: str = ""
    paragraphs: List[Paragraph] = field(default_factory=list)
    media_embed_declarations: List[MediaEmbedDeclaration] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    footnotes: List[Footnote] = field(default_factory=list)
    abbreviations: List[Abbreviation] = field(default_factory=list)
    issues: List[ContentIssue] = field(default_factory=list)


def inner_html(element: Optional[Tag]) -> str:
    """Markup inside `element`, like the DOM's `element.innerHTML`."""
    if element is None:
        return ""
    return element.decode_contents()


def significant_children(element: Tag) -> list:
    return [
        child
        for child in element.children
        if not (isinstance(child, NavigableString) and not child.strip())
    ]


class ContentClassifier:
    """
    Turns the top-level blocks of a rendered description into typed entities.
    """

    def __init__(self, footnotes_class: str = "footnote"):
        self.footnotes_class = footnotes_class

    def classify(self, tree: BeautifulSoup, language: str = "") -> ClassifiedContent:
        content = ClassifiedContent(title=inner_html(tree.find("h1", recursive=False)))

        for block in tree.find_all("p", recursive=False):
            try:
                entity = self.classify_block(block)
            except MalformedContentNode as exc:
                logger.warning("Skipping block in language %r: %s", language, exc)
                content.issues.append(ContentIssue(language=language, node=exc.node, message=exc.message))
                continue
            if isinstance(entity, MediaEmbedDeclaration):
                content.media_embed_declarations.append(entity)
            elif isinstance(entity, Link):
                content.links.append(entity)
            elif isinstance(entity, Abbreviation):
                content.abbreviations.append(entity)
            elif isinstance(entity, Paragraph):
                content.paragraphs.append(entity)

        content.footnotes = self.extract_footnotes(tree)
        content.paragraphs = [
            substitute_abbreviations(paragraph, content.abbreviations) for paragraph in content.paragraphs
        ]
        return content

    def classify_block(self, block: Tag) -> Optional[Entity]:
        """
        Classify one `<p>`. Returns None for language marker residue.
        """
        children = significant_children(block)
        if len(children) == 1 and isinstance(children[0], Tag):
            only_child = children[0]
            if only_child.name == "img":
                return self._media_embed(only_child)
            if only_child.name == "a":
                return self._link(only_child)

        markup = inner_html(block)
        definition = ABBREVIATION_DEFINITION.match(markup)
        if definition:
            return Abbreviation(name=definition.group(1), definition=html.unescape(definition.group(2)))
        if LANGUAGE_MARKER.match(markup):
            return None
        return Paragraph(id=block.get("id", ""), content=markup)

    def extract_footnotes(self, tree: BeautifulSoup) -> List[Footnote]:
        footnotes: List[Footnote] = []
        for container in tree.find_all("div", class_=self.footnotes_class, recursive=False):
            for item in container.find_all("li"):
                name = item.get("id", "")
                if name.startswith(FOOTNOTE_ID_PREFIX):
                    name = name[len(FOOTNOTE_ID_PREFIX):]
                footnotes.append(Footnote(name=name, content=inner_html(item)))
        return footnotes

    def _media_embed(self, image: Tag) -> MediaEmbedDeclaration:
        source = image.get("src")
        if not source:
            raise MalformedContentNode(_excerpt(image), "media embed has no source")
        alt, title, attributes = parse_media_alt(image.get("alt", ""))
        return MediaEmbedDeclaration(alt=alt, title=title, source=source, attributes=attributes)

    def _link(self, anchor: Tag) -> Link:
        url = anchor.get("href")
        if url is None:
            raise MalformedContentNode(_excerpt(anchor), "isolated link has no href")
        return Link(
            id=slugify(anchor.get_text()),
            name=inner_html(anchor),
            title=anchor.get("title", ""),
            url=url,
        )


def _excerpt(node: Tag) -> str:
    return str(node)[:NODE_EXCERPT_LENGTH]
