from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class LanguageLayoutKind(str, Enum):
    UNLOCALIZED = "unlocalized"
    LOCALIZED = "localized"


@dataclass(frozen=True)
class LanguageLayout:
    """
    Which languages a description is split into.

    An unlocalized description has a single implicit language key; a localized
    one has the codes of its `:: <code>` markers, in order of appearance.
    """

    kind: LanguageLayoutKind
    codes: Tuple[str, ...]

    @classmethod
    def unlocalized(cls, implicit_language: str) -> "LanguageLayout":
        return cls(kind=LanguageLayoutKind.UNLOCALIZED, codes=(implicit_language,))

    @classmethod
    def localized(cls, codes) -> "LanguageLayout":
        codes = tuple(codes)
        if not codes:
            raise ValueError("a localized layout needs at least one language code")
        return cls(kind=LanguageLayoutKind.LOCALIZED, codes=codes)

    @property
    def is_localized(self) -> bool:
        return self.kind == LanguageLayoutKind.LOCALIZED

    @property
    def keys(self) -> Tuple[str, ...]:
        return self.codes


@dataclass(frozen=True)
class Paragraph:
    content: str
    id: str = ""


@dataclass(frozen=True)
class MediaAttributes:
    looped: bool = False  # ~
    autoplay: bool = False  # >
    muted: bool = False  # >
    playsinline: bool = False  # =
    controls: bool = True  # = removes it


@dataclass(frozen=True)
class MediaEmbedDeclaration:
    """
    A media embed, abusing the ![]() syntax to extend it to any file.
    Only holds what the syntax says; nothing here touches the filesystem.
    """

    alt: str
    source: str
    title: str = ""
    attributes: MediaAttributes = field(default_factory=MediaAttributes)


@dataclass(frozen=True)
class Link:
    id: str
    name: str
    url: str
    title: str = ""


@dataclass(frozen=True)
class Footnote:
    name: str
    content: str


@dataclass(frozen=True)
class Abbreviation:
    name: str
    definition: str


@dataclass(frozen=True)
class ContentIssue:
    language: str
    node: str
    message: str


@dataclass(frozen=True)
class ParsedDescription:
    """
    Everything extracted from a description.md file, keyed by language.

    All per-language mappings share the key set `languages.keys`; the entity
    sequences are tuples, so nothing in a parsed description can be mutated.
    """

    metadata: Dict[str, Any]
    languages: LanguageLayout
    title: Dict[str, str]
    paragraphs: Dict[str, Tuple[Paragraph, ...]]
    media_embed_declarations: Dict[str, Tuple[MediaEmbedDeclaration, ...]]
    links: Dict[str, Tuple[Link, ...]]
    footnotes: Dict[str, Tuple[Footnote, ...]]
    issues: Dict[str, Tuple[ContentIssue, ...]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["languages"] = {
            "kind": self.languages.kind.value,
            "codes": list(self.languages.codes),
        }
        return data
