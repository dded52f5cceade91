"""
Parsing subsystem exports.
"""

from .abbreviations import substitute_abbreviations
from .classifier import ClassifiedContent, ContentClassifier
from .config import ParserConfig
from .engine import MarkdownParsingEngine, ParsingEngine, parse_description
from .errors import DescriptionParseError, MalformedContentNode
from .frontmatter import split_front_matter
from .languages import LanguageBlocks, split_language_blocks
from .media import (
    extract_attributes_from_alt,
    extract_title_from_alt,
    parse_media_alt,
    rewrite_alt_embed_syntax,
)
from .models import (
    Abbreviation,
    ContentIssue,
    Footnote,
    LanguageLayout,
    LanguageLayoutKind,
    Link,
    MediaAttributes,
    MediaEmbedDeclaration,
    Paragraph,
    ParsedDescription,
)
from .rendering import MarkdownRenderer
from .storage import LocalWorkStorage, StoragePaths

__all__ = [
    "Abbreviation",
    "ClassifiedContent",
    "ContentClassifier",
    "ContentIssue",
    "DescriptionParseError",
    "Footnote",
    "LanguageBlocks",
    "LanguageLayout",
    "LanguageLayoutKind",
    "Link",
    "LocalWorkStorage",
    "MalformedContentNode",
    "MarkdownParsingEngine",
    "MarkdownRenderer",
    "MediaAttributes",
    "MediaEmbedDeclaration",
    "Paragraph",
    "ParsedDescription",
    "ParserConfig",
    "ParsingEngine",
    "StoragePaths",
    "extract_attributes_from_alt",
    "extract_title_from_alt",
    "parse_description",
    "parse_media_alt",
    "rewrite_alt_embed_syntax",
    "split_front_matter",
    "split_language_blocks",
    "substitute_abbreviations",
]
