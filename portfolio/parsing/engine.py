from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Optional, Union

from .classifier import ClassifiedContent, ContentClassifier
from .config import ParserConfig
from .errors import DescriptionParseError
from .frontmatter import split_front_matter
from .languages import split_language_blocks
from .media import rewrite_alt_embed_syntax
from .models import ParsedDescription
from .rendering import MarkdownRenderer

logger = logging.getLogger(__name__)


class ParsingEngine:
    """
    Abstract parsing engine. Implementations should be stateless and reusable.
    """

    def parse(self, markdown_raw: str) -> ParsedDescription:
        raise NotImplementedError

    def parse_file(self, path: Union[str, Path]) -> ParsedDescription:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DescriptionParseError(f"{path} is not valid UTF-8") from exc
        return self.parse(raw)


class MarkdownParsingEngine(ParsingEngine):
    """
    Parses description.md files: YAML front matter, `:: <code>` language blocks,
    then one markdown rendering and classification pass per language.

    Each language is parsed from its own copy of the shared preamble plus its
    segment, so languages can be parsed on separate threads (`max_workers`).
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.renderer = MarkdownRenderer(self.config.markdown_extensions)
        self.classifier = ContentClassifier(footnotes_class=self.config.footnotes_class)

    def parse(self, markdown_raw: str) -> ParsedDescription:
        metadata, body = split_front_matter(markdown_raw)
        blocks = split_language_blocks(body)
        layout = blocks.layout(self.config.default_language)
        logger.debug("Parsing description in %s: %s", layout.kind.value, ", ".join(layout.keys))

        raw_per_language = {language: blocks.raw_for(language) for language in layout.keys}
        parsed = self._parse_languages(raw_per_language)

        return ParsedDescription(
            metadata=metadata,
            languages=layout,
            title={language: content.title for language, content in parsed.items()},
            paragraphs={language: tuple(content.paragraphs) for language, content in parsed.items()},
            media_embed_declarations={
                language: tuple(content.media_embed_declarations) for language, content in parsed.items()
            },
            links={language: tuple(content.links) for language, content in parsed.items()},
            footnotes={language: tuple(content.footnotes) for language, content in parsed.items()},
            issues={language: tuple(content.issues) for language, content in parsed.items()},
        )

    def parse_single_language(self, markdown_raw: str, language: str = "") -> ClassifiedContent:
        tree = self.renderer.to_tree(rewrite_alt_embed_syntax(markdown_raw))
        content = self.classifier.classify(tree, language=language)
        logger.debug(
            "Language %r: %d paragraphs, %d media, %d links, %d footnotes, %d abbreviations",
            language,
            len(content.paragraphs),
            len(content.media_embed_declarations),
            len(content.links),
            len(content.footnotes),
            len(content.abbreviations),
        )
        return content

    def _parse_languages(self, raw_per_language: Dict[str, str]) -> Dict[str, ClassifiedContent]:
        languages = list(raw_per_language)
        if self.config.max_workers <= 1 or len(languages) <= 1:
            return {language: self.parse_single_language(raw_per_language[language], language) for language in languages}

        with ThreadPoolExecutor(max_workers=min(self.config.max_workers, len(languages))) as pool:
            results = pool.map(
                lambda language: self.parse_single_language(raw_per_language[language], language),
                languages,
            )
            return dict(zip(languages, results))


def parse_description(markdown_raw: str, config: Optional[ParserConfig] = None) -> ParsedDescription:
    return MarkdownParsingEngine(config).parse(markdown_raw)
