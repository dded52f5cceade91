from bs4 import BeautifulSoup

from portfolio.parsing import (
    Abbreviation,
    ContentClassifier,
    LanguageLayoutKind,
    Link,
    MediaAttributes,
    MediaEmbedDeclaration,
    Paragraph,
    extract_attributes_from_alt,
    extract_title_from_alt,
    parse_media_alt,
    rewrite_alt_embed_syntax,
    split_front_matter,
    split_language_blocks,
    substitute_abbreviations,
)


def test_front_matter_absent_leaves_body_untouched():
    raw = "# Title\n\nSome text.\nMore text"
    metadata, body = split_front_matter(raw)
    assert metadata == {}
    assert body == raw


def test_front_matter_is_decoded():
    metadata, body = split_front_matter("---\ntitle: Hi\ntags: [a, b]\n---\nBody\n")
    assert metadata == {"title": "Hi", "tags": ["a", "b"]}
    assert body == "Body\n"


def test_front_matter_malformed_or_not_a_mapping_is_empty():
    metadata, body = split_front_matter("---\nkey: [unclosed\n---\nBody\n")
    assert metadata == {}
    assert body == "Body\n"

    metadata, _ = split_front_matter("---\n- a\n- b\n---\n")
    assert metadata == {}


def test_language_blocks_without_markers():
    body = "Intro.\n\nMore.\n"
    blocks = split_language_blocks(body)
    assert blocks.segments == {}
    assert blocks.preamble == body
    layout = blocks.layout("default")
    assert layout.kind == LanguageLayoutKind.UNLOCALIZED
    assert layout.keys == ("default",)
    assert blocks.raw_for("default") == body


def test_language_blocks_with_markers():
    body = "Shared.\n\n:: fr-FR\n\nBonjour.\n\n:: en-US \n\nHello.\n"
    blocks = split_language_blocks(body)
    assert blocks.preamble == "Shared.\n\n"
    assert list(blocks.segments) == ["fr-FR", "en-US"]
    assert blocks.segments["fr-FR"] == ":: fr-FR\n\nBonjour.\n\n"
    assert blocks.raw_for("en-US") == "Shared.\n\n:: en-US \n\nHello.\n"
    layout = blocks.layout("default")
    assert layout.is_localized
    assert layout.keys == ("fr-FR", "en-US")


def test_repeated_language_marker_keeps_earlier_content():
    blocks = split_language_blocks(":: en\n\nOne.\n\n:: fr\n\nUn.\n\n:: en\n\nTwo.\n")
    assert blocks.segments["en"] == ":: en\n\nOne.\n\n:: en\n\nTwo.\n"
    assert list(blocks.segments) == ["en", "fr"]


def test_alt_embed_syntax_rewrite():
    raw = ">[Demo](demo.mp4)  \n> a quote\n>[Demo](demo.mp4) and more\n"
    assert rewrite_alt_embed_syntax(raw) == "![Demo](demo.mp4)  \n> a quote\n>[Demo](demo.mp4) and more\n"


def test_alt_embed_syntax_rewrite_with_crlf_line_endings():
    raw = ">[Install =](install.mp4)\r\n\r\n> a quote\r\n"
    assert rewrite_alt_embed_syntax(raw) == "![Install =](install.mp4)\r\n\r\n> a quote\r\n"


def test_alt_attributes_looped():
    assert extract_attributes_from_alt("foo ~") == ("foo", MediaAttributes(looped=True))


def test_alt_attributes_autoplay():
    assert extract_attributes_from_alt("foo >") == ("foo", MediaAttributes(autoplay=True, muted=True))


def test_alt_attributes_no_controls():
    assert extract_attributes_from_alt("foo =") == ("foo", MediaAttributes(controls=False, playsinline=True))


def test_alt_attributes_combined():
    alt, attributes = extract_attributes_from_alt("a short clip =~>")
    assert alt == "a short clip"
    assert attributes == MediaAttributes(
        looped=True, autoplay=True, muted=True, playsinline=True, controls=False
    )


def test_alt_attributes_fall_back_to_plain_alt():
    defaults = MediaAttributes()
    assert defaults.controls and not (defaults.looped or defaults.autoplay or defaults.muted or defaults.playsinline)
    assert extract_attributes_from_alt("plain text") == ("plain text", defaults)
    assert extract_attributes_from_alt("foo~") == ("foo~", defaults)
    assert extract_attributes_from_alt("") == ("", defaults)


def test_alt_attributes_drop_unknown_characters_in_zone():
    assert extract_attributes_from_alt("demo 1~") == ("demo", MediaAttributes(looped=True))
    assert extract_attributes_from_alt("foo bar~") == ("foo", MediaAttributes(looped=True))
    assert extract_attributes_from_alt("clip x=>") == (
        "clip",
        MediaAttributes(autoplay=True, muted=True, playsinline=True, controls=False),
    )


def test_alt_title_extraction():
    assert extract_title_from_alt("ideaseed “Ideaseed’s wordmark”") == ("ideaseed", "Ideaseed’s wordmark")
    assert extract_title_from_alt("  no title here ") == ("no title here", "")
    # The opening quote must follow a space.
    assert extract_title_from_alt("quoted“word”") == ("quoted“word”", "")


def test_parse_media_alt_title_then_attributes():
    alt, title, attributes = parse_media_alt("demo “Command-line demo” ~>")
    assert alt == "demo"
    assert title == "Command-line demo"
    assert attributes == MediaAttributes(looped=True, autoplay=True, muted=True)


def test_abbreviations_wrap_whole_words_only():
    paragraph = Paragraph(content="HTML is great. HTMLX is not.", id="intro")
    result = substitute_abbreviations(paragraph, [Abbreviation("HTML", "HyperText Markup Language")])
    assert result.content == '<abbr title="HyperText Markup Language">HTML</abbr> is great. HTMLX is not.'
    assert result.id == "intro"


def test_abbreviations_accumulate_across_definitions():
    # Every definition must survive, not just the last one applied.
    paragraph = Paragraph(content="CSS Style and HTML")
    result = substitute_abbreviations(
        paragraph,
        [
            Abbreviation("CSS", "Cascading Style Sheets"),
            Abbreviation("Style", "A way of doing"),
            Abbreviation("HTML", "HyperText Markup Language"),
        ],
    )
    assert result.content == (
        '<abbr title="Cascading Style Sheets">CSS</abbr> '
        '<abbr title="A way of doing">Style</abbr> and '
        '<abbr title="HyperText Markup Language">HTML</abbr>'
    )


def test_abbreviations_are_case_sensitive_and_skip_attributes():
    paragraph = Paragraph(content='<a href="html.html">html</a> HTML')
    result = substitute_abbreviations(paragraph, [Abbreviation("html", "lowercase")])
    assert result.content == '<a href="html.html"><abbr title="lowercase">html</abbr></a> HTML'


def _classify(markup):
    return ContentClassifier().classify(BeautifulSoup(markup, "html.parser"), language="en")


def test_classifier_entity_types():
    content = _classify(
        "<h1>Title</h1>\n"
        '<p><img alt="clip ~" src="clip.mp4"/></p>\n'
        '<p><a href="https://example.com" title="Example">An <em>example</em></a></p>\n'
        "<p>*[API]: Application Programming Interface</p>\n"
        "<p>:: en</p>\n"
        '<p id="body">The API is documented.</p>\n'
    )
    assert content.title == "Title"
    assert content.media_embed_declarations == [
        MediaEmbedDeclaration(alt="clip", source="clip.mp4", attributes=MediaAttributes(looped=True))
    ]
    assert content.links == [
        Link(id="an-example", name="An <em>example</em>", url="https://example.com", title="Example")
    ]
    assert content.abbreviations == [Abbreviation("API", "Application Programming Interface")]
    assert content.paragraphs == [
        Paragraph(id="body", content='The <abbr title="Application Programming Interface">API</abbr> is documented.')
    ]
    assert content.issues == []


def test_classifier_ignores_nested_paragraphs_and_reads_footnotes():
    content = _classify(
        "<p>Text</p>\n"
        "<blockquote><p>quoted</p></blockquote>\n"
        '<div class="footnote"><hr/><ol>'
        '<li id="fn:note"><p>The note.</p></li>'
        '<li id="fn:2"><p>Another.</p></li>'
        "</ol></div>"
    )
    assert [p.content for p in content.paragraphs] == ["Text"]
    assert [f.name for f in content.footnotes] == ["note", "2"]
    assert content.footnotes[0].content == "<p>The note.</p>"
    assert content.title == ""


def test_classifier_empty_paragraph_is_not_an_error():
    content = _classify("<p></p>")
    assert content.paragraphs == [Paragraph(content="")]
    assert content.issues == []


def test_classifier_reports_malformed_nodes_and_continues():
    content = _classify('<p><img alt="x"/></p>\n<p><a>nowhere</a></p>\n<p>after</p>')
    assert content.media_embed_declarations == []
    assert content.links == []
    assert [p.content for p in content.paragraphs] == ["after"]
    assert [issue.message for issue in content.issues] == [
        "media embed has no source",
        "isolated link has no href",
    ]
    assert all(issue.language == "en" for issue in content.issues)


def test_image_and_anchor_blocks_never_share_a_type():
    classifier = ContentClassifier()
    tree = BeautifulSoup('<p><img alt="a" src="a.png"/></p><p><a href="a.png">a</a></p>', "html.parser")
    image_block, anchor_block = tree.find_all("p", recursive=False)
    assert isinstance(classifier.classify_block(image_block), MediaEmbedDeclaration)
    assert isinstance(classifier.classify_block(anchor_block), Link)
