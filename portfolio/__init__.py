"""
Portfolio core package.

This package currently focuses on parsing work descriptions. It exposes
dataclasses for parsed content, a pluggable parsing engine interface, the
individual parsing stages (front matter, language blocks, media alt syntax,
block classification, abbreviations) and storage helpers for description
files and parser output.
"""
