from __future__ import annotations


class DescriptionParseError(Exception):
    """
    Raised when a whole description cannot be parsed (e.g. undecodable input).
    """


class MalformedContentNode(DescriptionParseError):
    """
    Raised for a single rendered block that lacks what its classification needs,
    such as an image without a source. Callers skip the node, not the document.
    """

    def __init__(self, node: str, message: str):
        super().__init__(f"malformed content node {node!r}: {message}")
        self.node = node
        self.message = message
