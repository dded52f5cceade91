from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


def split_front_matter(raw: str) -> Tuple[Dict[str, Any], str]:
    """
    Split the YAML header off a description and return (metadata, body).

    Every line equal to `---` (ignoring surrounding whitespace) toggles the
    header on or off and is dropped. Decoding problems never escape: a missing,
    empty or malformed header gives an empty mapping.
    """
    in_header = False
    header_lines: List[str] = []
    body_lines: List[str] = []
    for line in raw.splitlines(keepends=True):
        if line.strip() == FRONT_MATTER_DELIMITER:
            in_header = not in_header
            continue
        if in_header:
            header_lines.append(line)
        else:
            body_lines.append(line)

    return _decode_header("".join(header_lines)), "".join(body_lines)


def _decode_header(raw_header: str) -> Dict[str, Any]:
    if not raw_header.strip():
        return {}
    try:
        decoded = yaml.safe_load(raw_header)
    except yaml.YAMLError as exc:
        logger.warning("Ignoring malformed front matter: %s", exc)
        return {}
    if not isinstance(decoded, dict):
        logger.debug("Front matter is a %s, not a mapping; ignoring it", type(decoded).__name__)
        return {}
    return decoded
