"""
Front-matter codec for markdown documents.

A document is a YAML mapping between two `---` lines followed by the body:

    ---
    title: Hello
    date: '2025-04-08'
    tags:
      - rust
    ---

    Body text...
"""

from typing import Any, Dict, Optional, Tuple

import yaml

from portfolio.content.errors import FrontMatterError

DELIMITER = "---"


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")


def parse_document(text: str, source: Optional[str] = None) -> Tuple[Dict[str, Any], str]:
    """
    Split a document into its front-matter mapping and body.

    Args:
        text: Full document text.
        source: Document path, used in error messages.

    Returns:
        Tuple of (metadata dict, body string).

    Raises:
        FrontMatterError: If the front-matter block is missing, unterminated,
            not valid YAML, or not a mapping.
    """
    text = _normalize_newlines(text)
    lines = text.split("\n")

    if not lines or lines[0].strip() != DELIMITER:
        raise FrontMatterError("document has no front-matter block", source)

    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            block = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1:]).lstrip("\n")
            break
    else:
        raise FrontMatterError("front-matter block is not terminated", source)

    try:
        metadata = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as e:
        # ValueError: YAML timestamps such as 2025-13-45 fail in the constructor
        raise FrontMatterError(f"invalid YAML in front-matter: {e}", source) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontMatterError(
            f"front-matter must be a mapping, got {type(metadata).__name__}", source
        )

    return metadata, body


def serialize_document(metadata: Dict[str, Any], body: str = "") -> str:
    """
    Render metadata and body back into a front-matter document.

    Date values are written as plain YAML timestamps, so they load back as
    dates. Key order is preserved.
    """
    dumped = yaml.safe_dump(dict(metadata), sort_keys=False, allow_unicode=True).rstrip()
    document = f"{DELIMITER}\n{dumped}\n{DELIMITER}\n"
    if body:
        document += f"\n{body}"
    return document
