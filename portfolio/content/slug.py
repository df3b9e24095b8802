"""
Slug generation for post routing and tag grouping.

Mirrors the GitHub heading slugger: lowercase, punctuation removed,
every whitespace character replaced by a hyphen.
"""

import re

_STRIP_RE = re.compile(r"[^\w\s-]", re.UNICODE)
_SPACE_RE = re.compile(r"\s", re.UNICODE)


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug.

    Examples:
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("Rust & WebAssembly")
        'rust--webassembly'
    """
    if not text:
        return ""
    slug = _STRIP_RE.sub("", text.strip().lower())
    return _SPACE_RE.sub("-", slug)
