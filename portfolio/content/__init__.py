"""
Content module.

Front-matter parsing, slugs, and content errors.
"""

from portfolio.content.errors import (
    ContentError,
    FrontMatterError,
    DuplicateSlugError,
    PostNotFoundError,
)
from portfolio.content.frontmatter import parse_document, serialize_document
from portfolio.content.slug import slugify

__all__ = [
    "ContentError",
    "FrontMatterError",
    "DuplicateSlugError",
    "PostNotFoundError",
    "parse_document",
    "serialize_document",
    "slugify",
]
