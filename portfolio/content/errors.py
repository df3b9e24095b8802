"""
Content errors.

Malformed documents are authoring-time errors: they propagate and fail the
build instead of being skipped.
"""

from typing import Optional


class ContentError(Exception):
    """Base class for all content loading and lookup errors."""
    pass


class FrontMatterError(ContentError, ValueError):
    """A document's front-matter is missing, unparseable, or invalid."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class DuplicateSlugError(ContentError):
    """Two documents resolve to the same slug."""

    def __init__(self, slug: str, first: str, second: str):
        self.slug = slug
        super().__init__(f"Duplicate slug '{slug}': {first} and {second}")


class PostNotFoundError(ContentError, LookupError):
    """No post matches the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")
