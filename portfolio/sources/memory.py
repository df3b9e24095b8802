"""
In-memory post source for tests and previews.
"""

from typing import Iterable, List, Optional

from portfolio.content.errors import DuplicateSlugError
from portfolio.models.blog_post import BlogPost
from portfolio.sources.base import PostSource


class InMemoryPostSource(PostSource):
    """
    Holds posts in memory.

    Data lives only as long as the instance; nothing touches disk.
    """

    def __init__(self, posts: Optional[Iterable[BlogPost]] = None):
        self._posts: List[BlogPost] = []
        for post in posts or []:
            self.add(post)

    @property
    def name(self) -> str:
        return "memory"

    def add(self, post: BlogPost) -> None:
        """Add a post (for testing). Slugs must be unique."""
        for existing in self._posts:
            if existing.slug == post.slug:
                raise DuplicateSlugError(post.slug, existing.title, post.title)
        self._posts.append(post)

    def load_posts(self) -> List[BlogPost]:
        return list(self._posts)

    def clear(self) -> None:
        """Remove all posts (for testing)."""
        self._posts.clear()

    def count(self) -> int:
        return len(self._posts)
