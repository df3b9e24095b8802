"""
Blog post collection.

Answers the questions a rendering layer asks of the post set:

- public listing: drafts removed, newest first
- all posts, drafts included (preview)
- lookup by slug
- tag index and tag counts
- pagination and newer/older neighbours

Posts are loaded once from a PostSource and never modified.
"""

import math
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from portfolio.config import POSTS_PER_PAGE
from portfolio.content.errors import DuplicateSlugError, PostNotFoundError
from portfolio.content.slug import slugify
from portfolio.models.blog_post import BlogPost
from portfolio.sources.base import PostSource


@dataclass
class Page:
    """
    One page of a listing.

    Attributes:
        items: Posts on this page.
        page: 1-based page number.
        total_pages: Number of pages in the listing (at least 1).
        per_page: Page size used.
    """
    items: List[BlogPost] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    per_page: int = POSTS_PER_PAGE

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def sort_posts(posts: Iterable[BlogPost]) -> List[BlogPost]:
    """Sort newest first; same-day posts are ordered by title."""
    by_title = sorted(posts, key=lambda p: p.title.lower())
    return sorted(by_title, key=lambda p: p.date, reverse=True)


class BlogCollection:
    """
    Read-only view over every blog post.

    Usage:
        collection = BlogCollection.from_source(FileSystemPostSource())
        for post in collection.public_posts():
            print(post.title)
    """

    def __init__(self, posts: Iterable[BlogPost]):
        self._posts: List[BlogPost] = sort_posts(posts)
        self._by_slug: Dict[str, BlogPost] = {}
        for post in self._posts:
            if post.slug in self._by_slug:
                raise DuplicateSlugError(post.slug, str(self._by_slug[post.slug]), str(post))
            self._by_slug[post.slug] = post

    @classmethod
    def from_source(cls, source: PostSource) -> "BlogCollection":
        """Load every post from a source once."""
        return cls(source.load_posts())

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self):
        return iter(self._posts)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def all_posts(self, include_drafts: bool = True) -> List[BlogPost]:
        """Every post, newest first. Drafts included unless asked otherwise."""
        if include_drafts:
            return list(self._posts)
        return self.public_posts()

    def public_posts(self) -> List[BlogPost]:
        """Published posts only, newest first."""
        return [p for p in self._posts if not p.draft]

    def draft_posts(self) -> List[BlogPost]:
        return [p for p in self._posts if p.draft]

    def get_post(self, slug: str, include_drafts: bool = True) -> BlogPost:
        """
        Look up a post by slug.

        Args:
            slug: Post slug.
            include_drafts: When False, drafts are treated as missing.

        Raises:
            PostNotFoundError: If no (visible) post has that slug.
        """
        post = self._by_slug.get(slug)
        if post is None or (post.draft and not include_drafts):
            raise PostNotFoundError(slug)
        return post

    # -------------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------------

    def posts_by_tag(self, tag: str, include_drafts: bool = False) -> List[BlogPost]:
        """Posts that declare ``tag`` (compared by slug), newest first."""
        tag_slug = slugify(tag)
        return [
            p for p in self.all_posts(include_drafts)
            if tag_slug in p.tag_slugs
        ]

    def tag_index(self, include_drafts: bool = False) -> Dict[str, List[BlogPost]]:
        """
        Group posts by tag slug.

        A post appears under every tag it declares, and under no other.
        Tags are ordered alphabetically; posts within a tag newest first.
        """
        grouped: Dict[str, List[BlogPost]] = {}
        for post in self.all_posts(include_drafts):
            for tag_slug in post.tag_slugs:
                grouped.setdefault(tag_slug, []).append(post)
        return OrderedDict(sorted(grouped.items()))

    def tag_counts(self, include_drafts: bool = False) -> Dict[str, int]:
        """Number of posts per tag slug."""
        return OrderedDict(
            (tag, len(posts)) for tag, posts in self.tag_index(include_drafts).items()
        )

    def tags(self, include_drafts: bool = False) -> List[str]:
        return list(self.tag_index(include_drafts).keys())

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def adjacent_posts(self, slug: str) -> Tuple[Optional[BlogPost], Optional[BlogPost]]:
        """
        Return the (newer, older) neighbours of a post in the public listing.

        Raises:
            PostNotFoundError: If the slug is not a published post.
        """
        posts = self.public_posts()
        for i, post in enumerate(posts):
            if post.slug == slug:
                newer = posts[i - 1] if i > 0 else None
                older = posts[i + 1] if i + 1 < len(posts) else None
                return newer, older
        raise PostNotFoundError(slug)

    @staticmethod
    def paginate(
        posts: List[BlogPost],
        page: Union[int, str] = 1,
        per_page: int = POSTS_PER_PAGE,
    ) -> Page:
        """
        Slice a listing into a page.

        An empty listing has a single empty page.

        Raises:
            ValueError: If ``page`` is not a number within 1..total_pages,
                or ``per_page`` is less than 1.
        """
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")

        page = int(page)
        total_pages = max(1, math.ceil(len(posts) / per_page))
        if not (1 <= page <= total_pages):
            raise ValueError(f"page must be between 1 and {total_pages}, got {page}")

        start = (page - 1) * per_page
        return Page(
            items=posts[start:start + per_page],
            page=page,
            total_pages=total_pages,
            per_page=per_page,
        )

    @staticmethod
    def core_content(post: BlogPost) -> dict:
        """The listing shape of a post: everything but the body."""
        return post.core_content()

    def __repr__(self) -> str:
        return f"<BlogCollection posts={len(self._posts)} drafts={len(self.draft_posts())}>"
