"""
Blog post record.

Defines the BlogPost dataclass: the parsed form of a markdown document with
YAML front-matter. Posts are parsed once at build time and never mutated.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

from portfolio.content.errors import FrontMatterError
from portfolio.content.frontmatter import parse_document, serialize_document
from portfolio.content.slug import slugify

WORDS_PER_MINUTE = 200
DEFAULT_TYPE = "Blog"

# Front-matter keys in the order they are written back out
FRONT_MATTER_KEYS = ("title", "date", "lastmod", "tags", "draft", "summary", "images", "type")

_WORD_RE = re.compile(r"\S+")


def _parse_date(value: Any, key: str, source: Optional[str]) -> date:
    """Coerce a YAML date, datetime or ISO string into a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise FrontMatterError(f"{key} is not a valid ISO date: {value!r}", source)
    raise FrontMatterError(f"{key} must be an ISO date, got {type(value).__name__}", source)


def _parse_string_list(value: Any, key: str, source: Optional[str]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise FrontMatterError(f"{key} must be a list of strings", source)
    items = []
    for item in value:
        if not isinstance(item, (str, int, float)) or isinstance(item, bool):
            raise FrontMatterError(f"{key} must contain only strings, got {item!r}", source)
        text = str(item).strip()
        if text:
            items.append(text)
    return tuple(items)


def _parse_bool(value: Any, key: str, source: Optional[str]) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise FrontMatterError(f"{key} must be true or false, got {value!r}", source)


def _parse_text(value: Any, key: str, source: Optional[str], default: str = "") -> str:
    if value is None:
        return default
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise FrontMatterError(f"{key} must be text, got {type(value).__name__}", source)
    return str(value)


@dataclass(frozen=True)
class BlogPost:
    """
    A single blog post.

    Attributes:
        title: Post title.
        date: Publication date.
        slug: URL-safe identifier used for routing.
        tags: Free-text tags, in authored order.
        draft: Draft posts are left out of public listings.
        summary: Short teaser shown in listings.
        images: Ordered image paths (may be empty).
        type: Category label of the document.
        body: Markdown body.
        lastmod: Optional last-modified date.
        extra: Any other front-matter keys, preserved as authored.
    """

    title: str
    date: date
    slug: str = ""
    tags: Tuple[str, ...] = ()
    draft: bool = False
    summary: str = ""
    images: Tuple[str, ...] = ()
    type: str = DEFAULT_TYPE
    body: str = ""
    lastmod: Optional[date] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.title or not str(self.title).strip():
            raise FrontMatterError("title is required and cannot be empty", self.slug or None)
        if not isinstance(self.date, date):
            raise FrontMatterError("date must be a calendar date", self.slug or None)
        for tag in self.tags:
            if not slugify(tag):
                raise FrontMatterError(
                    f"tag {tag!r} has no letters or digits to group by", self.slug or None
                )
        if not self.slug:
            object.__setattr__(self, "slug", slugify(self.title))

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def tag_slugs(self) -> Tuple[str, ...]:
        """Tags normalized for grouping, duplicates removed."""
        seen = []
        for tag in self.tags:
            tag_slug = slugify(tag)
            if tag_slug not in seen:
                seen.append(tag_slug)
        return tuple(seen)

    @property
    def word_count(self) -> int:
        return len(_WORD_RE.findall(self.body))

    @property
    def reading_time(self) -> int:
        """Estimated reading time in whole minutes (at least 1)."""
        return max(1, math.ceil(self.word_count / WORDS_PER_MINUTE))

    def has_tag(self, tag: str) -> bool:
        return slugify(tag) in self.tag_slugs

    # -------------------------------------------------------------------------
    # Parsing and serialization
    # -------------------------------------------------------------------------

    @classmethod
    def from_front_matter(
        cls,
        metadata: Dict[str, Any],
        body: str = "",
        slug: Optional[str] = None,
        source: Optional[str] = None,
    ) -> "BlogPost":
        """
        Build a post from a parsed front-matter mapping.

        Args:
            metadata: Front-matter mapping.
            body: Markdown body.
            slug: Slug to use; derived from the title when omitted.
            source: Document path, used in error messages.

        Raises:
            FrontMatterError: If a required field is missing or a value has
                the wrong shape.
        """
        if "title" not in metadata or metadata["title"] in (None, ""):
            raise FrontMatterError("missing required field 'title'", source)
        if "date" not in metadata or metadata["date"] in (None, ""):
            raise FrontMatterError("missing required field 'date'", source)

        title = _parse_text(metadata["title"], "title", source).strip()
        if not title:
            raise FrontMatterError("title cannot be empty", source)

        lastmod = metadata.get("lastmod")
        extra = {k: v for k, v in metadata.items() if k not in FRONT_MATTER_KEYS}

        tags = _parse_string_list(metadata.get("tags"), "tags", source)
        for tag in tags:
            if not slugify(tag):
                raise FrontMatterError(f"tag {tag!r} has no letters or digits to group by", source)

        return cls(
            title=title,
            date=_parse_date(metadata["date"], "date", source),
            slug=slug or slugify(title),
            tags=tags,
            draft=_parse_bool(metadata.get("draft"), "draft", source),
            summary=_parse_text(metadata.get("summary"), "summary", source),
            images=_parse_string_list(metadata.get("images"), "images", source),
            type=_parse_text(metadata.get("type"), "type", source, DEFAULT_TYPE),
            body=body,
            lastmod=_parse_date(lastmod, "lastmod", source) if lastmod else None,
            extra=extra,
        )

    @classmethod
    def from_document(
        cls,
        text: str,
        slug: Optional[str] = None,
        source: Optional[str] = None,
    ) -> "BlogPost":
        """Parse a full markdown document (front-matter plus body)."""
        metadata, body = parse_document(text, source)
        return cls.from_front_matter(metadata, body, slug=slug, source=source)

    def front_matter(self) -> Dict[str, Any]:
        """Return the authored front-matter fields, in canonical order."""
        data: Dict[str, Any] = {
            "title": self.title,
            "date": self.date.isoformat(),
        }
        if self.lastmod:
            data["lastmod"] = self.lastmod.isoformat()
        data.update({
            "tags": list(self.tags),
            "draft": self.draft,
            "summary": self.summary,
            "images": list(self.images),
            "type": self.type,
        })
        data.update(self.extra)
        return data

    def to_document(self) -> str:
        """Serialize back to a front-matter markdown document."""
        return serialize_document(self.front_matter(), self.body)

    def core_content(self) -> Dict[str, Any]:
        """Listing shape: front-matter plus derived fields, without the body."""
        data = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in self.front_matter().items()
        }
        data.update({
            "slug": self.slug,
            "path": f"blog/{self.slug}",
            "readingTime": self.reading_time,
            "tagSlugs": list(self.tag_slugs),
        })
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Full shape including the body."""
        data = self.core_content()
        data["body"] = self.body
        return data

    def __str__(self) -> str:
        marker = " [draft]" if self.draft else ""
        return f"{self.date.isoformat()} {self.title}{marker}"

    def __repr__(self) -> str:
        return (
            f"BlogPost(slug={self.slug!r}, title={self.title!r}, "
            f"date={self.date.isoformat()!r}, draft={self.draft})"
        )
