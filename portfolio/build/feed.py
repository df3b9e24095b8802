"""
RSS 2.0 feed rendering.

Renders the public listing with a Jinja2 template. Text is XML-escaped by
the environment's autoescaping.
"""

from datetime import datetime, time, timezone
from email.utils import format_datetime
from typing import List, Optional

from jinja2 import Environment, BaseLoader

from portfolio.config import SITE_TITLE, SITE_URL, SITE_DESCRIPTION, SITE_LANGUAGE
from portfolio.models.blog_post import BlogPost

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>{{ title }}</title>
    <link>{{ site_url }}/blog</link>
    <description>{{ description }}</description>
    <language>{{ language }}</language>
    {%- if last_build_date %}
    <lastBuildDate>{{ last_build_date }}</lastBuildDate>
    {%- endif %}
    <atom:link href="{{ feed_url }}" rel="self" type="application/rss+xml"/>
    {%- for post in posts %}
    <item>
      <guid>{{ site_url }}/blog/{{ post.slug }}</guid>
      <title>{{ post.title }}</title>
      <link>{{ site_url }}/blog/{{ post.slug }}</link>
      {%- if post.summary %}
      <description>{{ post.summary }}</description>
      {%- endif %}
      <pubDate>{{ post.date | rfc822 }}</pubDate>
      {%- for tag in post.tags %}
      <category>{{ tag }}</category>
      {%- endfor %}
    </item>
    {%- endfor %}
  </channel>
</rss>
"""


def rfc822(value) -> str:
    """Format a date as an RFC 822 timestamp (midnight UTC)."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)


_env = Environment(loader=BaseLoader(), autoescape=True)
_env.filters["rfc822"] = rfc822
_template = _env.from_string(FEED_TEMPLATE)


def render_feed(
    posts: List[BlogPost],
    feed_path: str = "feed.xml",
    title: Optional[str] = None,
    site_url: Optional[str] = None,
) -> str:
    """
    Render an RSS feed for the given posts.

    Drafts are never included, whatever the caller passes.

    Args:
        posts: Posts to include, in listing order.
        feed_path: Path of the feed relative to the site root.
        title: Channel title (defaults to SITE_TITLE).
        site_url: Site root URL (defaults to SITE_URL).

    Returns:
        Feed XML as a string.
    """
    site_url = (site_url or SITE_URL).rstrip("/")
    published = [p for p in posts if not p.draft]
    return _template.render(
        title=title or SITE_TITLE,
        site_url=site_url,
        description=SITE_DESCRIPTION,
        language=SITE_LANGUAGE,
        feed_url=f"{site_url}/{feed_path}",
        last_build_date=rfc822(published[0].date) if published else None,
        posts=published,
    )
