"""
Portfolio - Content API

A small Flask app serving the project list and blog posts as JSON for the
site's rendering layer.

Run with: python -m web.app
"""

import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, Response, jsonify, request
from datetime import date, datetime
from portfolio.build.feed import render_feed
from portfolio.collection.blog import BlogCollection
from portfolio.content.errors import PostNotFoundError
from portfolio.content.slug import slugify
from portfolio.data.projects_data import get_projects
from portfolio.sources.filesystem import FileSystemPostSource
from portfolio.config import (
    POSTS_PER_PAGE,
    SHOW_DRAFTS,
    SITE_TITLE,
)

app = Flask(__name__)

# Loaded on first request and reused for the life of the process
_collection: Optional[BlogCollection] = None


def get_collection() -> BlogCollection:
    """Get the blog collection, loading it from the blog directory once."""
    global _collection
    if _collection is None:
        _collection = BlogCollection.from_source(FileSystemPostSource())
    return _collection


def reset_collection() -> None:
    """Drop the cached collection so the next request reloads from disk."""
    global _collection
    _collection = None


def _wants_preview() -> bool:
    return SHOW_DRAFTS and request.args.get("preview", "").lower() in ("1", "true", "yes")


def _page_payload(page, posts_key: str = "posts") -> dict:
    return {
        posts_key: [p.core_content() for p in page.items],
        "pagination": {
            "page": page.page,
            "total_pages": page.total_pages,
            "per_page": page.per_page,
            "has_next": page.has_next,
            "has_previous": page.has_previous,
        },
    }


# =============================================================================
# Projects
# =============================================================================

@app.route("/api/projects")
def api_projects():
    """Project cards in display order."""
    return jsonify({"projects": [p.to_dict() for p in get_projects()]})


# =============================================================================
# Posts
# =============================================================================

@app.route("/api/posts")
def api_posts():
    """Public listing, newest first, paginated. ``?tag=`` filters by tag."""
    collection = get_collection()
    tag = request.args.get("tag")

    if tag:
        posts = collection.posts_by_tag(tag)
    else:
        posts = collection.public_posts()

    try:
        page = BlogCollection.paginate(
            posts,
            page=request.args.get("page", 1),
            per_page=int(request.args.get("per_page", POSTS_PER_PAGE)),
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    payload = _page_payload(page)
    payload["count"] = len(posts)
    if tag:
        payload["tag"] = slugify(tag)
    return jsonify(payload)


@app.route("/api/posts/<path:slug>")
def api_post(slug):
    """A single post with its body. Drafts need ``?preview=1``."""
    collection = get_collection()

    try:
        post = collection.get_post(slug, include_drafts=_wants_preview())
    except PostNotFoundError:
        return jsonify({"error": f"Post not found: {slug}"}), 404

    payload = post.to_dict()
    if not post.draft:
        newer, older = collection.adjacent_posts(slug)
        payload["next"] = newer.core_content() if newer else None
        payload["prev"] = older.core_content() if older else None
    return jsonify(payload)


# =============================================================================
# Tags
# =============================================================================

@app.route("/api/tags")
def api_tags():
    """Tag counts across published posts."""
    return jsonify({"tags": dict(get_collection().tag_counts())})


@app.route("/api/tags/<tag>")
def api_tag(tag):
    """Published posts for one tag."""
    posts = get_collection().posts_by_tag(tag)

    if not posts:
        return jsonify({"error": f"Tag not found: {tag}"}), 404

    return jsonify({
        "tag": slugify(tag),
        "count": len(posts),
        "posts": [p.core_content() for p in posts],
    })


# =============================================================================
# Feed
# =============================================================================

@app.route("/feed.xml")
def feed():
    """RSS feed of published posts."""
    xml = render_feed(get_collection().public_posts(), title=SITE_TITLE)
    return Response(xml, mimetype="application/rss+xml")


@app.template_filter("format_date")
def format_date(value):
    """Format a date for display."""
    if not value:
        return "Unknown"
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime)):
        return value.strftime("%B %d, %Y").replace(" 0", " ")
    return str(value)


if __name__ == "__main__":
    print("=" * 50)
    print(f"{SITE_TITLE} - Content API")
    print("=" * 50)
    print("Open http://localhost:5000/api/posts in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=True, port=5000)
