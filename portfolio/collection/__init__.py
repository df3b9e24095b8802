"""
Collection module.

Listings, tag indexes and lookups over the blog posts.
"""

from portfolio.collection.blog import BlogCollection, Page, sort_posts

__all__ = [
    "BlogCollection",
    "Page",
    "sort_posts",
]
