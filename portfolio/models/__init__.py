"""
Data models module.

Defines the project card and blog post records.
"""

from portfolio.models.project import Project
from portfolio.models.blog_post import BlogPost

__all__ = [
    "Project",
    "BlogPost",
]
