"""
Sources module.

Loads blog post documents from disk or memory.
"""

from portfolio.sources.base import PostSource
from portfolio.sources.filesystem import FileSystemPostSource
from portfolio.sources.memory import InMemoryPostSource

__all__ = [
    "PostSource",
    "FileSystemPostSource",
    "InMemoryPostSource",
]
