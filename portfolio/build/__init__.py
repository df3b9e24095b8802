"""
Build module.

Validates the content and writes the indexes and feeds the site consumes.
"""

from portfolio.build.builder import (
    SiteBuilder,
    BuildConfig,
    BuildResult,
    run_build,
)
from portfolio.build.feed import render_feed

__all__ = [
    "SiteBuilder",
    "BuildConfig",
    "BuildResult",
    "run_build",
    "render_feed",
]
