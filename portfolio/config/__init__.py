"""
Configuration module.

Handles environment variables, content locations, and site settings.
"""

from portfolio.config.config import (
    APP_ENV,
    DEBUG,
    CONTENT_DIR,
    BLOG_DIR,
    OUTPUT_DIR,
    SITE_TITLE,
    SITE_URL,
    SITE_DESCRIPTION,
    SITE_LANGUAGE,
    POSTS_PER_PAGE,
    SHOW_DRAFTS,
    REQUEST_TIMEOUT,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "CONTENT_DIR",
    "BLOG_DIR",
    "OUTPUT_DIR",
    "SITE_TITLE",
    "SITE_URL",
    "SITE_DESCRIPTION",
    "SITE_LANGUAGE",
    "POSTS_PER_PAGE",
    "SHOW_DRAFTS",
    "REQUEST_TIMEOUT",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
