"""
Configuration module for the portfolio site content.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of portfolio/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
# Default: "development" for safe local previews
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose output (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Content Locations
# =============================================================================

# Root directory holding authored content (relative paths resolve against project root)
CONTENT_DIR: Path = _project_root / os.getenv("CONTENT_DIR", "data")

# Directory of blog post documents (*.md / *.mdx)
BLOG_DIR: Path = _project_root / os.getenv("BLOG_DIR", str(CONTENT_DIR / "blog"))

# Where the build writes posts.json, tag-data.json, projects.json and feed.xml
OUTPUT_DIR: Path = _project_root / os.getenv("OUTPUT_DIR", "public")


# =============================================================================
# Site Metadata
# =============================================================================

SITE_TITLE: str = os.getenv("SITE_TITLE", "Portfolio & Blog")
SITE_URL: str = os.getenv("SITE_URL", "http://localhost:5000")
SITE_DESCRIPTION: str = os.getenv("SITE_DESCRIPTION", "Projects and writing")
SITE_LANGUAGE: str = os.getenv("SITE_LANGUAGE", "en-us")

# Posts per listing page
# Default: 5, the page size the blog listing has always used
POSTS_PER_PAGE: int = int(os.getenv("POSTS_PER_PAGE", "5"))

# Drafts are reachable for preview everywhere except production
SHOW_DRAFTS: bool = os.getenv(
    "SHOW_DRAFTS", "false" if APP_ENV == "production" else "true"
).lower() == "true"


# =============================================================================
# Link Checking
# =============================================================================

# HTTP request timeout in seconds for project link checks
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if is_production():
        if not SITE_URL.startswith("https://"):
            errors.append("SITE_URL must use https:// in production")
        if SHOW_DRAFTS:
            errors.append("SHOW_DRAFTS must be disabled in production")

    if not (SITE_URL.startswith("http://") or SITE_URL.startswith("https://")):
        errors.append(f"SITE_URL must start with http:// or https://, got {SITE_URL}")

    if POSTS_PER_PAGE < 1:
        errors.append("POSTS_PER_PAGE must be at least 1")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  CONTENT_DIR: {CONTENT_DIR}")
    print(f"  BLOG_DIR: {BLOG_DIR}")
    print(f"  OUTPUT_DIR: {OUTPUT_DIR}")
    print(f"  SITE_TITLE: {SITE_TITLE}")
    print(f"  SITE_URL: {SITE_URL}")
    print(f"  POSTS_PER_PAGE: {POSTS_PER_PAGE}")
    print(f"  SHOW_DRAFTS: {SHOW_DRAFTS}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
