"""
Pytest Configuration and Fixtures

Shared fixtures for all tests: sample posts, sources, collections and a
blog directory written from the externalized test documents.
"""

import pytest
import sys
from datetime import date
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import DOCUMENTS, EXPECTED
from portfolio.collection import BlogCollection
from portfolio.models import BlogPost, Project
from portfolio.sources import FileSystemPostSource, InMemoryPostSource


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_posts():
    """Posts covering published, draft, multi-tag and untagged cases."""
    return [
        BlogPost(
            title="Getting started with Cargo workspaces",
            date=date(2025, 4, 8),
            slug="cargo-workspaces",
            tags=("Rust", "cargo"),
            summary="Splitting a crate into a workspace.",
            body="A workspace shares one `Cargo.lock` between crates.",
        ),
        BlogPost(
            title="Error handling with thiserror",
            date=date(2025, 3, 29),
            slug="error-handling",
            tags=("rust", "errors"),
            draft=True,
            summary="Typed errors for libraries.",
            body="Draft notes.",
        ),
        BlogPost(
            title="Async Rust in 2024",
            date=date(2024, 10, 26),
            slug="async-rust",
            tags=("rust", "async"),
            summary="Where async Rust stands.",
            images=("/static/images/async-rust.png",),
            body="Async fn in traits is stable.",
        ),
        BlogPost(
            title="Release notes roundup",
            date=date(2024, 1, 15),
            slug="notes/release-notes",
            summary="Untagged post in a subdirectory.",
            body="Short body.",
        ),
    ]


@pytest.fixture
def memory_source(sample_posts):
    """In-memory source holding the sample posts."""
    return InMemoryPostSource(sample_posts)


@pytest.fixture
def collection(sample_posts):
    """Collection built from the sample posts."""
    return BlogCollection(sample_posts)


@pytest.fixture
def blog_dir(tmp_path):
    """Blog directory populated with the test documents."""
    root = tmp_path / "blog"
    for name, text in DOCUMENTS.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def fs_source(blog_dir):
    """Filesystem source over the test blog directory."""
    return FileSystemPostSource(blog_dir)


@pytest.fixture
def output_dir(tmp_path):
    """Empty output directory for builds."""
    path = tmp_path / "public"
    return path


@pytest.fixture
def sample_projects():
    """Projects with and without optional fields."""
    return [
        Project(title="Linked", description="Has a link and image", href="https://example.com", img_src="/img.png"),
        Project(title="Bare", description="No link, no image"),
    ]


@pytest.fixture
def expected_values():
    """Expected values from test_config."""
    return EXPECTED
