"""
Content build - core execution logic.

This module orchestrates the complete build:

    Source → Validate → Index → Write → Summary

Steps:
1. Load every post document from the source (drafts included)
2. Fail loudly on the first malformed document
3. Build the public listing, tag counts and project list
4. Write posts.json, tag-data.json, projects.json and feed.xml
   (plus one feed per tag under tags/<tag>/feed.xml)
5. Return a result with counts and written files

Nothing is written in dry-run mode; the build then only validates.
"""

import json
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from portfolio.build.feed import render_feed
from portfolio.collection.blog import BlogCollection
from portfolio.config import OUTPUT_DIR
from portfolio.content.errors import ContentError
from portfolio.data.projects_data import get_projects
from portfolio.models.project import Project
from portfolio.sources.base import PostSource
from portfolio.sources.filesystem import FileSystemPostSource


# =============================================================================
# Build Result Data Structures
# =============================================================================

@dataclass
class BuildResult:
    """Complete result of a content build."""
    started_at: datetime
    finished_at: Optional[datetime] = None
    source_name: str = ""

    # Counts
    total_posts: int = 0
    public_posts: int = 0
    draft_posts: int = 0
    tag_count: int = 0
    project_count: int = 0

    dry_run: bool = False
    include_drafts: bool = False
    files_written: List[str] = field(default_factory=list)

    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def duration_seconds(self) -> float:
        """Total build duration in seconds."""
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "CONTENT BUILD SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            f"Mode:     {'DRY RUN' if self.dry_run else 'BUILD'}"
            f"{' (drafts included)' if self.include_drafts else ''}",
            f"Source:   {self.source_name}",
            "",
            f"Posts:    {self.total_posts} total, {self.public_posts} public, {self.draft_posts} drafts",
            f"Tags:     {self.tag_count}",
            f"Projects: {self.project_count}",
        ]

        if self.files_written:
            lines.extend(["", "Files:"])
            for path in self.files_written:
                lines.append(f"  {path}")
        elif self.dry_run:
            lines.append("\nFiles: SKIPPED (dry-run mode)")

        if self.errors:
            lines.extend(["", "Errors:"])
            for error in self.errors[:5]:
                lines.append(f"  - {error}")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Build Configuration
# =============================================================================

@dataclass
class BuildConfig:
    """
    Configuration for a content build.

    CLI arguments override config file defaults.
    """
    output_dir: Union[str, Path] = OUTPUT_DIR
    include_drafts: bool = False
    dry_run: bool = False
    verbose: bool = False
    tag_feeds: bool = True


# =============================================================================
# Builder
# =============================================================================

class SiteBuilder:
    """
    Loads, validates and indexes the site content.

    Usage:
        builder = SiteBuilder(FileSystemPostSource("data/blog"), BuildConfig(dry_run=True))
        result = builder.run()
        print(result.to_summary())
    """

    def __init__(
        self,
        source: Optional[PostSource] = None,
        config: Optional[BuildConfig] = None,
        projects: Optional[List[Project]] = None,
    ):
        self.source = source or FileSystemPostSource()
        self.config = config or BuildConfig()
        self.projects = projects if projects is not None else get_projects()
        self.collection: Optional[BlogCollection] = None

    def _listing(self, collection: BlogCollection):
        return collection.all_posts(include_drafts=self.config.include_drafts)

    def build_indexes(self, collection: BlogCollection) -> Dict[str, Any]:
        """
        Build the JSON documents written by the build.

        Returns:
            Mapping of relative file name to JSON-serializable content.
        """
        include_drafts = self.config.include_drafts
        return {
            "posts.json": [p.core_content() for p in self._listing(collection)],
            "tag-data.json": dict(collection.tag_counts(include_drafts=include_drafts)),
            "projects.json": [p.to_dict() for p in self.projects],
        }

    def _write_json(self, path: Path, content: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(content, indent=2, ensure_ascii=False, default=str) + "\n",
            encoding="utf-8",
        )

    def _write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def write_outputs(self, collection: BlogCollection) -> List[str]:
        """Write every output file and return their paths."""
        output_dir = Path(self.config.output_dir)
        written: List[str] = []

        for name, content in self.build_indexes(collection).items():
            path = output_dir / name
            self._write_json(path, content)
            written.append(str(path))

        # Feeds only ever carry published posts
        feed_path = output_dir / "feed.xml"
        self._write_text(feed_path, render_feed(collection.public_posts()))
        written.append(str(feed_path))

        if self.config.tag_feeds:
            for tag, posts in collection.tag_index(include_drafts=False).items():
                relative = f"tags/{tag}/feed.xml"
                path = output_dir / relative
                self._write_text(path, render_feed(posts, feed_path=relative))
                written.append(str(path))

        return written

    def run(self) -> BuildResult:
        """
        Execute the build.

        A content error (malformed front-matter, duplicate slug, missing
        directory) stops the build and is recorded on the result.

        Returns:
            BuildResult with execution details.
        """
        result = BuildResult(
            started_at=datetime.now(),
            source_name=self.source.name,
            dry_run=self.config.dry_run,
            include_drafts=self.config.include_drafts,
            project_count=len(self.projects),
        )

        try:
            if self.config.verbose:
                print(f"Loading posts from {self.source.name}...")

            collection = BlogCollection.from_source(self.source)
            self.collection = collection

            result.total_posts = len(collection)
            result.public_posts = len(collection.public_posts())
            result.draft_posts = len(collection.draft_posts())
            result.tag_count = len(collection.tag_counts(include_drafts=self.config.include_drafts))

            if self.config.verbose:
                print(f"Loaded {result.total_posts} posts ({result.draft_posts} drafts)")

            if not self.config.dry_run:
                result.files_written = self.write_outputs(collection)

        except (ContentError, FileNotFoundError) as e:
            result.errors.append(f"{type(e).__name__}: {e}")
        except OSError as e:
            result.errors.append(f"Build error: {e}")
            if self.config.verbose:
                result.errors.append(traceback.format_exc())

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_build(
    content_dir: Union[str, Path, None] = None,
    output_dir: Union[str, Path, None] = None,
    include_drafts: bool = False,
    dry_run: bool = False,
    verbose: bool = False,
) -> BuildResult:
    """
    Run a build from the blog directory.

    Args:
        content_dir: Blog directory (default: BLOG_DIR).
        output_dir: Output directory (default: OUTPUT_DIR).
        include_drafts: Include drafts in posts.json and tag-data.json.
        dry_run: Validate only, write nothing.
        verbose: Print progress.

    Returns:
        BuildResult with execution details.
    """
    config = BuildConfig(
        output_dir=output_dir or OUTPUT_DIR,
        include_drafts=include_drafts,
        dry_run=dry_run,
        verbose=verbose,
    )
    return SiteBuilder(FileSystemPostSource(content_dir), config).run()
