#!/usr/bin/env python3
"""
Portfolio - content build for the project list and blog.

Command-line entry point:
  - Load and validate every blog post document (fails on malformed front-matter)
  - Write posts.json, tag-data.json, projects.json and RSS feeds
  - List posts or tags, check project links
  - Print execution summary

Usage:
    python main.py                      # Validate and write outputs
    python main.py --dry-run            # Validate only, no writes
    python main.py --list               # Print the public listing
    python main.py --list --tag rust    # Print posts for one tag
    python main.py --check-links        # Check project links

Examples:
    # Preview build with drafts
    python main.py --include-drafts --output-dir preview --verbose

    # CI check
    python main.py --dry-run --quiet
"""

import argparse
import sys

from portfolio import __version__
from portfolio.build import BuildConfig, BuildResult, SiteBuilder
from portfolio.collection import BlogCollection
from portfolio.content.errors import ContentError
from portfolio.data import get_projects
from portfolio.services import LinkChecker
from portfolio.sources import FileSystemPostSource
from portfolio.config import (
    BLOG_DIR,
    OUTPUT_DIR,
    print_config_summary,
    validate_config,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="portfolio",
        description="Validate and index the portfolio's projects and blog posts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Validate content and write outputs
  %(prog)s --dry-run                 Validate only, skip writes
  %(prog)s --include-drafts          Include drafts in the indexes (preview)
  %(prog)s --list                    Print the public post listing
  %(prog)s --list --tag python       Print posts tagged 'python'
  %(prog)s --tags                    Print tag counts
  %(prog)s --check-links             Check every project link
        """,
    )

    # Build options
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Validate content but skip writing outputs",
    )

    parser.add_argument(
        "--content-dir", "-c",
        default=None,
        metavar="DIR",
        help=f"Blog post directory (default: {BLOG_DIR})",
    )

    parser.add_argument(
        "--output-dir", "-o",
        default=None,
        metavar="DIR",
        help=f"Output directory (default: {OUTPUT_DIR})",
    )

    parser.add_argument(
        "--include-drafts", "-d",
        action="store_true",
        help="Include draft posts in listings and indexes",
    )

    # Query options
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="Print the post listing and exit",
    )

    parser.add_argument(
        "--tag", "-t",
        default=None,
        metavar="TAG",
        help="With --list, only show posts carrying TAG",
    )

    parser.add_argument(
        "--tags",
        action="store_true",
        help="Print tag counts and exit",
    )

    parser.add_argument(
        "--check-links",
        action="store_true",
        help="Check every project link and exit",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed progress",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors and final summary",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Portfolio Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def list_posts(collection: BlogCollection, tag: str = None, include_drafts: bool = False) -> None:
    """Print one line per post, newest first."""
    if tag:
        posts = collection.posts_by_tag(tag, include_drafts=include_drafts)
    else:
        posts = collection.all_posts(include_drafts=include_drafts)

    if not posts:
        print("No posts found")
        return

    for post in posts:
        tags = ", ".join(post.tags)
        print(f"{post}  ({post.slug})" + (f"  [{tags}]" if tags else ""))


def list_tags(collection: BlogCollection, include_drafts: bool = False) -> None:
    """Print tag counts."""
    counts = collection.tag_counts(include_drafts=include_drafts)
    if not counts:
        print("No tags found")
        return
    for tag, count in counts.items():
        print(f"{tag:30} {count}")


def check_links(quiet: bool = False) -> int:
    """Check project links. Returns the exit code."""
    results = LinkChecker().check_projects(get_projects())
    failed = [r for r in results if not r.ok]

    for r in results:
        if not quiet or not r.ok:
            print(r)

    if failed:
        print(f"\n❌ {len(failed)} of {len(results)} project links failed")
        return 1
    if not quiet:
        print(f"\n✓ {len(results)} project links checked")
    return 0


def print_result_summary(result: BuildResult) -> None:
    """Print the build result summary."""
    print(result.to_summary())


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.tag and not args.list:
        parser.error("--tag requires --list")

    # Handle --show-config
    if args.show_config:
        show_config()
        return 0

    if args.check_links:
        return check_links(quiet=args.quiet)

    source = FileSystemPostSource(args.content_dir)

    try:
        # Query modes load the collection directly and report content errors
        if args.list or args.tags:
            collection = BlogCollection.from_source(source)
            if args.tags:
                list_tags(collection, include_drafts=args.include_drafts)
            else:
                list_posts(collection, tag=args.tag, include_drafts=args.include_drafts)
            return 0

        # Print header (unless quiet)
        if not args.quiet:
            print("=" * 60)
            print("Portfolio Content Build")
            print("=" * 60)

            if args.dry_run:
                print("Mode: DRY RUN (no writes)")

            if args.verbose:
                print("\nConfiguration:")
                print_config_summary()
                print()

        config = BuildConfig(
            output_dir=args.output_dir or OUTPUT_DIR,
            include_drafts=args.include_drafts,
            dry_run=args.dry_run,
            verbose=args.verbose,
        )

        result = SiteBuilder(source, config).run()

        if not args.quiet or not result.success:
            print_result_summary(result)

        return 0 if result.success else 1

    except (ContentError, FileNotFoundError) as e:
        print(f"\n❌ Content error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
