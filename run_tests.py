#!/usr/bin/env python3
"""
Test Runner Script for the portfolio content layer

Runs the pytest suite, whole or by category.

Usage:
    python run_tests.py                    # Run all tests
    python run_tests.py --category build   # Run specific category
    python run_tests.py --quick            # Stop on first failure
    python run_tests.py --verbose          # Verbose output
    python run_tests.py --list             # List available categories
"""

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path

# Test categories mapping
TEST_CATEGORIES = {
    "models": "tests/test_models.py",
    "frontmatter": "tests/test_frontmatter.py",
    "sources": "tests/test_sources.py",
    "collection": "tests/test_collection.py",
    "build": "tests/test_build.py",
    "links": "tests/test_link_checker.py",
    "web": "tests/test_web_app.py",
    "cli": "tests/test_cli.py",
}

CATEGORY_DESCRIPTIONS = {
    "models": "Project and BlogPost records, round-trip",
    "frontmatter": "Front-matter codec and slugs",
    "sources": "Loading posts from disk, failing on malformed documents",
    "collection": "Listings, drafts, tags, pagination",
    "build": "Output files, dry-run, RSS feed",
    "links": "Project link checker (mocked HTTP)",
    "web": "JSON API routes and 404s",
    "cli": "Argument parsing, exit codes, query modes",
}


def list_categories():
    """Print available test categories."""
    print("\n" + "=" * 60)
    print("AVAILABLE TEST CATEGORIES")
    print("=" * 60)
    for key, desc in CATEGORY_DESCRIPTIONS.items():
        print(f"  {key:12} - {desc}")
    print("\n" + "=" * 60)
    print("Usage examples:")
    print("  python run_tests.py --category build")
    print("  python run_tests.py --category web,cli")
    print("  python run_tests.py  # Run all")
    print("=" * 60)


def run_tests(categories=None, verbose=False, quick=False):
    """Run tests with specified options."""

    cmd = [sys.executable, "-m", "pytest"]

    paths = [TEST_CATEGORIES[c] for c in categories or [] if c in TEST_CATEGORIES]
    cmd.extend(paths or ["tests/"])

    if verbose:
        cmd.append("-v")
    else:
        cmd.append("--tb=short")

    if quick:
        cmd.extend(["-x", "--ff"])  # Stop on first failure, failed first

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print("\n" + "=" * 60)
    print("PORTFOLIO TEST RUNNER")
    print("=" * 60)
    print(f"Started:    {timestamp}")
    print(f"Categories: {', '.join(categories) if categories else 'ALL'}")
    print(f"Options:    {'verbose' if verbose else 'standard'}{', quick' if quick else ''}")
    print("=" * 60 + "\n")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)

    return result.returncode


def main():
    parser = argparse.ArgumentParser(
        description="Run the portfolio tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                        # Run all tests
  python run_tests.py --category build       # Run build tests only
  python run_tests.py --category web,cli     # Run multiple categories
  python run_tests.py --quick                # Stop on first failure
  python run_tests.py --list                 # Show available categories
        """
    )

    parser.add_argument(
        "--category", "-c",
        type=str,
        help="Test category to run (comma-separated for multiple)",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show verbose output",
    )

    parser.add_argument(
        "--quick", "-q",
        action="store_true",
        help="Quick mode - stop on first failure",
    )

    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available test categories",
    )

    args = parser.parse_args()

    if args.list:
        list_categories()
        return 0

    categories = None
    if args.category:
        categories = [c.strip() for c in args.category.split(",")]

    return run_tests(
        categories=categories,
        verbose=args.verbose,
        quick=args.quick,
    )


if __name__ == "__main__":
    sys.exit(main())
