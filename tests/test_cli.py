"""
Tests for CLI behavior.

Tests argument parsing, help text, exit codes, and the query modes.
"""

import pytest
from unittest.mock import patch

from main import create_parser, main
from portfolio.services import LinkCheckResult
from tests.test_config import MALFORMED


class TestArgumentParsing:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.dry_run is False
        assert args.include_drafts is False
        assert args.content_dir is None
        assert args.output_dir is None

    def test_short_flags(self):
        args = create_parser().parse_args(["-n", "-d", "-v", "-o", "out"])

        assert args.dry_run and args.include_drafts and args.verbose
        assert args.output_dir == "out"

    def test_unknown_flag_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--bogus"])

        assert exc_info.value.code == 2

    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--help"])

        assert exc_info.value.code == 0

    def test_tag_without_list_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--tag", "rust", "-n"])

        assert exc_info.value.code == 2
        assert "--tag requires --list" in capsys.readouterr().err

    def test_help_mentions_dry_run_and_drafts(self):
        help_text = create_parser().format_help()

        assert "--dry-run" in help_text
        assert "--include-drafts" in help_text


class TestBuildCommand:
    """Tests for the default build mode."""

    def test_build_exits_zero(self, blog_dir, output_dir):
        with patch("builtins.print"):
            exit_code = main(["--content-dir", str(blog_dir), "--output-dir", str(output_dir)])

        assert exit_code == 0
        assert (output_dir / "posts.json").exists()

    def test_dry_run_writes_nothing(self, blog_dir, output_dir):
        with patch("builtins.print"):
            exit_code = main(["-n", "-c", str(blog_dir), "-o", str(output_dir)])

        assert exit_code == 0
        assert not output_dir.exists()

    def test_malformed_document_exits_one(self, blog_dir, output_dir, capsys):
        (blog_dir / "broken.md").write_text(MALFORMED["bad_date"], encoding="utf-8")

        exit_code = main(["-q", "-c", str(blog_dir), "-o", str(output_dir)])

        assert exit_code == 1
        assert "broken.md" in capsys.readouterr().out

    def test_missing_directory_exits_one(self, tmp_path):
        with patch("builtins.print"):
            assert main(["-c", str(tmp_path / "missing"), "-n"]) == 1

    def test_quiet_success_prints_nothing(self, blog_dir, output_dir, capsys):
        main(["-q", "-c", str(blog_dir), "-o", str(output_dir)])

        assert capsys.readouterr().out == ""


class TestQueryModes:
    """Tests for --list and --tags."""

    def test_list_public(self, blog_dir, capsys):
        assert main(["--list", "-c", str(blog_dir)]) == 0
        out = capsys.readouterr().out

        assert "Getting started with Cargo workspaces" in out
        assert "thiserror" not in out

    def test_list_with_drafts(self, blog_dir, capsys):
        main(["--list", "--include-drafts", "-c", str(blog_dir)])

        assert "[draft]" in capsys.readouterr().out

    def test_list_by_tag(self, blog_dir, capsys):
        main(["--list", "--tag", "async", "-c", str(blog_dir)])
        lines = capsys.readouterr().out.strip().splitlines()

        assert len(lines) == 1
        assert "Async Rust in 2024" in lines[0]

    def test_tags(self, blog_dir, capsys):
        main(["--tags", "-c", str(blog_dir)])
        out = capsys.readouterr().out

        assert "rust" in out
        assert "errors" not in out

    def test_list_malformed_exits_one(self, blog_dir, capsys):
        (blog_dir / "broken.md").write_text(MALFORMED["missing_date"], encoding="utf-8")

        assert main(["--list", "-c", str(blog_dir)]) == 1
        assert "Content error" in capsys.readouterr().out


class TestOtherModes:
    """Tests for --show-config and --check-links."""

    def test_show_config_exits_zero(self):
        with patch("builtins.print"):
            assert main(["--show-config"]) == 0

    def test_check_links_all_ok(self):
        results = [LinkCheckResult(title="A", url="https://a.dev", ok=True, status_code=200)]
        with patch("main.LinkChecker") as checker_cls, patch("builtins.print"):
            checker_cls.return_value.check_projects.return_value = results
            assert main(["--check-links"]) == 0

    def test_check_links_failure_exits_one(self):
        results = [
            LinkCheckResult(title="A", url="https://a.dev", ok=True, status_code=200),
            LinkCheckResult(title="B", url="https://b.dev", ok=False, status_code=404),
        ]
        with patch("main.LinkChecker") as checker_cls, patch("builtins.print"):
            checker_cls.return_value.check_projects.return_value = results
            assert main(["--check-links"]) == 1
