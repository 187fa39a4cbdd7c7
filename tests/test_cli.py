"""Tests for the articlectl command line."""

from __future__ import annotations

import datetime
import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from articlectl import __version__
from articlectl.cli import cli

# title, author, tags, excerpt, links: accept every default after the title.
BLOG_ANSWERS = "My Post\n\n\n\n\n"


def _article(root: Path, name: str = "post.md") -> str:
    return (root / "articles" / name).read_text(encoding="utf-8")


class TestCliBasics:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for option in ("--type", "--name", "--headless", "--examples"):
            assert option in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "articlectl --type blog" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestInteractive:
    def test_flags_skip_type_and_name_prompts(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["--type", "blog", "--name", "post"], input=BLOG_ANSWERS)

        assert result.exit_code == 0, result.output
        assert "Select template type" not in result.output
        assert "Article created:" in result.output
        content = _article(project_root)
        today = datetime.date.today().strftime("%Y-%m-%d")
        assert content.startswith('---\ntitle: "My Post"\n')
        assert f'date: "{today}"' in content
        assert 'author: "Brandon Shoop"' in content
        assert 'excerpt: "Test excerpt"' in content
        assert content.endswith("---\n\n# Test Article\n\nBody content here.\n")

    def test_prompts_in_template_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-T", "blog", "-N", "post"], input=BLOG_ANSWERS)
        output = result.output
        positions = [
            output.index("title (required)"),
            output.index("author (required) [default: Brandon Shoop]"),
            output.index("tags (required) [default: python, cli] - comma-separated values"),
            output.index("excerpt (optional, press Enter to skip)"),
            output.index("links (optional, press Enter to skip) [default: Home:https://example.com]"),
        ]
        assert positions == sorted(positions)
        assert "date (" not in output

    def test_type_menu_and_filename_prompt(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        result = cli_runner.invoke(cli, [], input="7\nx\n1\npost\n" + BLOG_ANSWERS)

        assert result.exit_code == 0, result.output
        assert "Select template type:" in result.output
        assert "1. Blog" in result.output
        assert "2. Project" in result.output
        assert result.output.count("Invalid choice. Please enter a number from 1 to 2.") == 2
        assert "Enter filename (without .md extension)" in result.output
        assert (project_root / "articles" / "post.md").is_file()

    def test_empty_filename(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--type", "blog"], input="\n")
        assert result.exit_code == 1
        assert "Filename cannot be empty." in result.output
        assert not (project_root / "articles").exists()

    def test_required_field_reprompts(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "BLOG.md").write_text(
            "---\n# [BLOG] Required fields:\ntitle:\n---\nBody\n", encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["-T", "blog", "-N", "post"], input="\nReal Title\n")
        assert result.exit_code == 0, result.output
        assert "This field is required. Please provide a value." in result.output
        assert 'title: "Real Title"' in _article(project_root)

    def test_links_answer_keeps_ports(self, cli_runner: CliRunner, project_root: Path) -> None:
        answers = "My Post\n\n\n\nSite:https://a.com:8080,Docs:https://b.com\n"
        result = cli_runner.invoke(cli, ["-T", "blog", "-N", "post"], input=answers)
        assert result.exit_code == 0, result.output
        content = _article(project_root)
        assert "text: Site" in content
        assert "https://a.com:8080" in content
        assert "text: Docs" in content

    def test_case_insensitive_type(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--type", "BLOG", "--name", "post"], input=BLOG_ANSWERS)
        assert result.exit_code == 0, result.output
        assert (project_root / "articles" / "post.md").is_file()

    def test_end_of_input_exits_cleanly(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--type", "blog", "--name", "post"], input="")
        assert result.exit_code == 0
        assert not (project_root / "articles").exists()

    def test_collision_warning(self, cli_runner: CliRunner, project_root: Path) -> None:
        articles = project_root / "articles"
        articles.mkdir()
        (articles / "post.md").write_text("existing", encoding="utf-8")

        result = cli_runner.invoke(cli, ["-T", "blog", "-N", "post"], input=BLOG_ANSWERS)

        assert result.exit_code == 0, result.output
        assert re.search(r"WARNING: File already exists\. Using filename: post-\d+\.md", result.output)
        assert result.output.lower().count("already exists") == 1
        assert (articles / "post.md").read_text(encoding="utf-8") == "existing"


@pytest.mark.usefixtures("_isolated_project")
class TestErrors:
    def test_missing_template(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "BLOG.md").unlink()
        result = cli_runner.invoke(cli, ["--type", "blog", "--name", "post"])
        assert result.exit_code == 1
        assert "Template file not found" in result.output
        assert not (project_root / "articles").exists()

    def test_type_without_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--type"])
        assert result.exit_code == 2
        assert "--type" in result.output

    def test_invalid_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--type", "novel", "--name", "x"])
        assert result.exit_code == 2
        assert "novel" in result.output

    def test_unknown_options_are_ignored(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--draft", "-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 0, result.output
        assert (project_root / "articles" / "post.md").is_file()


@pytest.mark.usefixtures("_isolated_project")
class TestHeadless:
    def test_uses_template_defaults(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--headless", "--type", "project", "--name", "tool"])

        assert result.exit_code == 0, result.output
        content = _article(project_root, "tool.md")
        assert "<TITLE>" in content
        assert "<TECH>" in content
        assert "<URL>" in content
        assert "<DATE>" not in content
        assert content.endswith("---\n# Project\n\nOverview.\n")

    def test_requires_type_and_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--headless", "--type", "blog"])
        assert result.exit_code == 2
        assert "--type and --name are required in headless mode." in result.output

    def test_missing_required_default(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "BLOG.md").write_text(
            "---\n# [BLOG] Required fields:\ntitle:\n---\nBody\n", encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 1
        assert "title" in result.output
        assert not (project_root / "articles").exists()

    def test_json_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "create_article"
        assert data["data"]["path"] == str(project_root / "articles" / "post.md")
        assert data["data"]["type"] == "blog"

    def test_config_author(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "articlectl.toml").write_text(
            '[author]\ndefault = "Jane Writer"\n', encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 0, result.output
        assert 'author: "Jane Writer"' in _article(project_root)

    def test_empty_name_is_rejected(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", ""])
        assert result.exit_code == 2
        assert "--type and --name are required in headless mode." in result.output
        assert "Enter filename" not in result.output
        assert not (project_root / "articles").exists()

    def test_output_path_is_a_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "articles").write_text("not a directory", encoding="utf-8")
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "Error: Could not write article" in result.output

    def test_template_with_invalid_utf8(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "BLOG.md").write_bytes(
            b"---\n# [BLOG] Required fields:\ntitle: Caf\xe9\n---\nBody \xff\n"
        )
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 0, result.output
        assert _article(project_root).endswith("---\nBody \ufffd\n")

    def test_defaults_warning_is_reported_once(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        (project_root / "BLOG.md").write_text(
            "---\n# [BLOG] Optional fields:\nx: [oops\n---\nBody\n", encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["-H", "-T", "blog", "-N", "post"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Could not parse defaults") == 1
