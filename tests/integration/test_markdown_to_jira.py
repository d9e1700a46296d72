#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the Markdown to Jira pipeline.

Tests cover:
- Complete documents through to_jira
- Parser and renderer working together on every construct
- The command-line tool on real files
- Property-based checks on arbitrary Markdown

"""

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2jira import ParsingError, to_ast, to_jira
from md2jira.cli import main
from md2jira.renderers.jira import JiraRenderer

SAMPLE_JIRA = (
    "h1. Release Notes\n"
    "This release adds *bold* features, _subtle_ fixes and {{inline code}}.\n"
    "\n"
    "h2. Steps\n"
    "* Build the package\n"
    "* Run the tests\n"
    "** unit\n"
    "** integration\n"
    "\n"
    "{code:python}\n"
    'print("ship it")\n'
    "{code}\n"
    "{quote}\n"
    "Remember to tag the release.\n"
    "\n"
    "{quote}\n"
    "||Component||Status||\n"
    "|parser|done|\n"
    "|renderer|-todo- done|\n"
    "\n"
    "----\n"
    "See [the docs|https://example.com/docs] for details."
)


@pytest.mark.integration
class TestMarkdownToJira:
    """End-to-end conversions through the public API."""

    def test_sample_document(self, sample_markdown: str) -> None:
        """Test the sample document converts to the expected markup."""
        assert to_jira(sample_markdown) == SAMPLE_JIRA

    def test_sample_document_from_file(self, sample_markdown_file: Path) -> None:
        """Test file input gives the same result as text input."""
        assert to_jira(sample_markdown_file) == SAMPLE_JIRA

    def test_deeply_nested_ordered_list(self) -> None:
        """Test nested numbered lists become nested bullets."""
        markdown = "1. one\n   1. two\n      1. three\n2. four\n"

        assert to_jira(markdown) == "* one\n** two\n*** three\n* four"

    def test_loose_list(self) -> None:
        """Test blank lines between items do not change the output."""
        assert to_jira("- a\n\n- b\n") == "* a\n* b"

    def test_list_then_paragraph(self) -> None:
        """Test the blank line after a top-level list."""
        assert to_jira("- a\n- b\n\nafter\n") == "* a\n* b\n\nafter"

    def test_unsupported_code_language(self) -> None:
        """Test unknown fence languages fall back to none."""
        assert to_jira("```rust\nfn main() {}\n```\n") == "{code:none}\nfn main() {}\n{code}"

    def test_hard_break(self) -> None:
        """Test a backslash hard break."""
        assert to_jira("line one\\\nline two") == "line one\\\nline two"

    def test_links_and_images(self) -> None:
        """Test links, autolinks and images."""
        result = to_jira("[site](https://a.example) <https://b.example> ![logo](logo.png)")

        assert result == "[site|https://a.example] [https://b.example|https://b.example] !logo.png!"

    def test_html_comment_removed(self) -> None:
        """Test HTML comments in raw HTML blocks disappear."""
        result = to_jira("before\n\n<!-- internal note -->\n\nafter")

        assert "internal note" not in result
        assert result.startswith("before\n\n")
        assert result.endswith("\nafter")

    def test_character_references(self) -> None:
        """Test entity and numeric references reach Jira as plain characters."""
        assert to_jira("AT&amp;T &copy; &#35;1") == "AT&T \u00a9 #1"

    def test_footnotes(self) -> None:
        """Test footnotes vanish from the output when parsed."""
        markdown = "Fact[^a] and more[^b].\n\n[^a]: First.\n[^b]: Second.\n"

        assert to_jira(markdown, parse_footnotes=True) == "Fact and more."

    def test_renderer_reuse_across_documents(self, sample_markdown: str) -> None:
        """Test one renderer converts several documents consistently."""
        renderer = JiraRenderer()
        sample = to_ast(sample_markdown)

        first = renderer.render_to_string(sample)
        renderer.render_to_string(to_ast("- x\n  - y\n"))
        again = renderer.render_to_string(sample)

        assert first == again == SAMPLE_JIRA

    @given(st.text(alphabet="ab #*_-`>|[]()!~\n1.", max_size=200))
    def test_arbitrary_markdown(self, markdown: str) -> None:
        """Test conversion never leaves a trailing newline and is deterministic."""
        try:
            result = to_jira(markdown)
        except ParsingError:
            return

        assert not result.endswith("\n")
        assert to_jira(markdown) == result


@pytest.mark.integration
@pytest.mark.cli
class TestCommandLine:
    """End-to-end runs of the command-line tool."""

    def test_convert_sample_file(self, sample_markdown_file: Path, tmp_path: Path) -> None:
        """Test converting the sample file to an output file."""
        target = tmp_path / "release.jira"

        assert main([str(sample_markdown_file), "-o", str(target)]) == 0

        assert target.read_text(encoding="utf-8") == SAMPLE_JIRA + "\n"

    def test_pyproject_configuration(self, tmp_path: Path, monkeypatch, capsys) -> None:
        """Test [tool.md2jira] in pyproject.toml is picked up."""
        project = tmp_path / "project"
        (project / "docs").mkdir(parents=True)
        (project / "pyproject.toml").write_text("[tool.md2jira]\nparse_tables = false\n", encoding="utf-8")
        source = project / "docs" / "table.md"
        source.write_text("| a |\n|---|\n| 1 |\n", encoding="utf-8")
        monkeypatch.chdir(project / "docs")

        assert main([str(source)]) == 0

        assert "||" not in capsys.readouterr().out

    def test_command_line_beats_environment(self, tmp_path: Path, monkeypatch, capsys) -> None:
        """Test --log-level overrides MD2JIRA_LOG_LEVEL."""
        monkeypatch.setenv("MD2JIRA_LOG_LEVEL", "DEBUG")
        source = tmp_path / "doc.md"
        source.write_text("text\n", encoding="utf-8")

        assert main([str(source), "--log-level", "ERROR"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "text\n"
        assert "DEBUG" not in captured.err
