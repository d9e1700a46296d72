#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for raw HTML handling.

Tests cover:
- Comment stripping
- Tag filtering
- Safe mode placeholder
- Property-based checks

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2jira.constants import RAW_HTML_PLACEHOLDER
from md2jira.utils.html_sanitizer import filter_html_tags, sanitize_raw_html, strip_html_comments


@pytest.mark.unit
class TestStripHtmlComments:
    """Tests for strip_html_comments."""

    def test_single_comment(self) -> None:
        """Test a single comment is removed."""
        assert strip_html_comments("<b>x</b><!-- note -->y") == "<b>x</b>y"

    def test_multiline_comment(self) -> None:
        """Test comments may span lines."""
        assert strip_html_comments("a<!--\nline1\nline2\n-->b") == "ab"

    def test_comments_matched_non_greedily(self) -> None:
        """Test text between two comments is kept."""
        assert strip_html_comments("<!--a-->keep<!--b-->") == "keep"

    def test_unterminated_comment_kept(self) -> None:
        """Test an unterminated comment is left alone."""
        assert strip_html_comments("a <!-- open") == "a <!-- open"

    def test_comment_revealed_by_removal(self) -> None:
        """Test a comment formed by removing another is also removed."""
        assert strip_html_comments("<!<!--x-->--y-->z") == "z"

    def test_no_comments(self) -> None:
        """Test content without comments is unchanged."""
        assert strip_html_comments("<p>plain</p>") == "<p>plain</p>"

    @given(st.text(alphabet="<!->ab \n", max_size=40))
    def test_idempotent(self, content: str) -> None:
        """Test stripping twice equals stripping once."""
        once = strip_html_comments(content)

        assert strip_html_comments(once) == once

    @given(st.text(alphabet="<!->ab \n", max_size=40))
    def test_never_grows(self, content: str) -> None:
        """Test stripping never adds characters."""
        assert len(strip_html_comments(content)) <= len(content)


@pytest.mark.unit
class TestSanitizeRawHtml:
    """Tests for sanitize_raw_html and filter_html_tags."""

    def test_filter_passes_tags_through(self) -> None:
        """Test tag filtering keeps every tag."""
        assert filter_html_tags("<script>x</script><iframe></iframe>") == "<script>x</script><iframe></iframe>"

    def test_unsafe_mode_keeps_html(self) -> None:
        """Test HTML is emitted outside safe mode."""
        assert sanitize_raw_html("<div>x</div>") == "<div>x</div>"

    def test_unsafe_mode_strips_comments(self) -> None:
        """Test comments are stripped outside safe mode."""
        assert sanitize_raw_html("<div>x</div><!-- c -->") == "<div>x</div>"

    @pytest.mark.parametrize("content", ["<div>x</div>", "<!-- c -->", "", "<b>"])
    def test_safe_mode_placeholder(self, content: str) -> None:
        """Test safe mode replaces any fragment with the placeholder."""
        assert sanitize_raw_html(content, safe=True) == RAW_HTML_PLACEHOLDER
