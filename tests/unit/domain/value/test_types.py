"""Unit tests for domain value types."""

import pytest

from recipebox.domain.error import ValidationError
from recipebox.domain.value import (
    AuthorDisplay,
    AuthoritativeCount,
    CachedCount,
    CommentContent,
    CounterKind,
)


class TestCommentContent:
    """Tests for CommentContent validation."""

    def test_empty_is_rejected(self):
        with pytest.raises(ValidationError, match="Comment cannot be empty"):
            CommentContent.parse("")

    def test_none_is_rejected(self):
        with pytest.raises(ValidationError, match="Comment cannot be empty"):
            CommentContent.parse(None)

    def test_whitespace_only_is_rejected(self):
        with pytest.raises(ValidationError, match="Comment cannot be empty"):
            CommentContent.parse("   \n\t ")

    def test_single_character_is_accepted(self):
        assert CommentContent.parse("x").root == "x"

    def test_max_length_is_accepted(self):
        content = CommentContent.parse("a" * 2000)
        assert len(content.root) == 2000

    def test_over_max_length_is_rejected(self):
        with pytest.raises(
            ValidationError, match="Comment must be 2000 characters or less"
        ):
            CommentContent.parse("a" * 2001)

    def test_content_is_trimmed(self):
        assert CommentContent.parse("  hello  ").root == "hello"

    def test_length_is_checked_after_trimming(self):
        """Surrounding whitespace does not count toward the limit."""
        content = CommentContent.parse("  " + "a" * 2000 + "  ")
        assert len(content.root) == 2000


class TestCounts:
    """Tests for the count value types."""

    def test_authoritative_flag(self):
        assert AuthoritativeCount(3).authoritative is True
        assert CachedCount(3).authoritative is False

    def test_authoritative_count_rejects_negative(self):
        with pytest.raises(ValueError):
            AuthoritativeCount(-1)

    def test_counts_are_distinct_types(self):
        """An authoritative count never compares equal to a cached one."""
        assert AuthoritativeCount(2) != CachedCount(2)

    def test_counter_sources(self):
        assert CounterKind.LIKE_COUNT.source == "likes"
        assert CounterKind.COMMENT_COUNT.source == "comments"


class TestAuthorDisplay:
    """Tests for AuthorDisplay defaults."""

    def test_unknown_author_fallback(self):
        display = AuthorDisplay()
        assert display.username == "Unknown"
        assert display.full_name == "Unknown User"
