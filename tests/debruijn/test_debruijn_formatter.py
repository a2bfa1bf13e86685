"""Tests for the output formatter."""

import pytest

from debruijn.debruijn_error import DeBruijnError, DeBruijnFormatterError
from debruijn.debruijn_formatter import DEFAULT_MAX_GROUPS, DeBruijnFormatter


class TestFormatterOutput:
    """Test text emission."""

    def test_empty(self, formatter):
        """Test that a new formatter has no output."""
        assert formatter.getvalue() == ""

    def test_text_and_breaks(self, formatter):
        """Test that break hints render as single spaces."""
        formatter.text("a")
        formatter.break_hint()
        formatter.text("b")
        formatter.newline()
        formatter.text("c")
        assert formatter.getvalue() == "a b\nc"


class TestFormatterGroups:
    """Test layout groups."""

    def test_open_and_close(self, formatter):
        """Test group depth tracking."""
        formatter.open_group("outer")
        formatter.open_group()
        assert formatter.depth() == 2
        formatter.close_group()
        formatter.close_group()
        assert formatter.depth() == 0

    def test_close_without_open(self, formatter):
        """Test that an unbalanced close is an error."""
        with pytest.raises(DeBruijnFormatterError) as exc_info:
            formatter.close_group()

        assert isinstance(exc_info.value, DeBruijnError)

    def test_group_context_manager(self, formatter):
        """Test that the context manager opens and closes a group."""
        with formatter.group("g") as f:
            assert f is formatter
            assert formatter.depth() == 1

        assert formatter.depth() == 0

    def test_group_closed_on_exception(self, formatter):
        """Test that the group is closed even if the block raises."""
        with pytest.raises(RuntimeError):
            with formatter.group():
                formatter.text("x")
                raise RuntimeError("boom")

        assert formatter.depth() == 0
        assert formatter.getvalue() == "x"

    def test_over_max_groups(self):
        """Test the group limit query."""
        formatter = DeBruijnFormatter(max_groups=2)
        assert not formatter.over_max_groups()
        formatter.open_group()
        assert not formatter.over_max_groups()
        formatter.open_group()
        assert formatter.over_max_groups()
        formatter.close_group()
        assert not formatter.over_max_groups()

    def test_default_limit(self, formatter):
        """Test the default group limit."""
        for _ in range(DEFAULT_MAX_GROUPS - 1):
            formatter.open_group()

        assert not formatter.over_max_groups()
        formatter.open_group()
        assert formatter.over_max_groups()
