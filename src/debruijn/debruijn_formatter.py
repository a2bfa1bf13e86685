"""Text sink used by the printer and message facility.

The formatter tracks layout groups so callers can structure their output and
bound how deeply it nests.  It does not perform line wrapping: every break hint
is rendered as a single space.
"""

from contextlib import contextmanager
from typing import Iterator, List

from debruijn.debruijn_error import DeBruijnFormatterError


DEFAULT_MAX_GROUPS = 200


class DeBruijnFormatter:
    """Accumulates formatted text and tracks open layout groups."""

    def __init__(self, max_groups: int = DEFAULT_MAX_GROUPS):
        """
        Initialize the formatter.

        Args:
            max_groups: Maximum number of simultaneously open groups before
                callers are asked to stop descending
        """
        self._max_groups = max_groups
        self._parts: List[str] = []
        self._groups: List[str] = []

    def text(self, text: str) -> None:
        """Emit literal text."""
        self._parts.append(text)

    def break_hint(self) -> None:
        """Emit a point where a line could be broken."""
        self._parts.append(' ')

    def newline(self) -> None:
        """Emit a forced line break."""
        self._parts.append('\n')

    def open_group(self, name: str = "") -> None:
        """
        Open a layout group.

        Args:
            name: Optional label for the group, used in error reports
        """
        self._groups.append(name)

    def close_group(self) -> None:
        """
        Close the innermost layout group.

        Raises:
            DeBruijnFormatterError: If no group is open
        """
        if not self._groups:
            raise DeBruijnFormatterError("Attempt to close a group when none is open")

        self._groups.pop()

    @contextmanager
    def group(self, name: str = "") -> Iterator['DeBruijnFormatter']:
        """Context manager that keeps a group open for the duration of the block."""
        self.open_group(name)
        try:
            yield self

        finally:
            self.close_group()

    def depth(self) -> int:
        """Return the number of currently open groups."""
        return len(self._groups)

    def over_max_groups(self) -> bool:
        """Return True if no further groups should be opened."""
        return len(self._groups) >= self._max_groups

    def getvalue(self) -> str:
        """Return everything emitted so far."""
        return ''.join(self._parts)
