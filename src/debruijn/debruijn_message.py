"""Leveled diagnostic messages (errors, warnings and debugging output)."""

import logging
import sys
from dataclasses import dataclass
from typing import Any, TextIO

from debruijn.debruijn_error import DeBruijnError
from debruijn.debruijn_formatter import DeBruijnFormatter
from debruijn.debruijn_location import DeBruijnLocation, format_position


ERROR_SEVERITY = 1
WARNING_SEVERITY = 2
DEBUG_SEVERITY = 3


@dataclass
class DeBruijnMessageConfig:
    """Configuration for the message facility."""
    verbosity: int = WARNING_SEVERITY  # Messages with a higher severity are discarded


class DeBruijnMessenger:
    """Writes tagged diagnostics to an error stream, filtered by verbosity."""

    def __init__(self, config: DeBruijnMessageConfig | None = None, stream: TextIO | None = None):
        """
        Initialize the messenger.

        Args:
            config: Message configuration (defaults used if None).  Changes made to
                it after construction take effect on the next message.
            stream: Stream to write to (sys.stderr at the time of each message if None)
        """
        self.config = config or DeBruijnMessageConfig()
        self._stream = stream
        self._logger = logging.getLogger("DeBruijnMessenger")

    def message(
        self,
        msg_type: str,
        severity: int,
        fmt: str,
        *args: Any,
        location: DeBruijnLocation | None = None
    ) -> None:
        """
        Write a diagnostic if its severity is within the configured verbosity.

        The message body is formatted before the verbosity check, so a mismatch
        between fmt and args is reported whether or not the message is shown.

        Args:
            msg_type: Tag shown at the start of the message, e.g. "Warning"
            severity: Severity of the message (1 is most severe)
            fmt: %-style format string for the message body
            *args: Values for fmt
            location: Source location the message relates to, or None if unknown
        """
        body = fmt % args if args else fmt

        if severity > self.config.verbosity:
            self._logger.debug("Discarding %s (severity %d > verbosity %d)", msg_type, severity, self.config.verbosity)
            return

        formatter = DeBruijnFormatter()
        formatter.text(f"{msg_type} at {format_position(location)}:")
        formatter.newline()
        with formatter.group(msg_type):
            formatter.text(body)

        formatter.newline()

        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(formatter.getvalue())
        stream.flush()

    def error(self, location: DeBruijnLocation | None, kind: str, text: str) -> None:
        """Report an error of the given kind."""
        self.message(kind, ERROR_SEVERITY, "%s", text, location=location)

    def warning(self, fmt: str, *args: Any) -> None:
        """Report a warning."""
        self.message("Warning", WARNING_SEVERITY, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        """Report debugging information."""
        self.message("Debug", DEBUG_SEVERITY, fmt, *args)

    def report(self, error: DeBruijnError) -> None:
        """
        Report an exception as an error message.

        Args:
            error: The exception to report; its kind is used as the tag
        """
        self.error(error.location, error.kind, str(error))
