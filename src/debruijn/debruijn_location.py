"""Source locations and their textual rendering."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeBruijnSourcePosition:
    """A single point in a source file."""

    filename: str  # Empty if the source did not come from a file
    line: int  # Line number (1-indexed)
    line_start: int  # Absolute character offset of the start of the line
    offset: int  # Absolute character offset of this position


@dataclass(frozen=True)
class DeBruijnLocation:
    """A range of source text between two positions."""

    begin: DeBruijnSourcePosition
    end: DeBruijnSourcePosition


_ESCAPES = {
    ord('"'): '\\"',
    ord('\\'): '\\\\',
    ord('\n'): '\\n',
    ord('\t'): '\\t',
    ord('\r'): '\\r',
    ord('\b'): '\\b',
}


def _quote(text: str) -> str:
    """
    Render text as a double-quoted string literal.

    The text is escaped one UTF-8 byte at a time: quotes, backslashes and the
    usual control characters get backslash escapes, and every other byte outside
    printable ASCII is written as a three-digit decimal escape (so "é" becomes
    "\\195\\169").
    """
    result = ['"']
    for byte in text.encode('utf-8'):
        if byte in _ESCAPES:
            result.append(_ESCAPES[byte])

        elif 32 <= byte <= 126:
            result.append(chr(byte))

        else:
            result.append(f'\\{byte:03d}')

    result.append('"')
    return ''.join(result)


def format_position(location: DeBruijnLocation | None) -> str:
    """
    Render a source location for diagnostics.

    Both columns are measured from the start of the line the range begins on,
    so the end column of a multi-line range can exceed that line's length.

    Args:
        location: The location to render, or None for an unknown position

    Returns:
        Human-readable description of the location
    """
    if location is None:
        return "unknown position"

    begin = location.begin
    begin_char = begin.offset - begin.line_start
    end_char = location.end.offset - begin.line_start

    if begin.filename:
        return f"file {_quote(begin.filename)}, line {begin.line}, characters {begin_char}-{end_char}"

    # Line numbers for unnamed sources are reported one lower.
    return f"line {begin.line - 1}, characters {begin_char}-{end_char}"
