"""Line parser for ``.env`` files.

Each line of the file is classified on its own; nothing carries over
from one line to the next.  The rules, in order:

1. Trim spaces, tabs, CR and LF from both ends.
2. Blank lines and lines starting with ``#`` are skipped.
3. Split on the **first** ``=``; a line without one is skipped.
4. Trim the key and the value independently.
5. A value wrapped in one pair of double quotes loses that pair.
   Nothing inside the quotes is unescaped.
6. An empty key or empty value makes the line malformed.

Only ``ASSIGNMENT`` lines carry a key and value.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

WHITESPACE = " \t\r\n"
COMMENT_PREFIX = "#"
SEPARATOR = "="
QUOTE = '"'


class LineKind(StrEnum):
    """How a single line was classified."""

    BLANK = "blank"
    COMMENT = "comment"
    NO_SEPARATOR = "no_separator"
    MALFORMED = "malformed"
    ASSIGNMENT = "assignment"


@dataclass(frozen=True)
class ParsedLine:
    """The outcome of parsing one line.

    Attributes:
        kind: The classification of the line.
        text: The line after outer trimming.
        key: The variable name (empty unless ``ASSIGNMENT``).
        value: The variable value (empty unless ``ASSIGNMENT``).
        lineno: 1-based line number, 0 when parsed outside a file.

    """

    kind: LineKind
    text: str
    key: str = ""
    value: str = ""
    lineno: int = 0


def strip_quotes(value: str) -> str:
    """Remove one surrounding pair of double quotes, if present.

    A value that is a lone ``"`` counts as both ends and becomes empty.
    """
    if value and value[0] == QUOTE and value[-1] == QUOTE:
        return value[1:-1]
    return value


def parse_line(raw: str, lineno: int = 0) -> ParsedLine:
    """Classify one raw line and extract its key and value.

    Args:
        raw: The line as read from the file (newline included or not).
        lineno: Line number to record on the result.

    Returns:
        A ParsedLine; only ``ASSIGNMENT`` results have a key and value.

    """
    text = raw.strip(WHITESPACE)
    if not text:
        return ParsedLine(LineKind.BLANK, text, lineno=lineno)
    if text.startswith(COMMENT_PREFIX):
        return ParsedLine(LineKind.COMMENT, text, lineno=lineno)

    key, sep, value = text.partition(SEPARATOR)
    if not sep:
        return ParsedLine(LineKind.NO_SEPARATOR, text, lineno=lineno)

    key = key.strip(WHITESPACE)
    value = strip_quotes(value.strip(WHITESPACE))
    if not key or not value:
        return ParsedLine(LineKind.MALFORMED, text, key=key, value=value, lineno=lineno)
    return ParsedLine(LineKind.ASSIGNMENT, text, key=key, value=value, lineno=lineno)


def parse_lines(lines: Iterable[str]) -> Iterator[ParsedLine]:
    """Parse every line of *lines*, numbering them from 1."""
    for lineno, raw in enumerate(lines, start=1):
        yield parse_line(raw, lineno)
