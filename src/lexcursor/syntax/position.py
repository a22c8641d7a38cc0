"""Position utilities for scanned source text.

Converts absolute character offsets to line/column positions for error
reporting and source maps.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass

from lexcursor.constants import DEFAULT_CONTEXT_LINES, NEWLINE

__all__ = [
    "LineOffsetCache",
    "SourcePosition",
    "compute_position",
    "get_error_context",
    "line_at",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Where an offset falls in the source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted from the character after
            the most recent newline)
        absolute: The offset this position was computed for (0-indexed)

    Example:
        >>> position = SourcePosition(line=2, column=5, absolute=14)
        >>> str(position)
        '2:5'
    """

    line: int
    column: int
    absolute: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def compute_position(source: str, offset: int) -> SourcePosition:
    """Compute the position of an offset by scanning from the start.

    Args:
        source: Complete source text
        offset: Character offset in source (may be out of range)

    Returns:
        SourcePosition with 1-based line and column

    Performance:
        O(n) where n = offset. Use LineOffsetCache when translating many
        offsets in the same source.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> compute_position(source, 0)
        SourcePosition(line=1, column=1, absolute=0)
        >>> compute_position(source, 8)  # Middle of line2
        SourcePosition(line=2, column=3, absolute=8)

    Note:
        The scan window is clamped to the source, so offsets past the end
        keep counting columns on the last line and negative offsets stay on
        line 1. str.count()/rfind() would otherwise wrap negative bounds.
    """
    end = min(max(offset, 0), len(source))

    # O(1) memory: count in range instead of creating substring
    line = source.count(NEWLINE, 0, end) + 1
    last_newline = source.rfind(NEWLINE, 0, end)

    return SourcePosition(line=line, column=offset - last_newline, absolute=offset)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Produces exactly the same
    positions as compute_position() for every offset.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.position_of(6)   # Start of line 2
        SourcePosition(line=2, column=1, absolute=6)
        >>> cache.line_count
        3

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets",)

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Source text to index

        Complexity:
            O(n) where n = len(source)
        """
        # Line 1 starts at offset 0; each newline starts the next line
        offsets = [0]
        start = source.find(NEWLINE)
        while start != -1:
            offsets.append(start + 1)
            start = source.find(NEWLINE, start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)

        logger.debug("Indexed %d line(s) over %d character(s)", len(offsets), len(source))

    @property
    def line_count(self) -> int:
        """Number of lines in the indexed source (at least 1)."""
        return len(self._offsets)

    def position_of(self, offset: int) -> SourcePosition:
        """Get the position of an offset using binary search.

        Args:
            offset: Character offset in source (may be out of range)

        Returns:
            SourcePosition with 1-based line and column

        Complexity:
            O(log n) where n = number of lines
        """
        # Index of the largest line start <= offset; negatives map to line 1
        index = max(bisect_right(self._offsets, offset) - 1, 0)
        column = offset - self._offsets[index] + 1
        return SourcePosition(line=index + 1, column=column, absolute=offset)


def line_at(source: str, offset: int) -> str:
    """Extract the full line containing an offset.

    Args:
        source: Complete source text
        offset: Character offset in source, clamped to [0, len(source)]

    Returns:
        Line content without its delimiting newlines

    Example:
        >>> source = "first line\\nsecond line"
        >>> line_at(source, 0)
        'first line'
        >>> line_at(source, 10)  # The newline itself belongs to line 1
        'first line'
        >>> line_at(source, 11)
        'second line'
    """
    offset = min(max(offset, 0), len(source))

    start = source.rfind(NEWLINE, 0, offset) + 1
    end = source.find(NEWLINE, offset)

    return source[start:] if end == -1 else source[start:end]


def get_error_context(
    source: str,
    offset: int,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str = "^",
) -> str:
    """Get formatted error context showing an offset in source.

    Creates a multi-line string showing the error line with surrounding
    numbered context lines and a marker under the error column.

    Args:
        source: Complete source text
        offset: Character offset of error (clamped to the source)
        context_lines: Number of lines to show before/after error
        marker: Character to use for error marker

    Returns:
        Formatted error context string

    Raises:
        ValueError: If context_lines is negative

    Example:
        >>> source = "line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(get_error_context(source, 12, context_lines=1))
           2 | line2
           3 | error here
             | ^
           4 | line4
    """
    if context_lines < 0:
        msg = f"context_lines must be >= 0, got {context_lines}"
        raise ValueError(msg)

    position = compute_position(source, min(max(offset, 0), len(source)))
    lines = source.split(NEWLINE)

    start_line = max(1, position.line - context_lines)
    end_line = min(len(lines), position.line + context_lines)

    result_lines: list[str] = []
    for number in range(start_line, end_line + 1):
        prefix = f"{number:4} | "
        result_lines.append(prefix + lines[number - 1])

        if number == position.line:
            gutter = " " * (len(prefix) - 2) + "| "
            result_lines.append(gutter + " " * (position.column - 1) + marker)

    return "\n".join(result_lines)
