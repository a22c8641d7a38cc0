"""Mutable scanning cursor over an immutable source string.

The foundational primitive for hand-written lexers and parsers: one
source string, one integer offset, and lookahead/matching operations
that drive a tokenization loop.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Source is immutable, offset is the only scanning state
    - Out-of-bounds access is not an error: lookahead returns "", False
      or None so a parser can probe past the end of input freely
    - Movement is never clamped; bounds are queried, not enforced
    - Pattern matching never consumes; lexeme matching consumes only
      through consume() and find_first_matched()
    - Line:column computed on demand (line starts indexed on first use)

Typical loop:

    cursor = Cursor(source)
    while not cursor.is_eof:
        if cursor.skip_chars():
            continue
        if (op := cursor.find_first_matched(("==", "=", "+"))) is not None:
            emit(op)
        elif (m := cursor.match_pattern(NUMBER)) is not None:
            emit(m.group())
            cursor.advance(m.end())
        else:
            raise cursor.error()
"""

import logging
import re
from collections.abc import Sequence

from lexcursor.constants import WHITESPACE
from lexcursor.diagnostics import Diagnostic, ErrorTemplate, ScanError, SourceSpan

from .position import LineOffsetCache, SourcePosition, line_at

__all__ = ["Cursor", "Lexeme", "PatternLike"]

logger = logging.getLogger(__name__)

type Lexeme = str | Sequence[str]
type PatternLike = str | re.Pattern[str]


def _alternatives(lexeme: Lexeme) -> Sequence[str]:
    # A str is itself a Sequence, so the single case is checked first
    return (lexeme,) if isinstance(lexeme, str) else lexeme


def _compile(pattern: PatternLike) -> re.Pattern[str]:
    # re.compile() caches compiled strings; invalid patterns raise re.error
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


class Cursor:
    """Scanning cursor: an immutable source and a mutable offset.

    Example:
        >>> cursor = Cursor("sample text")
        >>> cursor.current
        's'
        >>> cursor.consume(["text", "sample"])
        True
        >>> cursor.offset
        6
        >>> cursor.remainder
        ' text'
        >>> cursor.seek(100)
        100
        >>> cursor.peek()  # Out of bounds degrades, never raises
        ''

    Thread Safety:
        NOT thread-safe. offset is unsynchronized mutable state; each
        scanning loop should own its cursor exclusively.
    """

    __slots__ = ("_line_index", "_source", "offset")

    def __init__(self, source: str) -> None:
        """Create a cursor at offset 0.

        Args:
            source: Complete source text

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            msg = f"Cursor source must be str, got {type(source).__name__}"
            raise TypeError(msg)
        self._source = source
        self._line_index: LineOffsetCache | None = None
        self.offset = 0

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, length={len(self._source)})"

    def __len__(self) -> int:
        return len(self._source)

    @property
    def source(self) -> str:
        """The complete source text (read-only)."""
        return self._source

    @property
    def length(self) -> int:
        """Number of characters in the source. Constant for the cursor's lifetime."""
        return len(self._source)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def is_within_bounds(self, relative_offset: int = 0) -> bool:
        """Check whether offset + relative_offset lies in [0, length)."""
        target = self.offset + relative_offset
        return 0 <= target < len(self._source)

    def is_at_end(self, relative_offset: int = 0) -> bool:
        """Check whether offset + relative_offset has reached the end.

        Note:
            Only the upper bound is checked. A negative position is never
            "at end"; use is_within_bounds() for full validity.
        """
        return self.offset + relative_offset >= len(self._source)

    @property
    def is_valid(self) -> bool:
        """Whether the current offset is within the source bounds."""
        return self.is_within_bounds(0)

    @property
    def is_eof(self) -> bool:
        """Whether the current offset has reached the end of the source.

        Use in while loops: `while not cursor.is_eof:`
        """
        return self.is_at_end(0)

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def peek(self, relative_offset: int = 0) -> str:
        """Get the character at offset + relative_offset without advancing.

        Returns:
            The character, or "" if the position is out of bounds
        """
        if not self.is_within_bounds(relative_offset):
            return ""
        return self._source[self.offset + relative_offset]

    def peek_many(self, count: int, relative_offset: int = 0) -> str:
        """Get up to count characters starting at offset + relative_offset.

        Returns:
            The characters of the window that exist in the source. A window
            starting before 0 is clipped rather than wrapped.

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.peek_many(3)
            'hel'
            >>> cursor.peek_many(10, 3)  # More than available
            'lo'
        """
        start = self.offset + relative_offset
        end = start + count
        if end <= 0 or count <= 0:
            return ""
        return self._source[max(start, 0) : end]

    def peek_range(self, end: int | None = None, relative_offset: int = 0) -> str:
        """Get the text from offset + relative_offset up to an absolute end.

        Args:
            end: Absolute index to stop before (None = end of source)
            relative_offset: Start offset relative to the current offset

        Returns:
            The substring. Negative bounds are clipped to 0, and an end that
            precedes the start swaps the two bounds.

        Example:
            >>> cursor = Cursor("sample text")
            >>> cursor.seek(5)
            5
            >>> cursor.peek_range(0)
            'sampl'
        """
        start = max(self.offset + relative_offset, 0)
        if end is None:
            return self._source[start:]
        end = max(end, 0)
        return self._source[min(start, end) : max(start, end)]

    def slice(self, start: int | None = None, end: int | None = None) -> str:
        """Get a section of the source by absolute indices.

        Independent of the current offset. Negative indices count from the
        end of the source, as with Python slicing.
        """
        return self._source[start:end]

    @property
    def current(self) -> str:
        """The current character, or "" out of bounds."""
        return self.peek(0)

    @property
    def next_char(self) -> str:
        """The character after the current one, or "" out of bounds."""
        return self.peek(1)

    @property
    def remainder(self) -> str:
        """The text from the current offset to the end of the source."""
        return self.peek_range()

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def advance(self, delta: int = 1) -> int:
        """Move the offset by delta (may be negative) without clamping.

        Returns:
            The new offset
        """
        self.offset += delta
        return self.offset

    def seek(self, offset: int) -> int:
        """Set the offset to an absolute value without clamping.

        Returns:
            The new offset
        """
        self.offset = offset
        return self.offset

    def rewind(self) -> None:
        """Set the offset back to 0."""
        self.offset = 0

    def skip_chars(self, chars: str = WHITESPACE) -> int:
        """Advance past consecutive characters contained in chars.

        Args:
            chars: Characters to skip (default: space, tab, CR, LF)

        Returns:
            Number of characters skipped

        Example:
            >>> cursor = Cursor("  \\t hello")
            >>> cursor.skip_chars()
            4
            >>> cursor.current
            'h'
        """
        start = self.offset
        while self.is_valid and self._source[self.offset] in chars:
            self.offset += 1
        return self.offset - start

    def skip_line_end(self) -> bool:
        """Consume one LF, CRLF, or CR line ending at the current offset.

        Returns:
            True if a line ending was consumed
        """
        return self.consume(("\r\n", "\n", "\r"))

    # ------------------------------------------------------------------
    # Lexeme matching
    # ------------------------------------------------------------------

    def starts_with(self, lexeme: Lexeme, relative_offset: int = 0) -> bool:
        """Check whether a lexeme is present at offset + relative_offset.

        Args:
            lexeme: A literal string, or a sequence of alternatives (any match)
            relative_offset: Offset relative to the current offset

        Returns:
            True if the source continues with the lexeme (non-consuming)
        """
        start = self.offset + relative_offset
        if start < 0:
            return False
        return any(
            self._source.startswith(alternative, start)
            for alternative in _alternatives(lexeme)
        )

    def consume(self, lexeme: Lexeme, relative_offset: int = 0) -> bool:
        """Match a lexeme and advance past it.

        On success the offset moves by relative_offset + len(lexeme).
        Alternatives are tried in the given order and the first present one
        is consumed, so ["=", "=="] never consumes "==".

        Returns:
            Whether a lexeme was consumed (offset unchanged if not)
        """
        for alternative in _alternatives(lexeme):
            if self.starts_with(alternative, relative_offset):
                self.offset += relative_offset + len(alternative)
                return True
        return False

    def find_first_present(self, lexemes: Lexeme, relative_offset: int = 0) -> str | None:
        """Return the first lexeme (in order) present, without consuming.

        A bare str is one lexeme, as in starts_with(), not a set of characters.
        """
        for lexeme in _alternatives(lexemes):
            if self.starts_with(lexeme, relative_offset):
                return lexeme
        return None

    def find_first_matched(self, lexemes: Lexeme, relative_offset: int = 0) -> str | None:
        """Consume and return the first lexeme (in order) present."""
        for lexeme in _alternatives(lexemes):
            if self.consume(lexeme, relative_offset):
                return lexeme
        return None

    # ------------------------------------------------------------------
    # Pattern matching (never consumes)
    # ------------------------------------------------------------------

    def matches_pattern(
        self, pattern: PatternLike | Sequence[PatternLike], relative_offset: int = 0
    ) -> bool:
        """Test one or more regular expressions against the remainder.

        The search is not anchored: use "^" (or \\A) in the pattern to
        require a match at the cursor.

        Args:
            pattern: Compiled pattern, pattern string, or a sequence of them
            relative_offset: Start offset relative to the current offset

        Returns:
            True if any pattern matches

        Raises:
            re.error: If a pattern string is not a valid regular expression
        """
        text = self.peek_range(None, relative_offset)
        # A str is itself a Sequence; the single case is checked first
        if isinstance(pattern, (str, re.Pattern)):
            return _compile(pattern).search(text) is not None
        return any(_compile(p).search(text) is not None for p in pattern)

    def match_pattern(
        self, pattern: PatternLike, relative_offset: int = 0
    ) -> re.Match[str] | None:
        """Search the remainder with a regular expression.

        Match positions are relative to offset + relative_offset, so after
        an anchored match the caller advances with `cursor.advance(m.end())`.

        Returns:
            The match object with all groups, or None

        Raises:
            re.error: If pattern is not a valid regular expression

        Example:
            >>> cursor = Cursor("x = 42")
            >>> cursor.match_pattern(r"^(\\w+)\\s*=").group(1)
            'x'
            >>> cursor.offset  # Unchanged
            0
        """
        return _compile(pattern).search(self.peek_range(None, relative_offset))

    def match_all_patterns(
        self, pattern: PatternLike, relative_offset: int = 0
    ) -> list[str] | None:
        """Collect every full match of a regular expression in the remainder.

        Returns:
            Matched substrings in source order, or None if there are none

        Raises:
            re.error: If pattern is not a valid regular expression
        """
        text = self.peek_range(None, relative_offset)
        matches = [m.group(0) for m in _compile(pattern).finditer(text)]
        return matches or None

    # ------------------------------------------------------------------
    # Position translation
    # ------------------------------------------------------------------

    def position_of(self, offset: int | None = None) -> SourcePosition:
        """Translate an absolute offset into a line/column position.

        Args:
            offset: Absolute offset (None = current offset)

        Returns:
            SourcePosition with 1-based line and column

        Example:
            >>> cursor = Cursor("first line\\nsecond line")
            >>> cursor.position_of(11)
            SourcePosition(line=2, column=1, absolute=11)
        """
        if self._line_index is None:
            self._line_index = LineOffsetCache(self._source)
        return self._line_index.position_of(self.offset if offset is None else offset)

    @property
    def position(self) -> SourcePosition:
        """The SourcePosition of the current offset."""
        return self.position_of()

    @property
    def current_line(self) -> str:
        """The full line containing the current offset, without newlines."""
        return line_at(self._source, self.offset)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def span(self, start: int | None = None) -> SourceSpan:
        """Build a SourceSpan from start to the current offset.

        Offsets are clamped into [0, length] and ordered, so a span can
        always be built, even from an out-of-bounds cursor.

        Args:
            start: Absolute start offset (None = current offset)
        """
        length = len(self._source)
        end = min(max(self.offset, 0), length)
        begin = end if start is None else min(max(start, 0), length)
        begin, end = min(begin, end), max(begin, end)
        position = self.position_of(begin)
        return SourceSpan(start=begin, end=end, line=position.line, column=position.column)

    def error(
        self,
        message: str | None = None,
        *,
        expected: Sequence[str] = (),
        pattern: PatternLike | None = None,
    ) -> ScanError:
        """Create (but do not raise) a ScanError at the current offset.

        Args:
            message: Custom description; chooses SCAN_FAILED when given
            expected: Lexemes the caller would have accepted here
            pattern: Pattern the input failed to match; chooses
                PATTERN_NOT_MATCHED when no lexemes are expected

        Returns:
            ScanError whose diagnostic carries span, source line, and
            expected lexemes

        Example:
            >>> cursor = Cursor("1 * 2")
            >>> cursor.seek(2)
            2
            >>> raise cursor.error(expected=("+", "-"))
            Traceback (most recent call last):
            ...
            lexcursor.diagnostics.errors.ScanError: error[EXPECTED_LEXEME]: ...
        """
        span = self.span()
        source_line = line_at(self._source, span.start)

        diagnostic: Diagnostic
        if message is not None:
            diagnostic = ErrorTemplate.scan_failed(
                message, span, expected=expected, source_line=source_line
            )
        elif self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(
                span, expected=expected, source_line=source_line
            )
        elif expected:
            diagnostic = ErrorTemplate.expected_lexeme(
                expected, self.current, span, source_line=source_line
            )
        elif pattern is not None:
            diagnostic = ErrorTemplate.pattern_not_matched(
                _compile(pattern).pattern, span, source_line=source_line
            )
        else:
            diagnostic = ErrorTemplate.unexpected_character(
                self.current, span, source_line=source_line
            )

        logger.debug("Scan error %s at %d:%d", diagnostic.code.name, span.line, span.column)
        return ScanError(diagnostic, source=self._source)

