"""lexcursor exception hierarchy with structured diagnostics.

Out-of-bounds lookahead is never an error in this library; these
exceptions are for lexers and parsers built on Cursor that need to
report a failed scan with line/column context.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from lexcursor.syntax.position import SourcePosition


class LexCursorError(Exception):
    """Base exception for all lexcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LexCursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ScanError(LexCursorError):
    """Scan failure at a known location in the source.

    Usually created by Cursor.error() and raised by the caller:

        if not cursor.consume(("+", "-")):
            raise cursor.error(expected=("+", "-"))

    Attributes:
        source: The complete source text being scanned
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        """Initialize ScanError.

        Args:
            message: Error message string OR Diagnostic object
            source: Complete source text, used for context rendering
        """
        super().__init__(message)
        self.source = source

    @property
    def position(self) -> "SourcePosition | None":
        """Position of the failure, if the diagnostic carries a span."""
        from lexcursor.syntax.position import SourcePosition  # noqa: PLC0415 - circular

        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        span = self.diagnostic.span
        return SourcePosition(line=span.line, column=span.column, absolute=span.start)

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error: "line:column: message" followed by
            numbered source lines and a caret at the failing column

        Example:
            >>> cursor = Cursor("hello = Hi\\nworld = { $name\\nfoo = Bar")
            >>> cursor.seek(26)
            26
            >>> print(cursor.error("Expected '}'").format_with_context())
            2:16: Expected '}'
            <BLANKLINE>
               1 | hello = Hi
               2 | world = { $name
                 |                ^
               3 | foo = Bar
        """
        from lexcursor.syntax.position import get_error_context  # noqa: PLC0415 - circular

        position = self.position
        if position is None:
            return str(self)

        message = self.diagnostic.message if self.diagnostic is not None else str(self)
        context = get_error_context(self.source, position.absolute, context_lines)
        return f"{position}: {message}\n\n{context}"
