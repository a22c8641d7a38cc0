"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _quote_all(lexemes: Sequence[str]) -> str:
    return ", ".join(repr(lexeme) for lexeme in lexemes)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof(
        span: SourceSpan | None = None,
        *,
        expected: Sequence[str] = (),
        source_line: str | None = None,
    ) -> Diagnostic:
        """Scanner ran past the end of the source.

        Args:
            span: Location of the end of input
            expected: Lexemes that would have been accepted
            source_line: Text of the last line

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        position = span.start if span is not None else "?"
        msg = f"Unexpected end of input at position {position}"
        hint = f"Expected one of {_quote_all(expected)}" if expected else None
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=span,
            hint=hint,
            source_line=source_line,
            expected=tuple(expected),
        )

    @staticmethod
    def unexpected_character(
        char: str,
        span: SourceSpan | None = None,
        *,
        source_line: str | None = None,
    ) -> Diagnostic:
        """Scanner found a character it has no rule for.

        Args:
            char: The offending character
            span: Location of the character
            source_line: Text of the line containing the character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {char!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            source_line=source_line,
        )

    @staticmethod
    def expected_lexeme(
        expected: Sequence[str],
        found: str,
        span: SourceSpan | None = None,
        *,
        source_line: str | None = None,
    ) -> Diagnostic:
        """None of the accepted lexemes is present.

        Args:
            expected: Lexemes that would have been accepted
            found: Character actually present at the cursor
            span: Location of the mismatch
            source_line: Text of the line containing the mismatch

        Returns:
            Diagnostic for EXPECTED_LEXEME
        """
        msg = f"Expected one of {_quote_all(expected)} but found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_LEXEME,
            message=msg,
            span=span,
            hint="Check for a missing or misspelled token",
            source_line=source_line,
            expected=tuple(expected),
        )

    @staticmethod
    def pattern_not_matched(
        pattern: str,
        span: SourceSpan | None = None,
        *,
        source_line: str | None = None,
    ) -> Diagnostic:
        """Regular expression did not match where one was required.

        Args:
            pattern: Pattern source text
            span: Location where matching started
            source_line: Text of the line containing the location

        Returns:
            Diagnostic for PATTERN_NOT_MATCHED
        """
        msg = f"Input does not match pattern {pattern!r}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_MATCHED,
            message=msg,
            span=span,
            source_line=source_line,
        )

    @staticmethod
    def scan_failed(
        message: str,
        span: SourceSpan | None = None,
        *,
        expected: Sequence[str] = (),
        source_line: str | None = None,
    ) -> Diagnostic:
        """Caller-described scan failure.

        Args:
            message: Caller-supplied description
            span: Location of the failure
            expected: Lexemes that would have been accepted
            source_line: Text of the line containing the failure

        Returns:
            Diagnostic for SCAN_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.SCAN_FAILED,
            message=message,
            span=span,
            source_line=source_line,
            expected=tuple(expected),
        )
