"""Shared constants for lexcursor.

This module provides centralized configuration constants used across the
syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Character classes: Line delimiter and skippable whitespace sets
- Diagnostic limits: Context window and sanitization bounds

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "NEWLINE",
    "WHITESPACE",
    "INLINE_WHITESPACE",
    # Diagnostic limits
    "DEFAULT_CONTEXT_LINES",
    "MAX_CONTENT_LENGTH",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Line delimiter for position translation and current_line.
# CRLF sources work because the \n is still present; CR-only sources
# (pre-OSX Mac format) report everything on line 1.
NEWLINE: str = "\n"

# Default character set for Cursor.skip_chars().
WHITESPACE: str = " \t\r\n"

# Whitespace that does not end a line.
INLINE_WHITESPACE: str = " \t"

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Lines shown before and after the error line in get_error_context().
DEFAULT_CONTEXT_LINES: int = 2

# Truncation bound for DiagnosticFormatter(sanitize=True).
MAX_CONTENT_LENGTH: int = 100
