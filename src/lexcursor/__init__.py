"""lexcursor - Scanning cursor for hand-written lexers and parsers.

A single mutable offset over an immutable source string, with lookahead,
lexeme and regex matching, and offset-to-line/column translation.

Public API:
    Cursor - The scanning cursor
    SourcePosition - Line/column/absolute record for an offset
    LineOffsetCache - Precomputed line starts for repeated lookups

Exceptions:
    LexCursorError - Base exception class
    ScanError - Scan failure with position and source context

Submodules:
    lexcursor.syntax - Cursor and position utilities
    lexcursor.diagnostics - Error codes, templates, and formatting
    lexcursor.constants - Shared configuration constants
"""

# Diagnostics first: the syntax package depends on it
from .diagnostics import LexCursorError, ScanError
from .syntax import Cursor, LineOffsetCache, SourcePosition

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lexcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "LexCursorError",
    "LineOffsetCache",
    "ScanError",
    "SourcePosition",
    "__version__",
]
