"""Scanning primitives.

Provides the Cursor and the position utilities it uses to translate
offsets into line/column positions.

Python 3.13+.
"""

from .cursor import Cursor, Lexeme, PatternLike
from .position import (
    LineOffsetCache,
    SourcePosition,
    compute_position,
    get_error_context,
    line_at,
)

__all__ = [
    "Cursor",
    "Lexeme",
    "LineOffsetCache",
    "PatternLike",
    "SourcePosition",
    "compute_position",
    "get_error_context",
    "line_at",
]
