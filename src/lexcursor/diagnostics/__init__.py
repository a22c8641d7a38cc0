"""Diagnostic system for scan errors.

Provides structured error diagnostics with codes, spans, hints, and
source excerpts. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import LexCursorError, ScanError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LexCursorError",
    "OutputFormat",
    "ScanError",
    "SourceSpan",
]
