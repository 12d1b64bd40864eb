"""Diagnostic system for datewindows errors.

Provides structured error diagnostics with codes, hints and argument context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateWindowError,
    InvalidArgumentError,
    InvalidRangeError,
    InvalidReferenceError,
    UnboundedRangeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateWindowError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "OutputFormat",
    "UnboundedRangeError",
]
