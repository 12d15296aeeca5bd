"""Diagnostics."""

from litx.diagnostics.codes import (
    EVALUATION_FAILED,
    IO_FAILED,
    LEXER_UNTERMINATED_QUOTE,
    PARSER_DANGLING_KEY,
    PARSER_EXPECTED_NODE,
    PARSER_STRAY_CLOSE,
    PARSER_STRAY_CLOSE_STRICT,
    PARSER_UNCLOSED_EXPRESSION,
    PREPROCESS_DIRECTIVE_FAILED,
    UNIMPLEMENTED,
    DiagnosticSpec,
)
from litx.diagnostics.diagnostic import Diagnostic, DiagnosticSink, Severity
from litx.diagnostics.report import collect_diagnostics, format_diagnostics, has_errors

__all__ = [
    "EVALUATION_FAILED",
    "IO_FAILED",
    "LEXER_UNTERMINATED_QUOTE",
    "PARSER_DANGLING_KEY",
    "PARSER_EXPECTED_NODE",
    "PARSER_STRAY_CLOSE",
    "PARSER_STRAY_CLOSE_STRICT",
    "PARSER_UNCLOSED_EXPRESSION",
    "PREPROCESS_DIRECTIVE_FAILED",
    "UNIMPLEMENTED",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostics",
    "has_errors",
]
