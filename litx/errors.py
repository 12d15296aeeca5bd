"""Failure types shared by every pipeline stage."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from litx.diagnostics import (
    EVALUATION_FAILED,
    IO_FAILED,
    LEXER_UNTERMINATED_QUOTE,
    PARSER_EXPECTED_NODE,
    UNIMPLEMENTED,
    Diagnostic,
    DiagnosticSpec,
)
from litx.text import TextSpan

if TYPE_CHECKING:
    from litx.lexer.tokens import Token


class ErrorKind(StrEnum):
    LEX_FAILURE = "lex"
    PARSE_FAILURE = "parse"
    EVALUATION_FAILURE = "evaluation"
    IO = "io"
    UNIMPLEMENTED = "unimplemented"


class LitxError(Exception):
    """Base exception for litx operations."""

    kind: ErrorKind = ErrorKind.EVALUATION_FAILURE
    title: str = "Failure"
    default_spec: DiagnosticSpec = EVALUATION_FAILED

    def __init__(
        self,
        message: str,
        *,
        token: Token | None = None,
        span: TextSpan | None = None,
        spec: DiagnosticSpec | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.span = span
        self.spec = spec or self.default_spec

    def __str__(self) -> str:
        if self.token is not None and self.span is not None:
            return f"{self.title}: {self.token} @ {self.span} ({self.message})"
        if self.span is not None:
            return f"{self.title} @ {self.span}: {self.message}"
        return f"{self.title}: {self.message}"

    def to_diagnostic(self, span: TextSpan | None = None) -> Diagnostic:
        """Convert to a Diagnostic; `span` overrides the failure's own location."""
        location = span or self.span or TextSpan.empty(0)
        return Diagnostic.from_spec(self.spec, location, message=self.message)


class LexFailure(LitxError):
    """Malformed or truncated lexical input."""

    kind = ErrorKind.LEX_FAILURE
    title = "Lexing Failure"
    default_spec = LEXER_UNTERMINATED_QUOTE


class ParseFailure(LitxError):
    """Grammar violation."""

    kind = ErrorKind.PARSE_FAILURE
    title = "Parsing Failure"
    default_spec = PARSER_EXPECTED_NODE


class EvaluationFailure(LitxError):
    """Preprocessor directive with a wrong shape, unknown name or missing context."""

    kind = ErrorKind.EVALUATION_FAILURE
    title = "Evaluation Failure"
    default_spec = EVALUATION_FAILED


class IoFailure(LitxError):
    """File-system failure; the underlying error is kept as `__cause__`."""

    kind = ErrorKind.IO
    title = "IO Error"
    default_spec = IO_FAILED


class Unimplemented(LitxError):
    """Functionality that downstream collaborators have not built yet."""

    kind = ErrorKind.UNIMPLEMENTED
    title = "Unimplemented"
    default_spec = UNIMPLEMENTED


__all__ = [
    "ErrorKind",
    "EvaluationFailure",
    "IoFailure",
    "LexFailure",
    "LitxError",
    "ParseFailure",
    "Unimplemented",
]
