"""Diagnostics core types."""

from collections.abc import Callable
from dataclasses import dataclass

from litx.diagnostics.codes import DiagnosticSpec, Severity
from litx.text import TextSpan


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer/parser/preprocessor."""

    code: str
    message: str
    span: TextSpan
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, span: TextSpan, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            span=span,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        return f"{self.severity.upper()} {self.code} @ {self.span}: {self.message}"


type DiagnosticSink = Callable[[Diagnostic], None]
