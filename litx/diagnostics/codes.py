"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_QUOTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_QUOTE",
    message="Unterminated quote.",
    hint="Close the quote with a second pair of apostrophes (`''`).",
    severity="error",
    category="lexer",
)

PARSER_UNCLOSED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_EXPRESSION",
    message="Unclosed expression",
    hint="Close the expression with `}]`.",
    severity="error",
    category="parser",
)

PARSER_DANGLING_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DANGLING_KEY",
    message="Expected a value after property key",
    hint="Write the value directly after the key, e.g. `::key value`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_NODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_NODE",
    message="Expected a node",
    severity="error",
    category="parser",
)

PARSER_STRAY_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_STRAY_CLOSE",
    message="Closing `}]` without a matching `[{` ends the document in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_STRAY_CLOSE_STRICT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_STRAY_CLOSE",
    message="Closing `}]` without a matching `[{`",
    severity="error",
    category="parser",
)

EVALUATION_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVALUATION_FAILED",
    message="Evaluation failure",
    severity="error",
    category="preprocess",
)

IO_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_FAILED",
    message="IO error",
    severity="error",
    category="io",
)

UNIMPLEMENTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNIMPLEMENTED",
    message="Not implemented yet",
    hint="This is not a problem with the document.",
    severity="error",
    category="internal",
)

PREPROCESS_DIRECTIVE_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PREPROCESS_DIRECTIVE_FAILED",
    message="Preprocessor directive failed",
    hint="Using line as plain text, not as a preprocessor directive.",
    severity="warning",
    category="preprocess",
)
