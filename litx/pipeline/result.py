"""Pipeline options and the parse carrier handed to downstream consumers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from litx.diagnostics import has_errors
from litx.parser import ParserOptions
from litx.preprocess import PreprocessOptions

if TYPE_CHECKING:
    from litx.ast import Ast
    from litx.diagnostics import Diagnostic
    from litx.errors import LitxError


@dataclass(frozen=True, slots=True)
class PipelineOptions:
    """Options for every stage of one pipeline run."""

    parser: ParserOptions = field(default_factory=ParserOptions)
    preprocess: PreprocessOptions = field(default_factory=PreprocessOptions)
    sanitize_recursively: bool = False


@dataclass(slots=True)
class LitxParseResult:
    """Outcome of source -> preprocess -> lex -> parse -> sanitize.

    Exactly one of `ast` and `error` is set. Preprocessor diagnostics point
    into `source_text`; lexer/parser diagnostics into `preprocessed_text`.
    """

    source_text: str
    preprocessed_text: str
    ast: Ast | None = None
    error: LitxError | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> Ast:
        """The normalized Ast, or raise the failure that prevented it."""
        if self.error is not None:
            raise self.error
        if self.ast is None:
            raise ValueError("LitxParseResult carries neither an ast nor an error")
        return self.ast
