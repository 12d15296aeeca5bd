"""Parser core."""

from litx.diagnostics import Diagnostic, DiagnosticSpec
from litx.errors import ParseFailure
from litx.lexer.tokens import Token, TokenKind, TokenSpan
from litx.parser.options import ParserOptions
from litx.parser.token_source import TokenSource
from litx.text import TextSpan


class Parser:
    """Recursive-descent parser state over a TokenSource.

    Grammar routines live in `litx.parser.grammar`. Failures raise
    `ParseFailure`; recoverable oddities are recorded as warning diagnostics.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_token(self) -> Token:
        return self._source.current_token

    @property
    def current_span(self) -> TextSpan:
        return self._source.current_span

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_end(self) -> bool:
        return self.current == TokenKind.EOF

    def bump(self) -> TokenSpan:
        return self._source.bump()

    def eat(self, kind: TokenKind) -> TokenSpan | None:
        if self.current == kind:
            return self.bump()
        return None

    def fail(self, spec: DiagnosticSpec, message: str | None = None) -> ParseFailure:
        """Build a ParseFailure pointing at the current token (none at EOF)."""
        token = None if self.at_end() else self.current_token
        return ParseFailure(
            message or spec.message,
            token=token,
            span=self.current_span,
            spec=spec,
        )

    def warn(self, spec: DiagnosticSpec, span: TextSpan) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, span))
