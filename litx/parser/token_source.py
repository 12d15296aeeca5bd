"""Token source giving the parser one token of lookahead."""

from collections.abc import Iterable, Iterator

from litx.lexer.tokens import EOF_TOKEN, Token, TokenKind, TokenSpan
from litx.text import TextSpan


class TokenSource:
    """Bridge between a `(Token, TextSpan)` stream and the parser.

    Pulls lazily; lex failures surface from `bump` when the failing token
    becomes the lookahead. Whitespace tokens are skipped if the stream has any.
    """

    def __init__(self, tokens: Iterable[TokenSpan]) -> None:
        self._tokens: Iterator[TokenSpan] = iter(tokens)
        self._current: Token = EOF_TOKEN
        self._current_span: TextSpan = TextSpan.empty(0)
        self._last_end = 0
        self._next_non_trivia_token()

    @property
    def current(self) -> TokenKind:
        return self._current.kind

    @property
    def current_token(self) -> Token:
        return self._current

    @property
    def current_span(self) -> TextSpan:
        return self._current_span

    def bump(self) -> TokenSpan:
        """Consume the current token and return it with its span."""
        consumed = (self._current, self._current_span)
        if self._current.kind != TokenKind.EOF:
            self._next_non_trivia_token()
        return consumed

    def _next_non_trivia_token(self) -> None:
        for token, span in self._tokens:
            if token.kind.is_trivia:
                self._last_end = span.high
                continue
            self._current = token
            self._current_span = span
            self._last_end = span.high
            return

        self._current = EOF_TOKEN
        self._current_span = TextSpan.empty(self._last_end)
