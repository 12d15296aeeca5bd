"""Lexer."""

from typing import Final

from litx.errors import LexFailure
from litx.lexer.tokens import (
    BLANK_LINE_TOKEN,
    CLOSE_TOKEN,
    DIVIDER_TOKEN,
    OPEN_TOKEN,
    WHITESPACE_TOKEN,
    Token,
    TokenKind,
    TokenSpan,
)
from litx.text import TextSpan, byte_len, slice_text_span

WHITESPACE_CHARS: Final[frozenset[str]] = frozenset(" \t\r\n")

# A word stops in front of any of these, so `bar}]` lexes as WORD CLOSE.
WORD_BREAKS: Final[tuple[str, ...]] = ("''", "//", "[{", "}]", "||", "::", "$$")


class Lexer:
    """Single-use, pull-based lexer producing `(Token, TextSpan)` pairs.

    `next_token` hides whitespace; `next_raw_token` returns it too. Once the
    source is exhausted both keep returning `None`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._byte_position = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        """Byte offset of the next unread character."""
        return self._byte_position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> TokenSpan:
        pair = self.next_token()
        if pair is None:
            raise StopIteration
        return pair

    def next_token(self) -> TokenSpan | None:
        while True:
            pair = self.next_raw_token()
            if pair is None or not pair[0].kind.is_trivia:
                return pair

    def next_raw_token(self) -> TokenSpan | None:
        if self.is_eof:
            return None
        start = self._position
        token = self._lex_token()
        return token, self._span_since(start)

    def _span_since(self, start: int) -> TextSpan:
        low = self._byte_position
        self._byte_position += byte_len(self._source[start : self._position])
        return TextSpan(low, self._byte_position)

    def _lex_token(self) -> Token:
        if self._at("''"):
            return self._lex_quote()

        if self._at("//"):
            return self._lex_comment()

        if self._current_char() in WHITESPACE_CHARS:
            return self._lex_whitespace()

        if self._at("[{"):
            self._advance(2)
            return OPEN_TOKEN
        if self._at("}]"):
            self._advance(2)
            return CLOSE_TOKEN
        if self._at("||"):
            self._advance(2)
            return DIVIDER_TOKEN

        if self._at("::"):
            return self._lex_prefixed(TokenKind.KEY)
        if self._at("$$"):
            return self._lex_prefixed(TokenKind.VAR)

        return self._lex_word()

    def _lex_quote(self) -> Token:
        content_start = self._position + 2
        end = self._source.find("''", content_start)
        if end < 0:
            low = self._byte_position
            span = TextSpan(low, low + byte_len(self._source[self._position :]))
            # Nothing after an unterminated quote can be lexed reliably.
            self._position = len(self._source)
            self._byte_position = span.high
            raise LexFailure("unterminated quote", span=span)
        self._position = end + 2
        return Token(TokenKind.QUOTE, self._source[content_start:end])

    def _lex_comment(self) -> Token:
        # Consume until end of line, do not consume the line break itself.
        content_start = self._position + 2
        end = content_start
        while end < len(self._source) and self._source[end] not in "\r\n":
            end += 1
        self._position = end
        return Token(TokenKind.COMMENT, self._source[content_start:end].strip())

    def _lex_whitespace(self) -> Token:
        index = self._position
        line_breaks = 0
        last_break_end = index
        while index < len(self._source) and self._source[index] in WHITESPACE_CHARS:
            ch = self._source[index]
            if ch == "\r" or ch == "\n":
                index += 2 if self._source.startswith("\r\n", index) else 1
                line_breaks += 1
                last_break_end = index
            else:
                index += 1

        if line_breaks >= 2:
            if self._current_char() in " \t":
                # Horizontal whitespace before the first break is not part of the blank line.
                while self._current_char() in " \t":
                    self._position += 1
                return WHITESPACE_TOKEN
            self._position = last_break_end
            return BLANK_LINE_TOKEN
        if line_breaks == 1:
            # Spaces after the single break become their own token.
            self._position = last_break_end
            return WHITESPACE_TOKEN
        self._position = index
        return WHITESPACE_TOKEN

    def _lex_prefixed(self, kind: TokenKind) -> Token:
        # Key/var content runs to the next whitespace, structural sequences included.
        content_start = self._position + 2
        end = content_start
        while end < len(self._source) and self._source[end] not in WHITESPACE_CHARS:
            end += 1
        if end == content_start:
            # A bare `::`/`$$` is ordinary word text.
            self._position = end
            return Token(TokenKind.WORD, self._source[content_start - 2 : end])
        self._position = end
        return Token(kind, self._source[content_start:end])

    def _lex_word(self) -> Token:
        start = self._position
        self._position = self._scan_word(start)
        return Token(TokenKind.WORD, self._source[start : self._position])

    def _scan_word(self, index: int) -> int:
        source = self._source
        while index < len(source):
            if source[index] in WHITESPACE_CHARS:
                break
            if any(source.startswith(seq, index) for seq in WORD_BREAKS):
                break
            index += 1
        return index

    def _at(self, text: str) -> bool:
        return self._source.startswith(text, self._position)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def lex(source: str, *, keep_whitespace: bool = False) -> list[TokenSpan]:
    """Lex the whole source eagerly."""
    lexer = Lexer(source)
    pairs: list[TokenSpan] = []
    while True:
        pair = lexer.next_raw_token() if keep_whitespace else lexer.next_token()
        if pair is None:
            break
        pairs.append(pair)
    return pairs


def token_text(source: str, span: TextSpan) -> str:
    """Get the raw source text of a token from its span."""
    return slice_text_span(source, span)


def dump_tokens(pairs: list[TokenSpan], source: str) -> None:
    """Print token list with kind, span, content and raw text for debugging."""
    for i, (tok, span) in enumerate(pairs):
        text = token_text(source, span)
        print(f"{i:03d} {tok.kind.name:<12} span={span.as_tuple()} content={tok.text!r} text={text!r}")
