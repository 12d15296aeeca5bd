"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from litx.text import TextSpan


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 0  # parser lookahead only, never emitted by the lexer

    # -------------------------
    # Content-carrying tokens
    # -------------------------
    QUOTE = 10  # ''text''
    COMMENT = 11  # // text
    WORD = 12  # text
    KEY = 13  # ::text
    VAR = 14  # $$text

    # -------------------------
    # Structure
    # -------------------------
    OPEN = 20  # [{
    CLOSE = 21  # }]
    DIVIDER = 22  # ||
    BLANK_LINE = 23  # \n\n

    # -------------------------
    # Trivia
    # -------------------------
    WHITESPACE = 30

    @property
    def is_trivia(self) -> bool:
        return self == TokenKind.WHITESPACE

    @property
    def has_text(self) -> bool:
        return self in _TEXT_KINDS


_TEXT_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.QUOTE,
        TokenKind.COMMENT,
        TokenKind.WORD,
        TokenKind.KEY,
        TokenKind.VAR,
    }
)

_DISPLAY_NAMES: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "EOF",
    TokenKind.QUOTE: "Quote",
    TokenKind.COMMENT: "Comment",
    TokenKind.WORD: "Word",
    TokenKind.KEY: "Key",
    TokenKind.VAR: "Var",
    TokenKind.OPEN: "Open",
    TokenKind.CLOSE: "Close",
    TokenKind.DIVIDER: "Divider",
    TokenKind.BLANK_LINE: "BlankLine",
    TokenKind.WHITESPACE: "Whitespace",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token; `text` is set for content-carrying kinds only."""

    kind: TokenKind
    text: str | None = None

    def __post_init__(self):
        if self.kind.has_text and self.text is None:
            raise ValueError(f"{self.kind.name} token requires text")
        if not self.kind.has_text and self.text is not None:
            raise ValueError(f"{self.kind.name} token carries no text")

    def __str__(self) -> str:
        name = _DISPLAY_NAMES[self.kind]
        if self.text is None:
            return name
        return f"{name}({self.text!r})"


# Tokens without content are shared.
OPEN_TOKEN: Final[Token] = Token(TokenKind.OPEN)
CLOSE_TOKEN: Final[Token] = Token(TokenKind.CLOSE)
DIVIDER_TOKEN: Final[Token] = Token(TokenKind.DIVIDER)
BLANK_LINE_TOKEN: Final[Token] = Token(TokenKind.BLANK_LINE)
WHITESPACE_TOKEN: Final[Token] = Token(TokenKind.WHITESPACE)
EOF_TOKEN: Final[Token] = Token(TokenKind.EOF)

type TokenSpan = tuple[Token, TextSpan]
