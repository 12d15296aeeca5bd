"""Lexer."""

from litx.lexer.lexer import Lexer, dump_tokens, lex, token_text
from litx.lexer.tokens import (
    EOF_TOKEN,
    Token,
    TokenKind,
    TokenSpan,
)

__all__ = [
    "EOF_TOKEN",
    "Lexer",
    "Token",
    "TokenKind",
    "TokenSpan",
    "dump_tokens",
    "lex",
    "token_text",
]
