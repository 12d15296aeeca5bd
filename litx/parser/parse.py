"""High-level parse entrypoints."""

from __future__ import annotations

from collections.abc import Iterable

from litx.ast import Ast, Node
from litx.lexer import Lexer, TokenKind, TokenSpan
from litx.parser.grammar import parse_ast
from litx.parser.grammar import parse_node as _parse_node
from litx.parser.options import ParseMode, ParserOptions
from litx.parser.parser import Parser
from litx.parser.token_source import TokenSource


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def make_parser(
    tokens: Iterable[TokenSpan],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Parser:
    return Parser(TokenSource(tokens), options=_resolve_options(options, mode))


def parse(
    tokens: Iterable[TokenSpan],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Ast:
    """Parse a `(Token, TextSpan)` stream, usually a Lexer, into an Ast."""
    parser = make_parser(tokens, options, mode=mode)
    return parse_ast(parser)


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Ast:
    return parse(Lexer(text), options, mode=mode)


def parse_node(tokens: Iterable[TokenSpan]) -> Node:
    """Parse exactly one node; leading comments are skipped, trailing tokens ignored."""
    parser = make_parser(tokens)
    while parser.eat(TokenKind.COMMENT) is not None:
        pass
    return _parse_node(parser)


__all__ = [
    "make_parser",
    "parse",
    "parse_node",
    "parse_text",
]
