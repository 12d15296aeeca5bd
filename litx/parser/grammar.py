"""litx grammar routines.

    ast   := node*
    node  := BLANK_LINE | OPEN node* CLOSE | DIVIDER | VAR | KEY node | WORD | QUOTE

Comments are dropped inside `node*` repetitions.
"""

from litx.ast import Ast, Divider, EmptyLines, Expression, Node, Property, Text, Variable
from litx.diagnostics.codes import (
    PARSER_DANGLING_KEY,
    PARSER_EXPECTED_NODE,
    PARSER_STRAY_CLOSE,
    PARSER_STRAY_CLOSE_STRICT,
    PARSER_UNCLOSED_EXPRESSION,
)
from litx.errors import ParseFailure
from litx.lexer import Token, TokenKind
from litx.parser.parser import Parser
from litx.text import TextSpan


def parse_ast(parser: Parser) -> Ast:
    nodes = parse_node_list(parser)

    if parser.at(TokenKind.CLOSE):
        _, span = parser.bump()
        if not parser.options.allow_stray_close:
            raise ParseFailure(
                PARSER_STRAY_CLOSE_STRICT.message,
                span=span,
                spec=PARSER_STRAY_CLOSE_STRICT,
            )
        # Ends the current nesting level; whatever follows is left unparsed.
        parser.warn(PARSER_STRAY_CLOSE, span)

    return Ast(tuple(nodes))


def parse_node_list(parser: Parser) -> list[Node]:
    """Parse `node*` up to (not including) a CLOSE or the end of input."""
    nodes: list[Node] = []
    while not parser.at_end() and not parser.at(TokenKind.CLOSE):
        if parser.eat(TokenKind.COMMENT) is not None:
            continue
        nodes.append(parse_node(parser))
    return nodes


def parse_node(parser: Parser) -> Node:
    token, span = parser.bump()

    match token.kind:
        case TokenKind.BLANK_LINE:
            return EmptyLines(span)
        case TokenKind.OPEN:
            return _parse_expression_rest(parser, token, span)
        case TokenKind.DIVIDER:
            return Divider(span)
        case TokenKind.VAR:
            return Variable(span, token.text)
        case TokenKind.KEY:
            return _parse_property_rest(parser, token.text, span)
        case TokenKind.WORD | TokenKind.QUOTE:
            return Text(span, token.text)
        case TokenKind.EOF:
            raise ParseFailure(
                "expected a node, found end of input",
                span=span,
                spec=PARSER_EXPECTED_NODE,
            )
        case _:
            raise ParseFailure(
                f"expected a node, found {token}",
                token=token,
                span=span,
                spec=PARSER_EXPECTED_NODE,
            )


def _parse_expression_rest(parser: Parser, open_token: Token, open_span: TextSpan) -> Expression:
    children = parse_node_list(parser)
    closed = parser.eat(TokenKind.CLOSE)
    if closed is None:
        raise ParseFailure(
            "expected `}]` before end of input",
            token=open_token,
            span=open_span.merge(parser.current_span),
            spec=PARSER_UNCLOSED_EXPRESSION,
        )
    _, close_span = closed
    return Expression(open_span.merge(close_span), tuple(children))


def _parse_property_rest(parser: Parser, key: str, key_span: TextSpan) -> Property:
    if parser.at_end() or parser.at(TokenKind.CLOSE) or parser.at(TokenKind.COMMENT):
        found = "end of input" if parser.at_end() else str(parser.current_token)
        raise parser.fail(PARSER_DANGLING_KEY, f"expected a value after `::{key}`, found {found}")
    value = parse_node(parser)
    return Property(key_span.merge(value.span), key, value)
