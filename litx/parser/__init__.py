"""Parser infrastructure (token source + recursive-descent grammar)."""

from litx.parser.grammar import parse_ast, parse_node_list
from litx.parser.options import ParseMode, ParserOptions
from litx.parser.parse import make_parser, parse, parse_node, parse_text
from litx.parser.parser import Parser
from litx.parser.token_source import TokenSource

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "make_parser",
    "parse",
    "parse_ast",
    "parse_node",
    "parse_node_list",
    "parse_text",
]
