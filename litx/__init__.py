"""litx: preprocessor, lexer, parser and normalizer for the litx markup language."""

from litx.ast import (
    Ast,
    Divider,
    EmptyLines,
    Expression,
    Node,
    Property,
    Text,
    Variable,
    as_text,
    get_property,
)
from litx.diagnostics import Diagnostic
from litx.errors import (
    ErrorKind,
    EvaluationFailure,
    IoFailure,
    LexFailure,
    LitxError,
    ParseFailure,
    Unimplemented,
)
from litx.lexer import Lexer, Token, TokenKind
from litx.parser import ParseMode, ParserOptions, parse, parse_text
from litx.pipeline import LitxParseResult, PipelineOptions, parse_document, parse_file
from litx.preprocess import MemoryFileSystem, PreprocessOptions, preprocess
from litx.sanitize import sanitize
from litx.text import TextSpan

__all__ = [
    "Ast",
    "Diagnostic",
    "Divider",
    "EmptyLines",
    "ErrorKind",
    "EvaluationFailure",
    "Expression",
    "IoFailure",
    "LexFailure",
    "Lexer",
    "LitxError",
    "LitxParseResult",
    "MemoryFileSystem",
    "Node",
    "ParseFailure",
    "ParseMode",
    "ParserOptions",
    "PipelineOptions",
    "PreprocessOptions",
    "Property",
    "Text",
    "TextSpan",
    "Token",
    "TokenKind",
    "Unimplemented",
    "Variable",
    "as_text",
    "get_property",
    "parse",
    "parse_document",
    "parse_file",
    "parse_text",
    "preprocess",
    "sanitize",
]
