"""Shared debug printers for lexer/parser/preprocess tests."""

from __future__ import annotations

import os

from litx.ast import Ast, Expression, Node, Property, Text, Variable
from litx.diagnostics import Diagnostic, format_diagnostics
from litx.lexer import TokenSpan, token_text

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, pairs: list[TokenSpan]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, (tok, span) in enumerate(pairs):
        text = token_text(source, span)
        print(f"{index:03d} {tok.kind.name:<12} span={span.as_tuple()} content={tok.text!r} text={text!r}")


def format_ast(ast: Ast) -> str:
    lines: list[str] = []

    def walk(node: Node, depth: int) -> None:
        indent = "  " * depth
        span = node.span.as_tuple()
        if isinstance(node, Expression):
            lines.append(f"{indent}Expression {span}")
            for child in node.children:
                walk(child, depth + 1)
        elif isinstance(node, Property):
            lines.append(f"{indent}Property {node.key!r} {span}")
            walk(node.value, depth + 1)
        elif isinstance(node, Text):
            lines.append(f"{indent}Text {node.content!r} {span}")
        elif isinstance(node, Variable):
            lines.append(f"{indent}Variable {node.name!r} {span}")
        else:
            lines.append(f"{indent}{type(node).__name__} {span}")

    for node in ast.nodes:
        walk(node, 0)
    return "\n".join(lines)


def debug_dump_ast(test_name: str, ast: Ast) -> None:
    if not PRINT_AST:
        return
    print(f"\n===== {test_name} AST =====")
    print(format_ast(ast) or "(empty)")


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    print(format_diagnostics(diagnostics))
