"""AST data model for litx source."""

from __future__ import annotations

from dataclasses import dataclass

from litx.text import TextSpan


@dataclass(frozen=True, slots=True)
class Expression:
    """Bracketed group `[{ ... }]` preserving child order."""

    span: TextSpan
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Divider:
    """Section separator `||`."""

    span: TextSpan


@dataclass(frozen=True, slots=True)
class EmptyLines:
    """Two or more consecutive line breaks."""

    span: TextSpan


@dataclass(frozen=True, slots=True)
class Variable:
    span: TextSpan
    name: str


@dataclass(frozen=True, slots=True)
class Text:
    span: TextSpan
    content: str


@dataclass(frozen=True, slots=True)
class Property:
    """Key-tagged wrapper around exactly one value node, `::key value`."""

    span: TextSpan
    key: str
    value: Node


@dataclass(frozen=True, slots=True)
class Ast:
    """Top-level parse result: zero or more sibling nodes."""

    nodes: tuple[Node, ...] = ()

    @property
    def span(self) -> TextSpan | None:
        if not self.nodes:
            return None
        span = self.nodes[0].span
        for node in self.nodes[1:]:
            span = span.merge(node.span)
        return span


type Node = Expression | Divider | EmptyLines | Variable | Text | Property


__all__ = [
    "Ast",
    "Divider",
    "EmptyLines",
    "Expression",
    "Node",
    "Property",
    "Text",
    "Variable",
]
