"""Accessors that downstream consumers use to read the AST."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from litx.ast.model import Ast, Divider, Expression, Node, Property, Text


def as_text(node: Node | None) -> str | None:
    """Textual content of a text-like leaf, or None for anything else."""
    if isinstance(node, Text):
        return node.content
    return None


def get_property(expression: Expression, key: str) -> Node | None:
    """Value of the first `::key` property among the expression's direct children."""
    for child in expression.children:
        if isinstance(child, Property) and child.key == key:
            return child.value
    return None


def get_properties(expression: Expression) -> dict[str, list[Node]]:
    """All direct-child properties grouped by key, in source order."""
    properties: dict[str, list[Node]] = {}
    for child in expression.children:
        if isinstance(child, Property):
            properties.setdefault(child.key, []).append(child.value)
    return properties


def split_sections(nodes: Iterable[Node]) -> tuple[tuple[Node, ...], ...]:
    """Split nodes on Divider nodes, dropping empty sections."""
    sections: list[tuple[Node, ...]] = []
    section: list[Node] = []
    for node in nodes:
        if isinstance(node, Divider):
            if section:
                sections.append(tuple(section))
            section = []
            continue
        section.append(node)
    if section:
        sections.append(tuple(section))
    return tuple(sections)


def iter_nodes(root: Ast | Node) -> Iterator[Node]:
    """Depth-first pre-order walk over every node below (and including) root."""
    stack: list[Node] = list(reversed(root.nodes)) if isinstance(root, Ast) else [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Expression):
            stack.extend(reversed(node.children))
        elif isinstance(node, Property):
            stack.append(node.value)


__all__ = [
    "as_text",
    "get_properties",
    "get_property",
    "iter_nodes",
    "split_sections",
]
