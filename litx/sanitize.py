"""Post-parse normalization: merge adjacent text nodes."""

from __future__ import annotations

from collections.abc import Iterable

from litx.ast import Ast, Expression, Node, Property, Text


def sanitize(ast: Ast, *, recursive: bool = False) -> Ast:
    """Return a new Ast with consecutive Text nodes coalesced.

    The Ast's own node list and the direct children of each top-level
    Expression are always coalesced. With `recursive=True` every nested
    Expression (including property values) is coalesced too.
    """
    return Ast(tuple(_sanitize_top_level(node, recursive) for node in coalesce_text(ast.nodes)))


def coalesce_text(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Merge runs of Text nodes into one, joined by a single space."""
    result: list[Node] = []
    buffer: Text | None = None
    for node in nodes:
        if isinstance(node, Text):
            if buffer is None:
                buffer = node
            else:
                buffer = Text(buffer.span.merge(node.span), f"{buffer.content} {node.content}")
            continue

        if buffer is not None:
            result.append(buffer)
            buffer = None
        result.append(node)

    if buffer is not None:
        result.append(buffer)
    return tuple(result)


def _sanitize_top_level(node: Node, recursive: bool) -> Node:
    if recursive:
        return _sanitize_nested(node)
    if isinstance(node, Expression):
        return Expression(node.span, coalesce_text(node.children))
    return node


def _sanitize_nested(node: Node) -> Node:
    if isinstance(node, Expression):
        children = coalesce_text(node.children)
        return Expression(node.span, tuple(_sanitize_nested(child) for child in children))
    if isinstance(node, Property):
        return Property(node.span, node.key, _sanitize_nested(node.value))
    return node


__all__ = ["coalesce_text", "sanitize"]
