"""Typed AST produced by the parser."""

from litx.ast.model import (
    Ast,
    Divider,
    EmptyLines,
    Expression,
    Node,
    Property,
    Text,
    Variable,
)
from litx.ast.views import (
    as_text,
    get_properties,
    get_property,
    iter_nodes,
    split_sections,
)

__all__ = [
    "Ast",
    "Divider",
    "EmptyLines",
    "Expression",
    "Node",
    "Property",
    "Text",
    "Variable",
    "as_text",
    "get_properties",
    "get_property",
    "iter_nodes",
    "split_sections",
]
