"""Preprocessor commands: construction from a directive expression and evaluation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from litx.ast import Expression, Node, Property, Text, as_text, split_sections
from litx.errors import EvaluationFailure, IoFailure, ParseFailure
from litx.preprocess.files import FileSystem, LocalFileSystem, normalize_path
from litx.preprocess.options import PreprocessOptions
from litx.text import TextSpan


@dataclass(frozen=True, slots=True)
class DirectiveContext:
    """Everything a command may touch while evaluating."""

    working_directory: Path | None = None
    file_system: FileSystem = field(default_factory=LocalFileSystem)
    options: PreprocessOptions = field(default_factory=PreprocessOptions)
    include_stack: tuple[Path, ...] = ()
    # Set when included text should itself be preprocessed.
    expand: Callable[[str, Path], str] | None = None


@dataclass(frozen=True, slots=True)
class Command:
    """A directive split into its name and Divider-separated argument sections."""

    name: str
    sections: tuple[tuple[Node, ...], ...]
    span: TextSpan

    @staticmethod
    def from_node(node: Node) -> "Command":
        if not isinstance(node, Expression):
            raise ParseFailure("a directive must be a `[{ ... }]` expression", span=node.span)
        if not node.children or not isinstance(node.children[0], Text):
            raise ParseFailure("a directive must start with a command name", span=node.span)
        return Command(
            name=node.children[0].content,
            sections=split_sections(node.children[1:]),
            span=node.span,
        )

    def evaluate(self, context: DirectiveContext) -> str:
        handler = COMMANDS.get(self.name)
        if handler is None:
            raise EvaluationFailure(f"unknown command `{self.name}`", span=self.span)
        return handler(self, context)


type CommandHandler = Callable[[Command, DirectiveContext], str]


def eval_include(command: Command, context: DirectiveContext) -> str:
    """`#[{include <path>}]` / `#[{include ::path <path>}]`: the file's trimmed contents."""
    if context.working_directory is None:
        raise EvaluationFailure("`include` needs a working directory", span=command.span)

    relative_path = _include_argument(command)
    include_path = context.working_directory / relative_path

    if context.expand is not None:
        normalized = normalize_path(include_path)
        if normalized in context.include_stack:
            raise EvaluationFailure(f"include cycle through `{relative_path}`", span=command.span)
        if len(context.include_stack) >= context.options.max_include_depth:
            raise EvaluationFailure(
                f"includes nested deeper than {context.options.max_include_depth} files",
                span=command.span,
            )

    try:
        contents = context.file_system.read_text(include_path)
    except (OSError, ValueError) as exc:
        raise IoFailure(f"cannot read `{include_path}`: {exc}", span=command.span) from exc

    if context.expand is not None:
        contents = context.expand(contents, include_path)
    return contents.strip()


def _include_argument(command: Command) -> str:
    if len(command.sections) != 1 or len(command.sections[0]) != 1:
        raise EvaluationFailure("`include` takes exactly one argument", span=command.span)

    argument = command.sections[0][0]
    if isinstance(argument, Property) and argument.key == "path":
        argument = argument.value

    path = as_text(argument)
    if path is None:
        raise EvaluationFailure("`include` argument must be text or `::path <text>`", span=command.span)
    return path


COMMANDS: Final[dict[str, CommandHandler]] = {
    "include": eval_include,
}


__all__ = [
    "COMMANDS",
    "Command",
    "CommandHandler",
    "DirectiveContext",
    "eval_include",
]
