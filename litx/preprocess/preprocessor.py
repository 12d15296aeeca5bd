"""Line-oriented preprocessor that expands single-line directives before lexing.

A directive is a line of the shape `#[{name args || more args}]`. It must fit
on one line, but that line can be arbitrarily long.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from litx.diagnostics import PREPROCESS_DIRECTIVE_FAILED, Diagnostic, DiagnosticSink
from litx.errors import LitxError
from litx.lexer import Lexer
from litx.parser import parse_node
from litx.preprocess.command import Command, DirectiveContext
from litx.preprocess.files import FileSystem, LocalFileSystem, normalize_path
from litx.preprocess.options import PreprocessOptions
from litx.text import TextSpan, byte_len

DIRECTIVE_PREFIX = "#[{"
DIRECTIVE_SUFFIX = "}]"


@dataclass(frozen=True, slots=True)
class DirectiveResult:
    """Outcome of one directive: its output, or the failure that replaced it."""

    output: str | None = None
    error: LitxError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class PreprocessResult:
    text: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.diagnostics)


def as_directive(line: str) -> str | None:
    """Return the directive expression (without `#`) if the line is one."""
    trimmed = line.strip()
    if len(trimmed) >= 5 and trimmed.startswith(DIRECTIVE_PREFIX) and trimmed.endswith(DIRECTIVE_SUFFIX):
        return trimmed[1:]
    return None


def evaluate_directive(expression: str, context: DirectiveContext) -> DirectiveResult:
    """Lex, parse and evaluate one directive expression; failures are returned, not raised."""
    try:
        node = parse_node(Lexer(expression))
        command = Command.from_node(node)
        return DirectiveResult(output=command.evaluate(context))
    except LitxError as error:
        return DirectiveResult(error=error)


def split_lines(text: str) -> Iterator[tuple[str, TextSpan]]:
    """Yield each line without its line break, plus the line's span in `text`.

    A trailing `\\r` is dropped; a final line break does not start a new line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    offset = 0
    for raw in lines:
        line = raw[:-1] if raw.endswith("\r") else raw
        yield line, TextSpan.at(offset, byte_len(line))
        offset += byte_len(raw) + 1


class Preprocessor:
    """Expands directives line by line; a failing directive never stops the run.

    Failures become `PREPROCESS_DIRECTIVE_FAILED` warnings (also handed to
    `sink` when given) and the directive line is kept verbatim.
    """

    def __init__(
        self,
        working_directory: str | Path | None = None,
        *,
        options: PreprocessOptions | None = None,
        file_system: FileSystem | None = None,
        sink: DiagnosticSink | None = None,
        source_path: str | Path | None = None,
        include_stack: tuple[Path, ...] = (),
    ) -> None:
        self._options = options or PreprocessOptions()
        self._file_system = file_system or LocalFileSystem()
        self._sink = sink
        self._source_path = Path(source_path) if source_path is not None else None
        if self._source_path is not None:
            include_stack = (*include_stack, normalize_path(self._source_path))
        self._context = DirectiveContext(
            working_directory=Path(working_directory) if working_directory is not None else None,
            file_system=self._file_system,
            options=self._options,
            include_stack=include_stack,
            expand=self._expand_included if self._options.recursive_includes else None,
        )
        self._diagnostics: list[Diagnostic] = []

    @property
    def options(self) -> PreprocessOptions:
        return self._options

    @property
    def context(self) -> DirectiveContext:
        return self._context

    def run(self, text: str) -> PreprocessResult:
        self._diagnostics = []
        buffer: list[str] = []
        for line_no, (line, span) in enumerate(split_lines(text), start=1):
            expression = as_directive(line)
            if expression is None:
                buffer.append(line)
            else:
                result = evaluate_directive(expression, self._context)
                if result.ok:
                    buffer.append(result.output or "")
                else:
                    self._warn(line_no, span, result.error)
                    buffer.append(line)
            # Every input line ends with a line break in the output.
            buffer.append("\n")
        return PreprocessResult(text="".join(buffer), diagnostics=list(self._diagnostics))

    def _warn(self, line_no: int, span: TextSpan, error: LitxError | None) -> None:
        where = f"line {line_no}"
        if self._source_path is not None:
            where = f"{where} of {self._source_path}"
        diagnostic = Diagnostic.from_spec(
            PREPROCESS_DIRECTIVE_FAILED,
            span,
            message=f"{PREPROCESS_DIRECTIVE_FAILED.message} at {where}: {error}",
        )
        self._diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink(diagnostic)

    def _expand_included(self, text: str, include_path: Path) -> str:
        nested = Preprocessor(
            include_path.parent,
            options=self._options,
            file_system=self._file_system,
            sink=self._sink,
            source_path=include_path,
            include_stack=self._context.include_stack,
        )
        result = nested.run(text)
        self._diagnostics.extend(result.diagnostics)
        return result.text


def preprocess(
    text: str,
    working_directory: str | Path | None = None,
    *,
    options: PreprocessOptions | None = None,
    file_system: FileSystem | None = None,
    sink: DiagnosticSink | None = None,
    source_path: str | Path | None = None,
) -> PreprocessResult:
    preprocessor = Preprocessor(
        working_directory,
        options=options,
        file_system=file_system,
        sink=sink,
        source_path=source_path,
    )
    return preprocessor.run(text)
