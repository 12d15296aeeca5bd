"""Unified entrypoints running the whole front end in one pass."""

from __future__ import annotations

from pathlib import Path

from litx.diagnostics import Diagnostic, DiagnosticSink, collect_diagnostics
from litx.errors import IoFailure, LitxError
from litx.lexer import Lexer
from litx.parser import make_parser, parse_ast
from litx.pipeline.result import LitxParseResult, PipelineOptions
from litx.preprocess import FileSystem, LocalFileSystem, preprocess
from litx.sanitize import sanitize


def parse_document(
    text: str,
    working_directory: str | Path | None = None,
    *,
    options: PipelineOptions | None = None,
    file_system: FileSystem | None = None,
    sink: DiagnosticSink | None = None,
    source_path: str | Path | None = None,
) -> LitxParseResult:
    """Preprocess, parse and sanitize one document.

    Lex/parse failures are returned on the result, never raised.
    """
    resolved = options or PipelineOptions()
    preprocessed = preprocess(
        text,
        working_directory,
        options=resolved.preprocess,
        file_system=file_system,
        sink=sink,
        source_path=source_path,
    )

    parser_diagnostics: list[Diagnostic] = []
    try:
        parser = make_parser(Lexer(preprocessed.text), resolved.parser)
        parser_diagnostics = parser.diagnostics
        ast = parse_ast(parser)
    except LitxError as error:
        failure = error.to_diagnostic()
        _forward(sink, [*parser_diagnostics, failure])
        return LitxParseResult(
            source_text=text,
            preprocessed_text=preprocessed.text,
            error=error,
            diagnostics=collect_diagnostics(preprocessed.diagnostics, parser_diagnostics, [failure]),
        )

    _forward(sink, parser_diagnostics)
    return LitxParseResult(
        source_text=text,
        preprocessed_text=preprocessed.text,
        ast=sanitize(ast, recursive=resolved.sanitize_recursively),
        diagnostics=collect_diagnostics(preprocessed.diagnostics, parser_diagnostics),
    )


def parse_file(
    path: str | Path,
    *,
    options: PipelineOptions | None = None,
    file_system: FileSystem | None = None,
    sink: DiagnosticSink | None = None,
) -> LitxParseResult:
    """Parse a document file; includes resolve relative to its directory."""
    path = Path(path)
    file_system = file_system or LocalFileSystem()
    try:
        text = file_system.read_text(path)
    except (OSError, ValueError) as exc:
        error = IoFailure(f"cannot read `{path}`: {exc}")
        error.__cause__ = exc
        failure = error.to_diagnostic()
        _forward(sink, [failure])
        return LitxParseResult(source_text="", preprocessed_text="", error=error, diagnostics=[failure])

    return parse_document(
        text,
        path.parent,
        options=options,
        file_system=file_system,
        sink=sink,
        source_path=path,
    )


def _forward(sink: DiagnosticSink | None, diagnostics: list[Diagnostic]) -> None:
    if sink is None:
        return
    for diagnostic in diagnostics:
        sink(diagnostic)
