"""Preprocessor: expands `#[{...}]` directive lines before lexing."""

from litx.preprocess.command import (
    COMMANDS,
    Command,
    CommandHandler,
    DirectiveContext,
    eval_include,
)
from litx.preprocess.files import (
    FileSystem,
    LocalFileSystem,
    MemoryFileSystem,
    normalize_path,
)
from litx.preprocess.options import PreprocessOptions
from litx.preprocess.preprocessor import (
    DirectiveResult,
    PreprocessResult,
    Preprocessor,
    as_directive,
    evaluate_directive,
    preprocess,
    split_lines,
)

__all__ = [
    "COMMANDS",
    "Command",
    "CommandHandler",
    "DirectiveContext",
    "DirectiveResult",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "PreprocessOptions",
    "PreprocessResult",
    "Preprocessor",
    "as_directive",
    "eval_include",
    "evaluate_directive",
    "normalize_path",
    "preprocess",
    "split_lines",
]
