"""Preprocessor configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PreprocessOptions:
    """Feature flags for directive evaluation.

    By default included files are inserted as-is. `recursive_includes` runs
    the preprocessor over included text as well, relative to the included
    file's directory, up to `max_include_depth` nested files.
    """

    recursive_includes: bool = False
    max_include_depth: int = 16

    def __post_init__(self):
        if self.max_include_depth < 1:
            raise ValueError("max_include_depth must be at least 1")
