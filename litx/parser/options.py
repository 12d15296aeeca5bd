"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling recovery behavior.

    Permissive is the default: a stray `}]` at the top level ends the document
    with a warning instead of failing the parse.
    """

    mode: ParseMode = ParseMode.PERMISSIVE
    allow_stray_close: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, allow_stray_close=False)

        return ParserOptions(mode=mode, allow_stray_close=True)
