"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from litx.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostics(diagnostics: Iterable[Diagnostic]) -> str:
    """Render diagnostics one per line, hints indented below."""
    lines: list[str] = []
    for d in diagnostics:
        lines.append(str(d))
        if d.hint:
            lines.append(f"    hint: {d.hint}")
    return "\n".join(lines)
