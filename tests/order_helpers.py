from __future__ import annotations

from annorder.validator import Diagnostic, DiagnosticKind, ValidationResult


def kinds_and_names(result: ValidationResult) -> list[tuple[DiagnosticKind, str | None]]:
    return [(diagnostic.kind, diagnostic.annotation) for diagnostic in result.diagnostics]


def positions(diagnostics: tuple[Diagnostic, ...]) -> list[int | None]:
    return [diagnostic.position for diagnostic in diagnostics]
