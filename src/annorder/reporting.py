"""Diagnostic messages and report rendering."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Iterable, Mapping

from annorder.schema import CheckReportDTO, FindingDTO
from annorder.validator import Diagnostic, DiagnosticKind

INVALID_RECORD = "invalid-record"

MESSAGE_TEMPLATES: Mapping[str, str] = {
    DiagnosticKind.KIND_UNSUPPORTED: "Annotations on declarations of type '{label}' not supported.",
    DiagnosticKind.UNRANKED_ANNOTATION: "'{annotation}' annotation order not configured for {label}.",
    DiagnosticKind.OUT_OF_ORDER: "'{annotation}' annotation out of order.",
    INVALID_RECORD: "Invalid declaration record: {detail}",
}

# Kinds that fail a run; unranked annotations are informational.
FAILING_KINDS = frozenset(
    {
        DiagnosticKind.KIND_UNSUPPORTED.value,
        DiagnosticKind.OUT_OF_ORDER.value,
        INVALID_RECORD,
    }
)


def format_message(diagnostic: Diagnostic) -> str:
    return MESSAGE_TEMPLATES[diagnostic.kind].format(
        label=diagnostic.label,
        annotation=diagnostic.annotation or "",
    )


@dataclass(frozen=True)
class Finding:
    path: str
    line: int
    column: int
    kind: str
    message: str
    annotation: str | None = None
    declaration: str | None = None

    def render(self) -> str:
        return f"{self.path}:{self.line}:{self.column}: [{self.kind}] {self.message}"

    @property
    def failing(self) -> bool:
        return self.kind in FAILING_KINDS

    def to_dto(self) -> FindingDTO:
        return FindingDTO(
            path=self.path,
            line=self.line,
            column=self.column,
            kind=self.kind,
            message=self.message,
            annotation=self.annotation,
            declaration=self.declaration,
        )


def invalid_record_finding(path: str, line: int, detail: str) -> Finding:
    return Finding(
        path=path,
        line=line,
        column=1,
        kind=INVALID_RECORD,
        message=MESSAGE_TEMPLATES[INVALID_RECORD].format(detail=detail),
    )


def summarize(findings: Iterable[Finding]) -> dict[str, int]:
    counts = {kind.value: 0 for kind in DiagnosticKind}
    counts[INVALID_RECORD] = 0
    total = 0
    for finding in findings:
        counts[finding.kind] = counts.get(finding.kind, 0) + 1
        total += 1
    counts["total"] = total
    return counts


def render_text(findings: list[Finding]) -> str:
    lines = [finding.render() for finding in findings]
    counts = summarize(findings)
    lines.append(
        "Findings: "
        f"out-of-order={counts[DiagnosticKind.OUT_OF_ORDER.value]} "
        f"unranked={counts[DiagnosticKind.UNRANKED_ANNOTATION.value]} "
        f"unsupported={counts[DiagnosticKind.KIND_UNSUPPORTED.value]} "
        f"invalid={counts[INVALID_RECORD]}"
    )
    return "\n".join(lines)


def render_json(findings: list[Finding]) -> str:
    report = CheckReportDTO(
        findings=[finding.to_dto() for finding in findings],
        summary=summarize(findings),
    )
    return json.dumps(report.model_dump(), indent=2, sort_keys=True)
