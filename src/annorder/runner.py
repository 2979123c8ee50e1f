"""Apply an OrderValidator to declaration records emitted by a walker."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Iterable, Iterator

from pydantic import ValidationError

from annorder.catalog import DeclarationKind, kind_for_site, parse_kind
from annorder.invariants import never
from annorder.reporting import Finding, format_message, invalid_record_finding
from annorder.schema import AnnotationDTO, DeclarationRecordDTO
from annorder.validator import OrderValidator


@dataclass(frozen=True)
class ObservedAnnotation:
    name: str
    line: int
    column: int


def simple_name(raw: str) -> str:
    """Reduce ``@pkg.Name(args)`` to ``Name``."""
    name = raw.strip().lstrip("@")
    name = name.split("(", 1)[0].strip()
    return name.rsplit(".", 1)[-1]


def observed_annotations(record: DeclarationRecordDTO) -> list[ObservedAnnotation]:
    observed: list[ObservedAnnotation] = []
    for entry in record.annotations:
        if isinstance(entry, AnnotationDTO):
            raw, line, column = entry.name, entry.line, entry.column
        else:
            raw, line, column = entry, None, None
        name = simple_name(raw)
        if not name:
            raise ValueError(f"blank annotation name {raw!r}")
        observed.append(
            ObservedAnnotation(
                name=name,
                line=line if line is not None else record.line,
                column=column if column is not None else record.column,
            )
        )
    return observed


def resolve_kind(record: DeclarationRecordDTO) -> tuple[DeclarationKind | None, str]:
    if (record.site is None) == (record.kind is None):
        raise ValueError("record needs exactly one of 'site' or 'kind'")
    if record.site is not None:
        return kind_for_site(record.site), record.site
    return parse_kind(record.kind), record.kind


def check_record(validator: OrderValidator, record: DeclarationRecordDTO) -> list[Finding]:
    annotations = observed_annotations(record)
    if not annotations:
        return []
    kind, label = resolve_kind(record)
    result = validator.check(kind, [item.name for item in annotations], label=label)
    findings: list[Finding] = []
    for diagnostic in result.diagnostics:
        if diagnostic.position is None:
            line, column = record.line, record.column
        elif 0 <= diagnostic.position < len(annotations):
            anchor = annotations[diagnostic.position]
            line, column = anchor.line, anchor.column
        else:
            never(
                "diagnostic position outside observed annotations",
                position=diagnostic.position,
                count=len(annotations),
            )
        findings.append(
            Finding(
                path=record.path,
                line=line,
                column=column,
                kind=diagnostic.kind.value,
                message=format_message(diagnostic),
                annotation=diagnostic.annotation,
                declaration=label,
            )
        )
    return findings


def iter_records(
    lines: Iterable[str], *, source: str
) -> Iterator[tuple[int, DeclarationRecordDTO | Finding]]:
    """Decode JSON Lines, yielding a finding in place of each bad line."""
    for line_no, text in enumerate(lines, start=1):
        if not text.strip():
            continue
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            yield line_no, invalid_record_finding(source, line_no, f"not JSON ({exc.msg})")
            continue
        if not isinstance(payload, dict):
            yield line_no, invalid_record_finding(source, line_no, "expected a JSON object")
            continue
        try:
            yield line_no, DeclarationRecordDTO.model_validate(payload)
        except ValidationError as exc:
            yield line_no, invalid_record_finding(
                source, line_no, f"{exc.error_count()} validation error(s)"
            )


def run_check(
    lines: Iterable[str],
    *,
    validator: OrderValidator,
    source: str = "<stdin>",
) -> list[Finding]:
    findings: list[Finding] = []
    for line_no, item in iter_records(lines, source=source):
        if isinstance(item, Finding):
            findings.append(item)
            continue
        try:
            findings.extend(check_record(validator, item))
        except ValueError as exc:
            findings.append(invalid_record_finding(source, line_no, str(exc)))
    return findings
