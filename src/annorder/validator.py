"""Annotation order validation for a single declaration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Sequence

from annorder import default_orders
from annorder.catalog import DeclarationKind, OrderingCatalog, default_catalog


class DiagnosticKind(StrEnum):
    KIND_UNSUPPORTED = "kind-unsupported"
    UNRANKED_ANNOTATION = "unranked-annotation"
    OUT_OF_ORDER = "out-of-order"


@dataclass(frozen=True)
class Diagnostic:
    """One finding for one declaration.

    ``position`` is the index of the annotation in the observed sequence; it
    is None for kind-unsupported findings, which anchor at the declaration.
    """

    kind: DiagnosticKind
    label: str
    annotation: str | None = None
    position: int | None = None


@dataclass(frozen=True)
class ValidationResult:
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def offending(self) -> Diagnostic | None:
        for diagnostic in self.diagnostics:
            if diagnostic.kind is DiagnosticKind.OUT_OF_ORDER:
                return diagnostic
        return None

    @property
    def unsupported(self) -> bool:
        return any(
            diagnostic.kind is DiagnosticKind.KIND_UNSUPPORTED
            for diagnostic in self.diagnostics
        )

    @property
    def unranked(self) -> tuple[Diagnostic, ...]:
        return tuple(
            diagnostic
            for diagnostic in self.diagnostics
            if diagnostic.kind is DiagnosticKind.UNRANKED_ANNOTATION
        )

    @property
    def valid(self) -> bool:
        return self.offending is None and not self.unsupported


VALID = ValidationResult()

DEFAULT_EXEMPT_PREFIXES: Mapping[DeclarationKind, tuple[str, ...]] = MappingProxyType(
    {DeclarationKind.CLASS: default_orders.CLASS_UNRANKED_EXEMPT_PREFIXES}
)


@dataclass(frozen=True)
class OrderValidator:
    """Checks observed annotation names against a catalog.

    Holds no per-declaration state; one instance may be shared by any number
    of concurrent callers.
    """

    catalog: OrderingCatalog = field(default_factory=default_catalog)
    exempt_prefixes: Mapping[DeclarationKind, tuple[str, ...]] = field(
        default_factory=lambda: DEFAULT_EXEMPT_PREFIXES
    )
    report_unranked: bool = True

    def check(
        self,
        kind: DeclarationKind | None,
        observed_names: Sequence[str],
        *,
        label: str | None = None,
    ) -> ValidationResult:
        resolved_label = label if label is not None else str(kind)
        if not observed_names:
            return VALID
        order = self.catalog.order_for(kind) if kind is not None else None
        recognized = self.catalog.recognized_names(kind) if kind is not None else None
        if order is None or recognized is None:
            return ValidationResult(
                (Diagnostic(kind=DiagnosticKind.KIND_UNSUPPORTED, label=resolved_label),)
            )

        diagnostics: list[Diagnostic] = []
        rank = 0
        for position, name in enumerate(observed_names):
            if name not in recognized:
                if self.report_unranked and not self._exempt(kind, name):
                    diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.UNRANKED_ANNOTATION,
                            label=resolved_label,
                            annotation=name,
                            position=position,
                        )
                    )
                continue
            # The cursor only moves forward; an annotation ranked before one
            # already accepted runs it off the end.
            while rank < len(order) and order[rank] != name:
                rank += 1
            if rank == len(order):
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.OUT_OF_ORDER,
                        label=resolved_label,
                        annotation=name,
                        position=position,
                    )
                )
                break
        return ValidationResult(tuple(diagnostics)) if diagnostics else VALID

    def _exempt(self, kind: DeclarationKind, name: str) -> bool:
        prefixes = self.exempt_prefixes.get(kind, ())
        return any(name.startswith(prefix) for prefix in prefixes)
