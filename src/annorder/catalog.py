"""Per-declaration-kind canonical annotation orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from annorder import default_orders
from annorder.exceptions import CatalogConfigError


class DeclarationKind(StrEnum):
    CLASS = "class"
    INTERFACE = "interface"
    METHOD = "method"
    FIELD = "field"
    PARAMETER = "parameter"
    ANNOTATION_TYPE = "annotation_type"


class DeclarationSite(StrEnum):
    """Syntactic token labels a declaration walker reports."""

    CLASS_DEF = "CLASS_DEF"
    ENUM_DEF = "ENUM_DEF"
    RECORD_DEF = "RECORD_DEF"
    INTERFACE_DEF = "INTERFACE_DEF"
    ANNOTATION_DEF = "ANNOTATION_DEF"
    METHOD_DEF = "METHOD_DEF"
    CTOR_DEF = "CTOR_DEF"
    VARIABLE_DEF = "VARIABLE_DEF"
    ENUM_CONSTANT_DEF = "ENUM_CONSTANT_DEF"
    PARAMETER_DEF = "PARAMETER_DEF"


# Enum declarations share the class ordering; constructors share
# the method ordering. Sites mapped to None have no kind at all.
SITE_KINDS: Mapping[DeclarationSite, DeclarationKind | None] = MappingProxyType(
    {
        DeclarationSite.CLASS_DEF: DeclarationKind.CLASS,
        DeclarationSite.ENUM_DEF: DeclarationKind.CLASS,
        DeclarationSite.RECORD_DEF: None,
        DeclarationSite.INTERFACE_DEF: DeclarationKind.INTERFACE,
        DeclarationSite.ANNOTATION_DEF: DeclarationKind.ANNOTATION_TYPE,
        DeclarationSite.METHOD_DEF: DeclarationKind.METHOD,
        DeclarationSite.CTOR_DEF: DeclarationKind.METHOD,
        DeclarationSite.VARIABLE_DEF: DeclarationKind.FIELD,
        DeclarationSite.ENUM_CONSTANT_DEF: None,
        DeclarationSite.PARAMETER_DEF: DeclarationKind.PARAMETER,
    }
)


def kind_for_site(site: str) -> DeclarationKind | None:
    try:
        return SITE_KINDS[DeclarationSite(site)]
    except ValueError:
        return None


def parse_kind(value: str) -> DeclarationKind | None:
    normalized = value.strip().lower().replace("-", "_")
    try:
        return DeclarationKind(normalized)
    except ValueError:
        return None


@dataclass(frozen=True)
class CanonicalOrder:
    """One kind's ranked annotation names.

    ``recognized`` is derived from ``names`` and is never passed in.
    """

    kind: DeclarationKind
    names: tuple[str, ...]
    recognized: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.names:
            raise CatalogConfigError(
                f"canonical order for '{self.kind}' is empty",
                kind=str(self.kind),
            )
        blank =tuple(name for name in self.names if not isinstance(name, str) or not name.strip())
        if blank:
            raise CatalogConfigError(
                f"canonical order for '{self.kind}' contains blank annotation names",
                kind=str(self.kind),
                names=tuple(repr(name) for name in blank),
            )
        seen: set[str] = set()
        duplicates: list[str] = []
        for name in self.names:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise CatalogConfigError(
                f"canonical order for '{self.kind}' lists annotations more than once: "
                + ", ".join(duplicates),
                kind=str(self.kind),
                names=tuple(duplicates),
            )
        object.__setattr__(self, "recognized", frozenset(self.names))

    def rank(self, name: str) -> int | None:
        if name not in self.recognized:
            return None
        return self.names.index(name)

    def __len__(self) -> int:
        return len(self.names)


class OrderingCatalog:
    """Read-only mapping of declaration kind to canonical order.

    Kinds without an entry are unsupported: both lookups return None for
    them and callers report the declaration instead of ranking it.
    """

    __slots__ = ("_orders",)

    def __init__(self, orders: Iterable[CanonicalOrder]) -> None:
        by_kind: dict[DeclarationKind, CanonicalOrder] = {}
        for order in orders:
            if order.kind in by_kind:
                raise CatalogConfigError(
                    f"canonical order for '{order.kind}' configured more than once",
                    kind=str(order.kind),
                )
            by_kind[order.kind] = order
        ordered = {kind: by_kind[kind] for kind in DeclarationKind if kind in by_kind}
        self._orders: Mapping[DeclarationKind, CanonicalOrder] = MappingProxyType(ordered)

    @classmethod
    def from_tables(
        cls, tables: Mapping[DeclarationKind, Iterable[str]]
    ) -> OrderingCatalog:
        return cls(
            CanonicalOrder(kind=DeclarationKind(kind), names=tuple(names))
            for kind, names in tables.items()
        )

    def entry(self, kind: DeclarationKind) -> CanonicalOrder | None:
        return self._orders.get(kind)

    def order_for(self, kind: DeclarationKind) -> tuple[str, ...] | None:
        entry = self._orders.get(kind)
        return entry.names if entry is not None else None

    def recognized_names(self, kind: DeclarationKind) -> frozenset[str] | None:
        entry = self._orders.get(kind)
        return entry.recognized if entry is not None else None

    def kinds(self) -> tuple[DeclarationKind, ...]:
        return tuple(self._orders)

    def with_overrides(
        self, tables: Mapping[DeclarationKind, Iterable[str]]
    ) -> OrderingCatalog:
        """Return a new catalog where each kind in ``tables`` is replaced."""
        replaced = {kind: entry.names for kind, entry in self._orders.items()}
        for kind, names in tables.items():
            replaced[DeclarationKind(kind)] = tuple(names)
        return OrderingCatalog.from_tables(replaced)

    def as_payload(self) -> dict[str, list[str]]:
        return {str(kind): list(entry.names) for kind, entry in self._orders.items()}

    def __contains__(self, kind: object) -> bool:
        return kind in self._orders

    def __repr__(self) -> str:
        sizes = ", ".join(f"{kind}={len(entry)}" for kind, entry in self._orders.items())
        return f"OrderingCatalog({sizes})"


DEFAULT_TABLES: Mapping[DeclarationKind, tuple[str, ...]] = MappingProxyType(
    {
        DeclarationKind.CLASS: default_orders.ORDER_FOR_CLASS,
        DeclarationKind.INTERFACE: default_orders.ORDER_FOR_INTERFACE,
        DeclarationKind.METHOD: default_orders.ORDER_FOR_METHOD,
        DeclarationKind.FIELD: default_orders.ORDER_FOR_FIELD,
        DeclarationKind.PARAMETER: default_orders.ORDER_FOR_PARAMETER,
    }
)


@lru_cache(maxsize=1)
def default_catalog() -> OrderingCatalog:
    return OrderingCatalog.from_tables(DEFAULT_TABLES)
