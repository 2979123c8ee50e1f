from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from annorder import default_orders
from annorder.catalog import (
    CanonicalOrder,
    DeclarationKind,
    DeclarationSite,
    OrderingCatalog,
    default_catalog,
    kind_for_site,
    parse_kind,
)
from annorder.exceptions import CatalogConfigError


def test_default_catalog_covers_five_kinds() -> None:
    catalog = default_catalog()
    assert catalog.kinds() == (
        DeclarationKind.CLASS,
        DeclarationKind.INTERFACE,
        DeclarationKind.METHOD,
        DeclarationKind.FIELD,
        DeclarationKind.PARAMETER,
    )
    assert DeclarationKind.ANNOTATION_TYPE not in catalog
    assert catalog.order_for(DeclarationKind.ANNOTATION_TYPE) is None
    assert catalog.recognized_names(DeclarationKind.ANNOTATION_TYPE) is None


def test_recognized_names_match_order() -> None:
    catalog = default_catalog()
    for kind in catalog.kinds():
        order = catalog.order_for(kind)
        assert order is not None
        assert catalog.recognized_names(kind) == frozenset(order)


def test_default_orders_keep_literal_sequence() -> None:
    catalog = default_catalog()
    assert catalog.order_for(DeclarationKind.METHOD) == default_orders.ORDER_FOR_METHOD
    assert catalog.order_for(DeclarationKind.METHOD)[:3] == (
        "Override",
        "Deprecated",
        "SuppressWarnings",
    )
    assert catalog.order_for(DeclarationKind.INTERFACE) == ("Repository", "FeignClient", "Slf4j")


def test_default_catalog_is_built_once() -> None:
    assert default_catalog() is default_catalog()


def test_canonical_order_rank_and_immutability() -> None:
    order = CanonicalOrder(kind=DeclarationKind.METHOD, names=("Override", "Deprecated", "Test"))
    assert order.rank("Override") == 0
    assert order.rank("Test") == 2
    assert order.rank("Missing") is None
    assert len(order) == 3
    with pytest.raises(FrozenInstanceError):
        order.names = ("Test",)  # type: ignore[misc]


def test_duplicate_name_fails_construction() -> None:
    with pytest.raises(CatalogConfigError) as excinfo:
        OrderingCatalog.from_tables(
            {DeclarationKind.FIELD: ["Id", "Column", "Id", "Column", "Id"]}
        )
    assert excinfo.value.kind == "field"
    assert excinfo.value.names == ("Id", "Column")


def test_blank_name_fails_construction() -> None:
    with pytest.raises(CatalogConfigError) as excinfo:
        CanonicalOrder(kind=DeclarationKind.CLASS, names=("Entity", "  "))
    assert excinfo.value.kind == "class"


def test_empty_order_fails_construction() -> None:
    with pytest.raises(CatalogConfigError, match="is empty") as excinfo:
        default_catalog().with_overrides({DeclarationKind.METHOD: []})
    assert excinfo.value.kind == "method"


def test_kind_configured_twice_fails_construction() -> None:
    with pytest.raises(CatalogConfigError):
        OrderingCatalog(
            [
                CanonicalOrder(kind=DeclarationKind.CLASS, names=("Entity",)),
                CanonicalOrder(kind=DeclarationKind.CLASS, names=("Table",)),
            ]
        )


def test_with_overrides_returns_new_catalog() -> None:
    catalog = default_catalog()
    replaced = catalog.with_overrides(
        {
            DeclarationKind.METHOD: ["Test", "Override"],
            DeclarationKind.ANNOTATION_TYPE: ["Retention", "Target"],
        }
    )
    assert replaced.order_for(DeclarationKind.METHOD) == ("Test", "Override")
    assert replaced.order_for(DeclarationKind.ANNOTATION_TYPE) == ("Retention", "Target")
    assert replaced.order_for(DeclarationKind.FIELD) == catalog.order_for(DeclarationKind.FIELD)
    assert catalog.order_for(DeclarationKind.METHOD) == default_orders.ORDER_FOR_METHOD
    assert DeclarationKind.ANNOTATION_TYPE not in catalog


def test_catalog_payload_is_plain_data() -> None:
    payload = default_catalog().as_payload()
    assert list(payload) == ["class", "interface", "method", "field", "parameter"]
    assert payload["parameter"][0] == "Valid"


@pytest.mark.parametrize(
    ("site", "kind"),
    [
        ("CLASS_DEF", DeclarationKind.CLASS),
        ("ENUM_DEF", DeclarationKind.CLASS),
        ("RECORD_DEF", None),
        ("INTERFACE_DEF", DeclarationKind.INTERFACE),
        ("METHOD_DEF", DeclarationKind.METHOD),
        ("CTOR_DEF", DeclarationKind.METHOD),
        ("VARIABLE_DEF", DeclarationKind.FIELD),
        ("PARAMETER_DEF", DeclarationKind.PARAMETER),
        ("ANNOTATION_DEF", DeclarationKind.ANNOTATION_TYPE),
        ("ENUM_CONSTANT_DEF", None),
        ("LAMBDA", None),
    ],
)
def test_kind_for_site(site: str, kind: DeclarationKind | None) -> None:
    assert kind_for_site(site) is kind


def test_parse_kind_normalizes_spelling() -> None:
    assert parse_kind("Method") is DeclarationKind.METHOD
    assert parse_kind("annotation-type") is DeclarationKind.ANNOTATION_TYPE
    assert parse_kind("constructor") is None
    assert DeclarationSite("CTOR_DEF") is DeclarationSite.CTOR_DEF
