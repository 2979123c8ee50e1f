from __future__ import annotations

from datetime import date, datetime, time
import logging
from pathlib import Path
from typing import TypeAlias
import tomllib

from annorder.catalog import DeclarationKind, OrderingCatalog, default_catalog, parse_kind
from annorder.exceptions import CatalogConfigError
from annorder.validator import DEFAULT_EXEMPT_PREFIXES, OrderValidator

DEFAULT_CONFIG_NAME = "annorder.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

logger = logging.getLogger(__name__)


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("unable to read %s; using defaults: %s", path, exc)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("invalid TOML in %s; using defaults: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def catalog_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("catalog", {})
    return section if isinstance(section, dict) else {}


def unranked_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("unranked", {})
    return section if isinstance(section, dict) else {}


def _as_bool(value: TomlValue) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return False


def _config_kind(key: str, *, section: str) -> DeclarationKind:
    kind = parse_kind(key)
    if kind is None:
        raise CatalogConfigError(
            f"[{section}] names unknown declaration kind '{key}'",
            kind=key,
        )
    return kind


def catalog_tables(section: TomlTable | None) -> dict[DeclarationKind, tuple[str, ...]]:
    """Validate a ``[catalog]`` table into per-kind name tuples.

    Duplicate and blank names are left for the catalog itself to reject.
    """
    if not section:
        return {}
    tables: dict[DeclarationKind, tuple[str, ...]] = {}
    for key, value in section.items():
        kind = _config_kind(key, section="catalog")
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise CatalogConfigError(
                f"[catalog] {key} must be a list of annotation names",
                kind=str(kind),
            )
        tables[kind] = tuple(item.strip() for item in value)
    return tables


def exempt_prefix_map(section: TomlTable | None) -> dict[DeclarationKind, tuple[str, ...]]:
    if section is None or "exempt_prefixes" not in section:
        return dict(DEFAULT_EXEMPT_PREFIXES)
    raw = section.get("exempt_prefixes")
    if not isinstance(raw, dict):
        raise CatalogConfigError("[unranked] exempt_prefixes must be a table of kind = [prefixes]")
    prefixes: dict[DeclarationKind, tuple[str, ...]] = {}
    for key, value in raw.items():
        kind = _config_kind(key, section="unranked.exempt_prefixes")
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise CatalogConfigError(
                f"[unranked.exempt_prefixes] {key} must be a list of prefixes",
                kind=str(kind),
            )
        invalid = tuple(
            repr(item) for item in value if not isinstance(item, str) or not item.strip()
        )
        if invalid:
            raise CatalogConfigError(
                f"[unranked.exempt_prefixes] {key} holds blank or non-string prefixes",
                kind=str(kind),
                names=invalid,
            )
        prefixes[kind] = tuple(item.strip() for item in value)
    return prefixes


def report_unranked(section: TomlTable | None) -> bool:
    if section is None or "report" not in section:
        return True
    return _as_bool(section.get("report"))


def build_catalog(section: TomlTable | None) -> OrderingCatalog:
    tables = catalog_tables(section)
    if not tables:
        return default_catalog()
    return default_catalog().with_overrides(tables)


def build_validator(
    root: Path | None = None,
    config_path: Path | None = None,
    *,
    overrides: TomlTable | None = None,
) -> OrderValidator:
    """Build a validator from ``annorder.toml`` plus explicit overrides.

    Keys of ``overrides`` are ``[unranked]`` settings; None values fall back
    to the file.
    """
    catalog_section = catalog_defaults(root=root, config_path=config_path)
    unranked = merge_payload(
        overrides or {},
        unranked_defaults(root=root, config_path=config_path),
    )
    return OrderValidator(
        catalog=build_catalog(catalog_section),
        exempt_prefixes=exempt_prefix_map(unranked),
        report_unranked=report_unranked(unranked),
    )


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
