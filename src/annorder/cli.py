from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import json
import sys

import typer

from annorder.catalog import parse_kind
from annorder.config import build_validator
from annorder.exceptions import CatalogConfigError
from annorder.reporting import render_json, render_text
from annorder.runner import run_check
from annorder.schema import CatalogDTO
from annorder.validator import OrderValidator

app = typer.Typer(add_completion=False)

_STDIN_ALIAS = "-"
_OUTPUT_FORMATS = ("text", "json")


def _load_validator(
    *,
    root: Path,
    config: Optional[Path],
    report_unranked: Optional[bool],
    exempt_prefix: Optional[List[str]],
) -> OrderValidator:
    overrides: dict[str, object] = {"report": report_unranked}
    if exempt_prefix:
        overrides["exempt_prefixes"] = _parse_exempt_prefixes(exempt_prefix)
    try:
        return build_validator(root=root, config_path=config, overrides=overrides)
    except CatalogConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _parse_exempt_prefixes(entries: List[str]) -> dict[str, list[str]]:
    prefixes: dict[str, list[str]] = {}
    for entry in entries:
        kind, sep, prefix = entry.partition(":")
        if not sep or not kind.strip() or not prefix.strip():
            raise typer.BadParameter(
                f"expected 'kind:Prefix', got {entry!r}", param_hint="--exempt-prefix"
            )
        parsed = parse_kind(kind)
        if parsed is None:
            raise typer.BadParameter(
                f"unknown declaration kind {kind.strip()!r} in {entry!r}",
                param_hint="--exempt-prefix",
            )
        prefixes.setdefault(str(parsed), []).append(prefix.strip())
    return prefixes


def _read_lines(input_path: str) -> tuple[list[str], str]:
    if input_path == _STDIN_ALIAS:
        return sys.stdin.read().splitlines(), "<stdin>"
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"unable to read {path}: {exc}", param_hint="--input") from exc
    return text.splitlines(), str(path)


@app.command("check")
def check(
    input_path: str = typer.Option(
        _STDIN_ALIAS,
        "--input",
        help="Declaration records as JSON Lines, or '-' for stdin.",
    ),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to annorder.toml."),
    output_format: str = typer.Option("text", "--format", help="Output format (text|json)."),
    report_unranked: Optional[bool] = typer.Option(
        None, "--report-unranked/--no-report-unranked"
    ),
    exempt_prefix: Optional[List[str]] = typer.Option(
        None,
        "--exempt-prefix",
        help="Unranked exemption in 'kind:Prefix' form (repeatable); replaces configured prefixes.",
    ),
    fail_on_violations: bool = typer.Option(
        True, "--fail-on-violations/--no-fail-on-violations"
    ),
) -> None:
    """Check annotation order for declarations emitted by a walker."""
    if output_format not in _OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"expected one of {', '.join(_OUTPUT_FORMATS)}", param_hint="--format"
        )
    validator = _load_validator(
        root=root,
        config=config,
        report_unranked=report_unranked,
        exempt_prefix=exempt_prefix,
    )
    lines, source = _read_lines(input_path)
    findings = run_check(lines, validator=validator, source=source)
    if output_format == "json":
        typer.echo(render_json(findings))
    else:
        typer.echo(render_text(findings))
    if fail_on_violations and any(finding.failing for finding in findings):
        raise typer.Exit(code=1)


@app.command("catalog")
def catalog(
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to annorder.toml."),
) -> None:
    """Print the effective canonical orders as JSON."""
    validator = _load_validator(
        root=root,
        config=config,
        report_unranked=None,
        exempt_prefix=None,
    )
    payload = CatalogDTO(
        orders=validator.catalog.as_payload(),
        exempt_prefixes={
            str(kind): list(prefixes)
            for kind, prefixes in validator.exempt_prefixes.items()
        },
        report_unranked=validator.report_unranked,
    )
    typer.echo(json.dumps(payload.model_dump(), indent=2, sort_keys=True))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
