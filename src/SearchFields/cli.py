"""SearchFields command-line entry.

Reads wire documents from JSON files, decodes them and either prints the
canonical re-encoding or reports per-field value counts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from SearchFields.config import DEFAULT_CONFIG_PATH, AppConfig, load_config_with_defaults
from SearchFields.core.fields import FieldSet
from SearchFields.core.rules import find_value_count_violations
from SearchFields.utils.log import configure_logging, log
from SearchFields.wire import decode, encode


@click.group(help="SearchFields: inspect and normalize search field documents.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file, merged over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Optional path to a YAML config override.
    """
    ctx.obj = load_config_with_defaults(config_path or DEFAULT_CONFIG_PATH)


@cli.command("normalize")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indent width.")
@click.pass_context
def normalize_cmd(ctx: click.Context, path: Path, indent: int) -> None:
    """Decode a wire document and print its canonical encoding.

    Raises:
        click.Abort: When the document cannot be read or decoded.
    """
    cfg: AppConfig = ctx.obj
    _setup_logging(ctx, cfg)
    try:
        fields = _load_fields(path, cfg)
        payload = encode(fields, config=cfg.codec)
    except Exception as e:  # noqa: BLE001 - cli boundary
        log.error("Normalize failed: %s", e)
        raise click.Abort from e
    click.echo(json.dumps(payload, ensure_ascii=False, indent=indent))


@cli.command("check")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.pass_context
def check_cmd(ctx: click.Context, path: Path) -> None:
    """Print value counts per field and enforce single number/timestamp values.

    Raises:
        click.Abort: When decoding fails or a field breaks the value count rule.
    """
    cfg: AppConfig = ctx.obj
    _setup_logging(ctx, cfg)
    try:
        fields = _load_fields(path, cfg)
    except Exception as e:  # noqa: BLE001 - cli boundary
        log.error("Check failed: %s", e)
        raise click.Abort from e

    for name in fields:
        values = fields.values_of(name)
        kinds = ", ".join(kind.value for kind in values.types) or "-"
        click.echo(f"{name}: {len(values)} value(s) [{kinds}]")

    violations = find_value_count_violations(fields)
    for name, kind in violations:
        log.error("Field %r cannot have multiple %s values", name, kind.value)
    if violations:
        raise click.Abort
    click.echo(f"OK: {len(fields)} field(s)")


def _setup_logging(ctx: click.Context, cfg: AppConfig) -> None:
    configure_logging(
        level=cfg.runtime.level,
        action=ctx.command.name,
        log_to_file=cfg.runtime.to_file,
        log_dir=cfg.runtime.dir,
    )


def _load_fields(path: Path, cfg: AppConfig) -> FieldSet:
    raw: Any = json.loads(path.read_text(encoding="utf-8"))
    fields = decode(raw, config=cfg.codec)
    log.debug("Decoded %d field(s) from %s", len(fields), path)
    return fields


def main() -> None:
    """Run SearchFields CLI."""
    cli()
