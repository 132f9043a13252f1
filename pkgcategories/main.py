"""
pkgcategories — build/maintenance CLI entrypoint.

Usage:
    pkgcategories --help
    pkgcategories build
    pkgcategories check
    pkgcategories list
    pkgcategories query --packages
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pkgcategories import __version__
from pkgcategories.core.observability.logging_config import (
    ENV_LOG_LEVEL,
    setup_logging_from_env,
)


@click.group()
@click.version_option(version=__version__, prog_name="pkgcategories")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to packages.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Package categories — annotate, snapshot, and query package metadata."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")

    setup_logging_from_env(level)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the snapshot (default: from packages.yml).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--no-save", is_flag=True, help="Build but don't write the snapshot.")
@click.pass_context
def build(ctx: click.Context, output: Path | None, as_json: bool, no_save: bool) -> None:
    """Build the category snapshot from packages.yml."""
    from pkgcategories.core.use_cases.build import run_build

    result = run_build(
        config_path=ctx.obj.get("config_path"),
        output=output,
        save=not no_save,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    snapshot = result.snapshot
    assert snapshot is not None  # guaranteed after error check above
    if ctx.obj.get("quiet"):
        return

    click.secho("📦 Snapshot built", fg="cyan", bold=True)
    click.echo(f"   Categories: {len(snapshot.categories)}")
    click.echo(
        f"   Packages: {len(snapshot.packages)} "
        f"({len(snapshot.categorized_packages())} categorized)"
    )
    if result.saved:
        click.secho(f"   💾 Saved to {result.snapshot_path}", fg="cyan")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate packages.yml without building."""
    from pkgcategories.core.use_cases.manifest_check import check_manifest

    result = check_manifest(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.manifest is not None  # guaranteed when valid
        click.secho("✅ Manifest is valid", fg="green", bold=True)
        click.echo(f"   Packages: {len(result.manifest.packages)}")
        click.echo(f"   Categorized: {len(result.manifest.categorized())}")
    else:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


@cli.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def list_categories(as_json: bool) -> None:
    """List the available categories."""
    from pkgcategories.core.data import REGISTRY

    if as_json:
        click.echo(json.dumps(REGISTRY.as_dict(), indent=2))
        return

    for category, display in REGISTRY.all_entries():
        click.echo(f"- {category}: {display}")


# ── Register the query command ──────────────────────────────────

from pkgcategories.ui.cli.categories import categories  # noqa: E402

cli.add_command(categories, name="query")


if __name__ == "__main__":
    cli()
