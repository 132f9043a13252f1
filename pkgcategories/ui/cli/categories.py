"""
The ``categories`` command — query the persisted category snapshot.

Stateless: the snapshot is read fresh on every invocation.  Dispatch is
on the first argument, so unrecognized flags fall through to the
default listing instead of failing:

    categories                  available categories
    categories --json|-j        snapshot document verbatim
    categories --packages|-p    categorized packages
    categories --package|-P N   one package's categories
    categories --help|-h        usage
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from pkgcategories.core.data import REGISTRY
from pkgcategories.core.errors import MissingArgument
from pkgcategories.core.models.snapshot import Snapshot
from pkgcategories.core.services.snapshot_ops import USAGE_TEXT

logger = logging.getLogger(__name__)

MODE_CATEGORIES = "categories"
MODE_JSON = "json"
MODE_PACKAGES = "packages"
MODE_PACKAGE = "package"
MODE_HELP = "help"

_FLAGS = {
    "--json": MODE_JSON,
    "-j": MODE_JSON,
    "--packages": MODE_PACKAGES,
    "-p": MODE_PACKAGES,
    "--package": MODE_PACKAGE,
    "-P": MODE_PACKAGE,
    "--help": MODE_HELP,
    "-h": MODE_HELP,
}


def parse_args(args: tuple[str, ...] | list[str]) -> tuple[str, str | None]:
    """Map raw arguments to ``(mode, package_name)``.

    Raises:
        MissingArgument: If ``--package``/``-P`` has no (or an empty) name.
    """
    if not args:
        return MODE_CATEGORIES, None

    flag = args[0]
    mode = _FLAGS.get(flag, MODE_CATEGORIES)
    if mode != MODE_PACKAGE:
        return mode, None

    name = args[1] if len(args) > 1 else ""
    if not name:
        raise MissingArgument(flag)
    return mode, name


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    },
)
@click.option(
    "--snapshot",
    "snapshot_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="PKGCAT_SNAPSHOT",
    default=None,
    help="Path to the snapshot JSON (default: from packages.yml).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to packages.yml (default: auto-detect).",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def categories(
    ctx: click.Context,
    snapshot_path: Path | None,
    config_path: Path | None,
    args: tuple[str, ...],
) -> None:
    """Show package categories from the build snapshot."""
    from pkgcategories.core.config.loader import resolve_snapshot_path
    from pkgcategories.core.observability.logging_config import setup_logging_from_env
    from pkgcategories.core.persistence.snapshot_file import (
        SnapshotError,
        load_snapshot,
        read_snapshot_text,
    )
    from pkgcategories.core.services.snapshot_ops import (
        format_categories,
        format_package,
        format_packages,
    )

    # Standalone entrypoint: nobody else configured logging
    if ctx.parent is None:
        setup_logging_from_env()

    try:
        mode, name = parse_args(args)
    except MissingArgument:
        click.echo("Error: Package name required", err=True)
        click.echo("Usage: categories --package PACKAGE_NAME", err=True)
        sys.exit(1)

    if mode == MODE_HELP:
        click.echo(USAGE_TEXT)
        return

    if config_path is None and ctx.obj:
        config_path = ctx.obj.get("config_path")
    path = resolve_snapshot_path(snapshot_path, config_path)

    try:
        if mode == MODE_JSON:
            click.echo(read_snapshot_text(path), nl=False)
            return

        snapshot = load_snapshot(path)
    except SnapshotError as e:
        if mode != MODE_CATEGORIES:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        # The listing is the registry itself; no build needed
        logger.info("Listing built-in registry: %s", e)
        snapshot = Snapshot(categories=REGISTRY.as_dict())

    if mode == MODE_PACKAGES:
        lines = format_packages(snapshot)
    elif mode == MODE_PACKAGE:
        assert name is not None  # guaranteed by parse_args
        lines = format_package(snapshot, name)
    else:
        lines = format_categories(snapshot)

    for line in lines:
        click.echo(line)


def main() -> None:
    categories()


if __name__ == "__main__":
    main()
