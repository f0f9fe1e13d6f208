"""Small CLI helpers."""

import importlib.metadata

import typer

from .output import print_plain

PACKAGE_NAME = "mm-grep"


def package_version(package_name: str) -> str:
    """Installed version of ``package_name``, or ``unknown`` when running from a source tree."""
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def show_version(ctx: typer.Context, value: bool) -> None:
    """Eager ``-V/--version`` callback: print ``mm-grep: <version>`` and stop."""
    if not value or ctx.resilient_parsing:
        return
    print_plain(f"{PACKAGE_NAME}: {package_version(PACKAGE_NAME)}")
    raise typer.Exit
