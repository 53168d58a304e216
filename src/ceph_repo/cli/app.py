"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

app = typer.Typer(
    name="cephrepo",
    help="Resolve Ceph package repository defaults for a host.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _register_commands() -> None:
    from ceph_repo.cli.commands.resolve_cmd import app as resolve_app
    from ceph_repo.cli.commands.families_cmd import app as families_app
    from ceph_repo.cli.commands.suse_version_cmd import app as suse_version_app

    app.add_typer(resolve_app, name="resolve", help="Resolve repositories for a platform")
    app.add_typer(families_app, name="families", help="List supported platform families")
    app.add_typer(suse_version_app, name="suse-version", help="Show the derived SUSE version tag")


_register_commands()


def main() -> None:
    app()
