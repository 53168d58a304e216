"""cephrepo suse-version - Show the SUSE version tag derived from the host."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from ceph_repo.cli.options import ReleaseFileOption
from ceph_repo.core.release_info import HostReleaseInfoProvider, suse_version
from ceph_repo.errors import ReleaseInfoError

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def show_suse_version(release_file: Optional[str] = ReleaseFileOption) -> None:
    """Print the distribution/version tag used in SUSE repository paths."""
    provider = HostReleaseInfoProvider(release_file)
    try:
        tag = suse_version(provider)
    except ReleaseInfoError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    console.print(tag, highlight=False)
