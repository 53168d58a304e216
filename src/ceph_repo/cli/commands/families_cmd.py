"""cephrepo families - List supported platform families."""

from __future__ import annotations

import typer

from ceph_repo.cli.options import OutputOption
from ceph_repo.core.resolver import supported_tracks
from ceph_repo.models import PlatformFamily
from ceph_repo.output.formatters import output_families

app = typer.Typer()


@app.callback(invoke_without_command=True)
def families(output: str = OutputOption) -> None:
    """List the platform families with a repository layout and their tracks."""
    output_families({family: supported_tracks(family) for family in PlatformFamily}, output)
