"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ceph_repo.models import PlatformFamily, Track
from ceph_repo.models.repo import ResolvedConfig
from ceph_repo.output.themes import styled_family, styled_track


def resolved_table(resolved: ResolvedConfig, version: str = "") -> Table:
    title = f"Ceph {version} repositories" if version else "Ceph repositories"
    table = Table(title=title, expand=True, show_lines=False)
    table.add_column("Family", no_wrap=True)
    table.add_column("Track", no_wrap=True)
    table.add_column("Repository", style="cyan", overflow="fold")
    table.add_column("Key", style="dim", overflow="fold")

    for track, entry in resolved.tracks.items():
        table.add_row(
            styled_family(resolved.family),
            styled_track(track),
            entry.repository,
            entry.repository_key or "-",
        )
    return table


def families_table(families: dict[PlatformFamily, list[Track]]) -> Table:
    table = Table(title="Supported Platform Families", expand=False)
    table.add_column("Family", no_wrap=True)
    table.add_column("Tracks")
    for family, tracks in families.items():
        table.add_row(styled_family(family), ", ".join(styled_track(t) for t in tracks))
    return table


def attributes_panel(attributes: dict) -> Panel:
    import yaml
    text = yaml.dump(attributes, default_flow_style=False, sort_keys=False)
    syntax = Syntax(text, "yaml", theme="monokai", line_numbers=False)
    return Panel(syntax, title="[bold]Default Attributes[/bold]", border_style="green")
