"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from ceph_repo.models import PlatformFamily, Track
from ceph_repo.models.repo import ResolvedConfig

console = Console()


def _print_yaml(data: Any) -> None:
    # Wrapped lines would break long URLs out of their YAML scalars
    text = yaml.dump(data, default_flow_style=False, sort_keys=False)
    console.print(text, soft_wrap=True, markup=False, highlight=False)


def output_resolved(resolved: ResolvedConfig, fmt: str, version: str = "") -> None:
    if fmt == "json":
        console.print_json(json.dumps(resolved.to_dict(), indent=2))
    elif fmt == "yaml":
        _print_yaml(resolved.to_dict())
    else:
        from ceph_repo.output.tables import resolved_table
        console.print(resolved_table(resolved, version=version))


def output_attributes(attributes: dict[str, Any], fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(attributes, indent=2))
    elif fmt == "yaml":
        _print_yaml(attributes)
    else:
        from ceph_repo.output.tables import attributes_panel
        console.print(attributes_panel(attributes))


def output_families(families: dict[PlatformFamily, list[Track]], fmt: str) -> None:
    data = {family.value: [t.value for t in tracks] for family, tracks in families.items()}
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        _print_yaml(data)
    else:
        from ceph_repo.output.tables import families_table
        console.print(families_table(families))
