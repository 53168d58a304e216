"""Shared CLI options."""

from __future__ import annotations

import typer

from ceph_repo.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
ReleaseFileOption = typer.Option(None, "--release-file", help="SUSE release file (default: /etc/SuSE-release)")
