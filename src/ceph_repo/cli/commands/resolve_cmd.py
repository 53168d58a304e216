"""cephrepo resolve - Resolve repository defaults for a platform."""

from __future__ import annotations

from typing import Optional

import typer

from ceph_repo.cli.options import OutputOption, ReleaseFileOption
from ceph_repo.core.attributes import default_attributes
from ceph_repo.core.host_facts import detect_facts
from ceph_repo.core.release_info import HostReleaseInfoProvider, StaticReleaseInfoProvider
from ceph_repo.core.resolver import resolve as resolve_repositories
from ceph_repo.errors import CephRepoError
from ceph_repo.models import EnvironmentFacts, Track
from ceph_repo.models.repo import ResolvedConfig
from ceph_repo.output.formatters import output_attributes, output_resolved

app = typer.Typer()


@app.callback(invoke_without_command=True)
def resolve(
    version: str = typer.Option(..., "--version", help="Ceph release name or version, e.g. jewel"),
    family: Optional[str] = typer.Option(None, "--family", "-f", help="Platform family (default: detect from os-release)"),
    repo_url: Optional[str] = typer.Option(None, "--repo-url", help="Base download URL"),
    el_version: Optional[str] = typer.Option(None, "--el-version", help="EL release directory (rhel only)"),
    platform_version: Optional[str] = typer.Option(None, "--platform-version", help="Platform version (fedora only)"),
    codename: Optional[str] = typer.Option(None, "--codename", help="Distribution codename (debian dev track)"),
    suse_distribution: Optional[str] = typer.Option(None, "--suse-distribution", help="SUSE distribution name, skips the host read"),
    suse_version: Optional[str] = typer.Option(None, "--suse-version", help="SUSE version, skips the host read"),
    release_file: Optional[str] = ReleaseFileOption,
    track: Optional[str] = typer.Option(None, "--track", "-t", help="Only show one track: stable, testing, dev"),
    attributes: bool = typer.Option(False, "--attributes", help="Print the full default attribute tree"),
    output: str = OutputOption,
) -> None:
    """Resolve the package repositories and signing keys for a platform family."""
    overrides = {
        "repo_url": repo_url.rstrip("/") if repo_url else None,
        "el_version": el_version,
        "platform_version": platform_version,
        "codename": codename,
    }
    if family is None:
        facts = detect_facts(version, **overrides)
    else:
        facts = EnvironmentFacts(
            platform_family=family,
            version=version,
            **{k: v for k, v in overrides.items() if v is not None},
        )

    if (suse_distribution is None) != (suse_version is None):
        typer.echo("--suse-distribution and --suse-version must be given together.", err=True)
        raise typer.Exit(code=2)
    if suse_distribution is not None:
        release_info = StaticReleaseInfoProvider(suse_distribution, suse_version)
    else:
        release_info = HostReleaseInfoProvider(release_file)

    try:
        resolved = resolve_repositories(facts, release_info=release_info)
    except CephRepoError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if track is not None:
        try:
            wanted = Track(track)
        except ValueError:
            typer.echo(f"Unknown track '{track}'.", err=True)
            raise typer.Exit(code=2)
        if wanted not in resolved.tracks:
            typer.echo(f"Track '{track}' is not available on {resolved.family.value}.", err=True)
            raise typer.Exit(code=1)
        resolved = ResolvedConfig(family=resolved.family, tracks={wanted: resolved.tracks[wanted]})

    if attributes:
        output_attributes(default_attributes(facts, resolved), output)
        return
    output_resolved(resolved, output, version=facts.version)
