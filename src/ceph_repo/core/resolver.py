"""Per-platform Ceph package repository defaults."""

from __future__ import annotations

import logging

from ceph_repo.core.release_info import HostReleaseInfoProvider, ReleaseInfoProvider, suse_version
from ceph_repo.models import EnvironmentFacts, PlatformFamily, Track
from ceph_repo.models.repo import RepositoryEntry, ResolvedConfig

logger = logging.getLogger(__name__)

GITBUILDER_URL = "http://gitbuilder.ceph.com"
RELEASE_KEY = "https://ceph.com/git/?p=ceph.git;a=blob_plain;f=keys/release.asc"
AUTOBUILD_KEY = "https://ceph.com/git/?p=ceph.git;a=blob_plain;f=keys/autobuild.asc"
LOCAL_RELEASE_KEY = "file:///etc/pki/rpm-gpg/release.asc"


def resolve(
    facts: EnvironmentFacts,
    release_info: ReleaseInfoProvider | None = None,
) -> ResolvedConfig:
    """Build the repository tracks for the host's platform family.

    Raises UnsupportedPlatformError for families with no repository layout.
    ``release_info`` is consulted on SUSE only; the host release file is read
    when it is not given.
    """
    family = PlatformFamily.parse(facts.platform_family)
    logger.debug("Resolving %s repositories for ceph %s", family.value, facts.version)

    if family is PlatformFamily.DEBIAN:
        tracks = _debian_tracks(facts)
    elif family is PlatformFamily.RHEL:
        tracks = _rhel_tracks(facts)
    elif family is PlatformFamily.FEDORA:
        tracks = _fedora_tracks(facts)
    else:
        tracks = _suse_tracks(facts, release_info or HostReleaseInfoProvider())

    return ResolvedConfig(family=family, tracks=tracks)


def _debian_tracks(facts: EnvironmentFacts) -> dict[Track, RepositoryEntry]:
    if not facts.codename:
        logger.warning("No distribution codename; the debian dev repository URL will be incomplete")
    return {
        Track.STABLE: RepositoryEntry(
            repository=f"{facts.repo_url}/debian-{facts.version}/",
            repository_key=RELEASE_KEY,
        ),
        Track.TESTING: RepositoryEntry(
            repository=f"{facts.repo_url}/debian-testing/",
            repository_key=RELEASE_KEY,
        ),
        Track.DEV: RepositoryEntry(
            repository=(
                f"{GITBUILDER_URL}/ceph-deb-{facts.codename}-x86_64-basic/ref/{facts.version}"
            ),
            repository_key=AUTOBUILD_KEY,
        ),
    }


def _rhel_tracks(facts: EnvironmentFacts) -> dict[Track, RepositoryEntry]:
    return {
        Track.STABLE: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-{facts.version}/{facts.el_version}/x86_64/",
            repository_key=LOCAL_RELEASE_KEY,
        ),
        Track.TESTING: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-testing/{facts.el_version}/x86_64/",
            repository_key=AUTOBUILD_KEY,
        ),
        Track.DEV: RepositoryEntry(
            repository=(
                f"{GITBUILDER_URL}/ceph-rpm-centos7.1-x86_64-basic/ref/{facts.version}/x86_64/"
            ),
            repository_key=AUTOBUILD_KEY,
        ),
    }


def _fedora_tracks(facts: EnvironmentFacts) -> dict[Track, RepositoryEntry]:
    fc = f"fc{facts.platform_version}"
    return {
        Track.STABLE: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-{facts.version}/{fc}/x86_64/",
            repository_key=LOCAL_RELEASE_KEY,
        ),
        Track.TESTING: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-testing/{fc}/x86_64/",
            repository_key=AUTOBUILD_KEY,
        ),
        Track.DEV: RepositoryEntry(
            repository=(
                f"{GITBUILDER_URL}/ceph-rpm-{fc}-x86_64-basic/ref/{facts.version}/RPMS/x86_64/"
            ),
            repository_key=AUTOBUILD_KEY,
        ),
    }


def _suse_tracks(
    facts: EnvironmentFacts, release_info: ReleaseInfoProvider
) -> dict[Track, RepositoryEntry]:
    """SUSE tracks point straight at the ceph-release RPM and have no key."""
    sv = suse_version(release_info)
    package = f"ceph-release-1-0.{sv}.noarch.rpm"
    return {
        Track.STABLE: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-{facts.version}/{sv}/x86_64/{package}",
        ),
        Track.TESTING: RepositoryEntry(
            repository=f"{facts.repo_url}/rpm-testing/{sv}/x86_64/{package}",
        ),
    }


def supported_tracks(family: PlatformFamily) -> list[Track]:
    """Tracks produced for a family, in resolution order."""
    if family is PlatformFamily.SUSE:
        return [Track.STABLE, Track.TESTING]
    return list(Track)
