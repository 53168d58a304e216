"""SUSE release metadata lookup.

Chef does not tell SLES and openSUSE apart, so the distribution tag is read
from the first word of the release file and the version from its
``VERSION = ...`` line.  The reads go through a ``ReleaseInfoProvider`` so
that callers and tests can substitute fixed values for the host commands.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Protocol

from ceph_repo.config.settings import settings
from ceph_repo.errors import ReleaseInfoError

logger = logging.getLogger(__name__)


class ReleaseInfoProvider(Protocol):
    release_file: str

    def distribution(self) -> str:
        ...

    def version(self) -> str:
        ...


class StaticReleaseInfoProvider:
    """Release info supplied up front instead of read from the host."""

    def __init__(self, distribution: str, version: str, release_file: str = "<static>"):
        self._distribution = distribution
        self._version = version
        self.release_file = release_file

    def distribution(self) -> str:
        return self._distribution

    def version(self) -> str:
        return self._version


class HostReleaseInfoProvider:
    """Reads the release file by shelling out to the host's text tools."""

    def __init__(self, release_file: str | Path | None = None, timeout: float | None = None):
        self.release_file = str(release_file or settings.suse_release_file)
        self.timeout = settings.command_timeout if timeout is None else timeout

    def distribution(self) -> str:
        path = shlex.quote(self.release_file)
        return self._run(f"head -n1 {path} | awk '{{print $1}}'")

    def version(self) -> str:
        path = shlex.quote(self.release_file)
        return self._run(f"grep VERSION {path} | awk -F'= ' '{{print $2}}'")

    def _run(self, command: str) -> str:
        logger.debug("Running %s", command)
        try:
            proc = subprocess.run(
                ["/bin/sh", "-c", command],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            raise ReleaseInfoError(self.release_file, f"command timed out after {self.timeout}s")
        except OSError as exc:
            raise ReleaseInfoError(self.release_file, str(exc))

        stdout = proc.stdout.rstrip("\n")
        stderr = proc.stderr.strip()
        # The pipeline's status is awk's, so a missing file only shows on stderr
        if proc.returncode != 0 or (not stdout and stderr):
            raise ReleaseInfoError(self.release_file, stderr or f"exit status {proc.returncode}")
        return stdout


def suse_version(provider: ReleaseInfoProvider) -> str:
    """Return the distribution tag joined with the release version, e.g. ``sles12``.

    Raises ReleaseInfoError when either part is empty or the result would
    not be a single token, rather than interpolating a garbled URL.
    """
    distro = provider.distribution().strip().lower()
    if not distro:
        raise ReleaseInfoError(provider.release_file, "no distribution name on first line")
    if distro == "suse":
        distro = "sles"

    # grep may match several VERSION lines; only the first carries the release
    lines = provider.version().strip().splitlines()
    version = lines[0].strip() if lines else ""
    if not version:
        raise ReleaseInfoError(provider.release_file, "no VERSION assignment found")

    derived = distro + version
    if any(ch.isspace() for ch in derived):
        raise ReleaseInfoError(provider.release_file, f"malformed version string {derived!r}")
    logger.debug("Derived suse_version %s from %s", derived, provider.release_file)
    return derived
