"""Detect platform facts from the host's os-release file."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from ceph_repo.config.settings import settings
from ceph_repo.models import EnvironmentFacts

logger = logging.getLogger(__name__)

_FAMILY_BY_ID: dict[str, str] = {
    "debian": "debian",
    "ubuntu": "debian",
    "rhel": "rhel",
    "centos": "rhel",
    "rocky": "rhel",
    "almalinux": "rhel",
    "ol": "rhel",
    "fedora": "fedora",
    "suse": "suse",
    "sles": "suse",
    "sled": "suse",
}


def parse_os_release(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines, unquoting values and skipping comments."""
    result: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            logger.debug("Unparseable os-release line: %s", line)
            continue
        result[key.strip()] = parts[0] if parts else ""
    return result


def _family_for(distro_id: str) -> str | None:
    if distro_id.startswith("opensuse"):
        return "suse"
    return _FAMILY_BY_ID.get(distro_id)


def detect_family(os_release: dict[str, str]) -> str:
    """Map ID, then each ID_LIKE entry, onto a platform family tag.

    Unknown distributions yield their raw ID so that resolution rejects them.
    """
    distro_id = os_release.get("ID", "").lower()
    candidates = [distro_id] + os_release.get("ID_LIKE", "").lower().split()
    for candidate in candidates:
        family = _family_for(candidate)
        if family:
            return family
    return distro_id or "unknown"


def detect_facts(
    version: str,
    os_release_path: str | Path | None = None,
    **overrides: str | None,
) -> EnvironmentFacts:
    """Build EnvironmentFacts from os-release; explicit overrides win."""
    path = Path(os_release_path or settings.os_release_file)
    try:
        os_release = parse_os_release(path.read_text(encoding="utf-8"))
    except OSError:
        logger.debug("Could not read %s", path, exc_info=True)
        os_release = {}

    values = {
        "platform_family": detect_family(os_release),
        "platform_version": os_release.get("VERSION_ID", ""),
        "codename": os_release.get("VERSION_CODENAME", ""),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return EnvironmentFacts(version=version, **values)
