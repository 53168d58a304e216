"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_REPO_URL = "http://download.ceph.com"
DEFAULT_EL_VERSION = "el7"
DEFAULT_SUSE_RELEASE_FILE = "/etc/SuSE-release"
DEFAULT_OS_RELEASE_FILE = "/etc/os-release"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _default_repo_url() -> str:
    """Return the base download URL, honouring CEPH_REPO_URL.

    A trailing slash is dropped so that path joins stay single-slashed.
    """
    return os.environ.get("CEPH_REPO_URL", "").rstrip("/") or DEFAULT_REPO_URL


def _default_el_version() -> str:
    return os.environ.get("CEPH_EL_VERSION", "") or DEFAULT_EL_VERSION


def _default_repo_create() -> bool:
    raw = os.environ.get("CEPH_REPO_CREATE", "")
    if not raw:
        return True
    return raw.strip().lower() not in _FALSE_VALUES


def _default_suse_release_file() -> Path:
    return Path(os.environ.get("CEPH_SUSE_RELEASE_FILE", "") or DEFAULT_SUSE_RELEASE_FILE)


def _default_os_release_file() -> Path:
    return Path(os.environ.get("CEPH_OS_RELEASE_FILE", "") or DEFAULT_OS_RELEASE_FILE)


def _default_command_timeout() -> float:
    raw = os.environ.get("CEPH_COMMAND_TIMEOUT", "")
    try:
        return float(raw) if raw else 10.0
    except ValueError:
        return 10.0


@dataclass
class Settings:
    repo_url: str = field(default_factory=_default_repo_url)
    el_version: str = field(default_factory=_default_el_version)
    repo_create: bool = field(default_factory=_default_repo_create)
    suse_release_file: Path = field(default_factory=_default_suse_release_file)
    os_release_file: Path = field(default_factory=_default_os_release_file)
    command_timeout: float = field(default_factory=_default_command_timeout)  # seconds
    default_output: str = "table"


# Global singleton
settings = Settings()
