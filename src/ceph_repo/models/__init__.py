"""Data models for ceph-repo."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ceph_repo.config.settings import settings
from ceph_repo.errors import UnsupportedPlatformError


class PlatformFamily(enum.Enum):
    DEBIAN = "debian"
    RHEL = "rhel"
    FEDORA = "fedora"
    SUSE = "suse"

    @classmethod
    def parse(cls, value: str) -> PlatformFamily:
        """Map a platform family tag onto a member, failing for unknown tags."""
        tag = (value or "").strip()
        for member in cls:
            if member.value == tag:
                return member
        raise UnsupportedPlatformError(tag)


class Track(enum.Enum):
    STABLE = "stable"
    TESTING = "testing"
    DEV = "dev"


@dataclass
class EnvironmentFacts:
    platform_family: str
    version: str
    repo_url: str = field(default_factory=lambda: settings.repo_url)
    el_version: str = field(default_factory=lambda: settings.el_version)
    platform_version: str = ""  # fedora only
    codename: str = ""  # debian dev track only
