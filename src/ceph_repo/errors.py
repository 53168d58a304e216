"""Exception types raised while resolving repository defaults."""

from __future__ import annotations


class CephRepoError(Exception):
    """Base class for all resolution failures."""


class UnsupportedPlatformError(CephRepoError):
    """The platform family has no repository layout."""

    def __init__(self, family: str):
        self.family = family
        super().__init__(f"{family} is not supported")


class ReleaseInfoError(CephRepoError):
    """Host release metadata could not be read or was malformed."""

    def __init__(self, release_file: str, detail: str):
        self.release_file = release_file
        self.detail = detail
        super().__init__(f"Cannot read release info from {release_file}: {detail}")
