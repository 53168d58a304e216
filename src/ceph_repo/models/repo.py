"""Resolved repository models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ceph_repo.models import PlatformFamily, Track


@dataclass(frozen=True)
class RepositoryEntry:
    repository: str
    repository_key: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"repository": self.repository}
        if self.repository_key is not None:
            data["repository_key"] = self.repository_key
        return data


@dataclass(frozen=True)
class ResolvedConfig:
    family: PlatformFamily
    tracks: dict[Track, RepositoryEntry] = field(default_factory=dict)

    def get(self, track: Track) -> RepositoryEntry | None:
        return self.tracks.get(track)

    def to_dict(self) -> dict[str, Any]:
        """Nested mapping keyed family -> track -> repository fields."""
        return {
            self.family.value: {
                track.value: entry.to_dict() for track, entry in self.tracks.items()
            }
        }
