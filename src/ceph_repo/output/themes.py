"""Track and family color maps."""

from ceph_repo.models import PlatformFamily, Track

TRACK_COLORS: dict[Track, str] = {
    Track.STABLE: "green",
    Track.TESTING: "yellow",
    Track.DEV: "magenta",
}

FAMILY_COLORS: dict[PlatformFamily, str] = {
    PlatformFamily.DEBIAN: "red",
    PlatformFamily.RHEL: "bright_red",
    PlatformFamily.FEDORA: "blue",
    PlatformFamily.SUSE: "green",
}


def styled_track(track: Track) -> str:
    color = TRACK_COLORS.get(track, "white")
    return f"[{color}]{track.value}[/{color}]"


def styled_family(family: PlatformFamily) -> str:
    color = FAMILY_COLORS.get(family, "white")
    return f"[{color}]{family.value}[/{color}]"
