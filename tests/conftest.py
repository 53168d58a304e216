"""Shared fixtures."""

import pytest

from ceph_repo.core.release_info import StaticReleaseInfoProvider
from ceph_repo.models import EnvironmentFacts

REPO_URL = "http://download.ceph.com"
VERSION = "jewel"


@pytest.fixture
def make_facts():
    def _make(family, **kwargs):
        kwargs.setdefault("repo_url", REPO_URL)
        kwargs.setdefault("el_version", "el7")
        return EnvironmentFacts(platform_family=family, version=VERSION, **kwargs)
    return _make


@pytest.fixture
def sles12():
    return StaticReleaseInfoProvider("SUSE", "12", release_file="/etc/SuSE-release")


@pytest.fixture
def suse_release_file(tmp_path):
    path = tmp_path / "SuSE-release"
    path.write_text(
        "SUSE Linux Enterprise Server 12 (x86_64)\n"
        "VERSION = 12\n"
        "PATCHLEVEL = 1\n",
        encoding="utf-8",
    )
    return path
