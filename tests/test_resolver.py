"""Tests for the per-platform repository resolver."""

import dataclasses
import logging

import pytest

from ceph_repo.core.release_info import StaticReleaseInfoProvider
from ceph_repo.core.resolver import (
    AUTOBUILD_KEY,
    LOCAL_RELEASE_KEY,
    RELEASE_KEY,
    resolve,
    supported_tracks,
)
from ceph_repo.errors import ReleaseInfoError, UnsupportedPlatformError
from ceph_repo.models import PlatformFamily, Track

from conftest import REPO_URL, VERSION


class TestDebian:
    def test_stable_and_testing(self, make_facts):
        resolved = resolve(make_facts("debian", codename="xenial"))
        assert resolved.get(Track.STABLE).repository == f"{REPO_URL}/debian-{VERSION}/"
        assert resolved.get(Track.TESTING).repository == f"{REPO_URL}/debian-testing/"
        assert resolved.get(Track.STABLE).repository_key == RELEASE_KEY
        assert resolved.get(Track.TESTING).repository_key == RELEASE_KEY

    def test_dev_embeds_codename_and_version(self, make_facts):
        dev = resolve(make_facts("debian", codename="xenial")).get(Track.DEV)
        assert dev.repository == (
            "http://gitbuilder.ceph.com/ceph-deb-xenial-x86_64-basic/ref/jewel"
        )
        assert dev.repository_key == AUTOBUILD_KEY

    def test_custom_repo_url(self, make_facts):
        resolved = resolve(make_facts("debian", repo_url="http://mirror.local/ceph"))
        assert resolved.get(Track.STABLE).repository == "http://mirror.local/ceph/debian-jewel/"


class TestRhel:
    def test_stable_uses_local_key(self, make_facts):
        stable = resolve(make_facts("rhel", el_version="el7")).get(Track.STABLE)
        assert stable.repository == f"{REPO_URL}/rpm-{VERSION}/el7/x86_64/"
        assert stable.repository_key == "file:///etc/pki/rpm-gpg/release.asc"
        assert stable.repository_key == LOCAL_RELEASE_KEY

    def test_testing_and_dev(self, make_facts):
        resolved = resolve(make_facts("rhel", el_version="el8"))
        assert resolved.get(Track.TESTING).repository == f"{REPO_URL}/rpm-testing/el8/x86_64/"
        assert resolved.get(Track.TESTING).repository_key == AUTOBUILD_KEY
        assert resolved.get(Track.DEV).repository == (
            "http://gitbuilder.ceph.com/ceph-rpm-centos7.1-x86_64-basic/ref/jewel/x86_64/"
        )
        assert resolved.get(Track.DEV).repository_key == AUTOBUILD_KEY


class TestFedora:
    def test_stable(self, make_facts):
        stable = resolve(make_facts("fedora", platform_version="23")).get(Track.STABLE)
        assert stable.repository == f"{REPO_URL}/rpm-{VERSION}/fc23/x86_64/"
        assert stable.repository_key == LOCAL_RELEASE_KEY

    def test_dev_has_rpms_suffix(self, make_facts):
        resolved = resolve(make_facts("fedora", platform_version="23"))
        assert resolved.get(Track.TESTING).repository == f"{REPO_URL}/rpm-testing/fc23/x86_64/"
        assert resolved.get(Track.DEV).repository == (
            "http://gitbuilder.ceph.com/ceph-rpm-fc23-x86_64-basic/ref/jewel/RPMS/x86_64/"
        )


class TestSuse:
    def test_sles_package_urls(self, make_facts, sles12):
        resolved = resolve(make_facts("suse"), release_info=sles12)
        stable = resolved.get(Track.STABLE)
        testing = resolved.get(Track.TESTING)
        assert stable.repository == (
            f"{REPO_URL}/rpm-jewel/sles12/x86_64/ceph-release-1-0.sles12.noarch.rpm"
        )
        assert stable.repository.endswith("ceph-release-1-0.sles12.noarch.rpm")
        assert testing.repository == (
            f"{REPO_URL}/rpm-testing/sles12/x86_64/ceph-release-1-0.sles12.noarch.rpm"
        )

    def test_no_keys_and_no_dev(self, make_facts, sles12):
        resolved = resolve(make_facts("suse"), release_info=sles12)
        assert set(resolved.tracks) == {Track.STABLE, Track.TESTING}
        assert all(entry.repository_key is None for entry in resolved.tracks.values())
        for entry in resolved.to_dict()["suse"].values():
            assert "repository_key" not in entry

    def test_opensuse(self, make_facts):
        provider = StaticReleaseInfoProvider("openSUSE", "42.1")
        stable = resolve(make_facts("suse"), release_info=provider).get(Track.STABLE)
        assert "/opensuse42.1/" in stable.repository

    def test_malformed_release_info_fails(self, make_facts):
        provider = StaticReleaseInfoProvider("SUSE", "")
        with pytest.raises(ReleaseInfoError):
            resolve(make_facts("suse"), release_info=provider)

    def test_release_info_ignored_elsewhere(self, make_facts):
        provider = StaticReleaseInfoProvider("", "")
        resolved = resolve(make_facts("rhel"), release_info=provider)
        assert resolved.family is PlatformFamily.RHEL


class TestUnsupported:
    @pytest.mark.parametrize("family", ["windows", "arch", "", "Debian"])
    def test_raises(self, make_facts, family):
        with pytest.raises(UnsupportedPlatformError) as excinfo:
            resolve(make_facts(family))
        assert excinfo.value.family == family

    def test_message_names_family(self, make_facts):
        with pytest.raises(UnsupportedPlatformError, match="windows is not supported"):
            resolve(make_facts("windows"))


class TestShape:
    @pytest.mark.parametrize("family", ["debian", "rhel", "fedora", "suse"])
    def test_only_detected_branch(self, make_facts, sles12, family):
        data = resolve(make_facts(family), release_info=sles12).to_dict()
        assert list(data) == [family]

    @pytest.mark.parametrize("family", ["debian", "rhel", "fedora", "suse"])
    def test_fully_interpolated(self, make_facts, sles12, family):
        facts = make_facts(family, codename="xenial", platform_version="23")
        for entry in resolve(facts, release_info=sles12).tracks.values():
            assert "{" not in entry.repository
            assert "#" not in entry.repository

    @pytest.mark.parametrize("family", ["debian", "rhel", "fedora", "suse"])
    def test_idempotent(self, make_facts, sles12, family):
        facts = make_facts(family, codename="xenial", platform_version="23")
        first = resolve(facts, release_info=sles12).to_dict()
        second = resolve(facts, release_info=sles12).to_dict()
        assert first == second

    def test_supported_tracks(self):
        assert supported_tracks(PlatformFamily.SUSE) == [Track.STABLE, Track.TESTING]
        assert supported_tracks(PlatformFamily.DEBIAN) == [Track.STABLE, Track.TESTING, Track.DEV]


class TestResolvedConfig:
    def test_frozen(self, make_facts):
        resolved = resolve(make_facts("rhel"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            resolved.tracks = {}

    def test_missing_debian_codename_warns(self, make_facts, caplog):
        with caplog.at_level(logging.WARNING, logger="ceph_repo.core.resolver"):
            dev = resolve(make_facts("debian")).get(Track.DEV)
        assert "codename" in caplog.text
        assert "ceph-deb--x86_64-basic" in dev.repository

    def test_codename_present_no_warning(self, make_facts, caplog):
        with caplog.at_level(logging.WARNING, logger="ceph_repo.core.resolver"):
            resolve(make_facts("debian", codename="xenial"))
        assert caplog.records == []
