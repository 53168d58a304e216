"""Assemble the ``ceph`` default attribute tree and merge it into a settings store."""

from __future__ import annotations

import copy
from typing import Any

from ceph_repo.config.settings import settings
from ceph_repo.models import EnvironmentFacts
from ceph_repo.models.repo import ResolvedConfig

ROOT_KEY = "ceph"


def default_attributes(
    facts: EnvironmentFacts,
    resolved: ResolvedConfig,
    repo_create: bool | None = None,
) -> dict[str, Any]:
    """Return ``{"ceph": {...}}`` holding the base settings and the family branch."""
    tree: dict[str, Any] = {
        "el_version": facts.el_version,
        "repo_url": facts.repo_url,
        "repo": {"create": settings.repo_create if repo_create is None else repo_create},
    }
    tree.update(resolved.to_dict())
    return {ROOT_KEY: tree}


def merge_attributes(store: dict[str, Any], attributes: dict[str, Any]) -> dict[str, Any]:
    """Layer default attributes underneath an existing settings store.

    Values already present in ``store`` take precedence; nested mappings are
    merged key by key.  Neither argument is modified.
    """
    merged = copy.deepcopy(store)
    _merge_defaults(merged, attributes)
    return merged


def _merge_defaults(target: dict[str, Any], defaults: dict[str, Any]) -> None:
    for key, value in defaults.items():
        if key not in target:
            target[key] = copy.deepcopy(value)
        elif isinstance(target[key], dict) and isinstance(value, dict):
            _merge_defaults(target[key], value)
