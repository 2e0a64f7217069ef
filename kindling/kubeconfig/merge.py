"""Merging a cluster's KUBECONFIG entries into an existing KUBECONFIG."""

from __future__ import annotations

import os

from kindling.kubeconfig.encode import read
from kindling.kubeconfig.helpers import KubeconfigError, check_kubeadm_expectations
from kindling.kubeconfig.lock import lock_file, unlock_file
from kindling.kubeconfig.paths import path_for_merge
from kindling.kubeconfig.types import Config
from kindling.kubeconfig.write import write


def _upsert(entries: list, new_entry) -> None:
    replaced = False
    for index, entry in enumerate(entries):
        if entry.name == new_entry.name:
            entries[index] = new_entry
            replaced = True
    if not replaced:
        entries.append(new_entry)


def merge(existing: Config, kind: Config) -> None:
    """Insert or replace kind's single cluster, user and context in existing.

    The current context of existing is set to kind's.
    """
    check_kubeadm_expectations(kind)
    _upsert(existing.clusters, kind.clusters[0])
    _upsert(existing.users, kind.users[0])
    _upsert(existing.contexts, kind.contexts[0])
    existing.current_context = kind.current_context


def write_merged(kind_config: Config, explicit_config_path: str = "") -> None:
    """Merge kind_config into the KUBECONFIG kubectl would use and write it back."""
    config_path = path_for_merge(explicit_config_path, lambda key: os.environ.get(key, ""))

    try:
        lock_file(config_path)
    except OSError as exc:
        raise KubeconfigError(f"failed to lock config file: {exc}") from exc
    try:
        try:
            existing = read(config_path)
        except (OSError, KubeconfigError) as exc:
            raise KubeconfigError(f"failed to get kubeconfig to merge: {exc}") from exc
        merge(existing, kind_config)
        write(existing, config_path)
    finally:
        try:
            unlock_file(config_path)
        except OSError:
            pass