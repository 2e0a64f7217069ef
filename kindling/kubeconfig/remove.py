"""Removing a cluster's entries from KUBECONFIG files."""

from __future__ import annotations

import os

from kindling.kubeconfig.encode import read
from kindling.kubeconfig.helpers import KubeconfigError, kind_cluster_key
from kindling.kubeconfig.lock import lock_file, unlock_file
from kindling.kubeconfig.paths import paths
from kindling.kubeconfig.types import Config
from kindling.kubeconfig.write import write


def remove(config: Config, kind_cluster_name: str) -> bool:
    """Drop the named cluster's entries from config; return whether it changed."""
    key = kind_cluster_key(kind_cluster_name)
    before = (len(config.clusters), len(config.users), len(config.contexts))

    config.clusters = [c for c in config.clusters if c.name != key]
    config.users = [u for u in config.users if u.name != key]
    config.contexts = [c for c in config.contexts if c.name != key]
    mutated = before != (len(config.clusters), len(config.users), len(config.contexts))

    if config.current_context == key:
        config.current_context = ""
        mutated = True
    return mutated


def _remove_from_file(kind_cluster_name: str, config_path: str) -> None:
    try:
        lock_file(config_path)
    except OSError as exc:
        raise KubeconfigError(f"failed to lock config file: {exc}") from exc
    try:
        try:
            existing = read(config_path)
        except (OSError, KubeconfigError) as exc:
            raise KubeconfigError(
                f"failed to read kubeconfig to remove KIND entry: {exc}"
            ) from exc
        if remove(existing, kind_cluster_name):
            write(existing, config_path)
    finally:
        try:
            unlock_file(config_path)
        except OSError:
            pass


def remove_kind(kind_cluster_name: str, explicit_path: str = "") -> None:
    """Remove the named cluster from every KUBECONFIG file kubectl would consider."""
    for config_path in paths(explicit_path, lambda key: os.environ.get(key, "")):
        _remove_from_file(kind_cluster_name, config_path)