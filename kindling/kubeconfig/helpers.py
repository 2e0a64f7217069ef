"""Small helpers shared by the KUBECONFIG tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kindling.kubeconfig.types import Config


class KubeconfigError(Exception):
    """Raised when a KUBECONFIG cannot be read, checked or written."""


def kind_cluster_key(cluster_name: str) -> str:
    """Return the name used for a cluster's entries in KUBECONFIG files."""
    return "kind-" + cluster_name


def check_kubeadm_expectations(config: Config) -> None:
    """Raise KubeconfigError unless config has exactly one cluster, user and context."""
    if len(config.clusters) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one cluster, but read {len(config.clusters)}"
        )
    if len(config.users) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one user, but read {len(config.users)}"
        )
    if len(config.contexts) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one context, but read {len(config.contexts)}"
        )