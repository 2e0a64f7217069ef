"""Encoding and decoding of KUBECONFIG documents."""

from __future__ import annotations

import yaml

from kindling.kubeconfig.helpers import (
    KubeconfigError,
    check_kubeadm_expectations,
    kind_cluster_key,
)
from kindling.kubeconfig.types import Config


def encode(config: Config) -> str:
    """Encode config as YAML with sorted keys; an empty config encodes to ""."""
    data = config.to_dict()
    if not data:
        return ""
    try:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to encode KUBECONFIG: {exc}") from exc


def _decode(raw: str) -> Config:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to decode KUBECONFIG: {exc}") from exc
    return Config.from_dict(data)


def from_raw_kubeadm(raw: str, cluster_name: str, server: str = "") -> Config:
    """Turn a kubeadm admin KUBECONFIG into one keyed for the named cluster.

    All names and references use the cluster key; the server is replaced
    only when ``server`` is set.
    """
    cfg = _decode(raw)
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cfg.clusters[0].name = key
    cfg.users[0].name = key
    cfg.contexts[0].name = key
    cfg.contexts[0].context.user = key
    cfg.contexts[0].context.cluster = key
    cfg.current_context = key

    if server:
        cfg.clusters[0].cluster.server = server
    return cfg


def read(config_path: str) -> Config:
    """Load the KUBECONFIG at config_path, or an empty one if it does not exist."""
    try:
        with open(config_path, encoding="utf-8") as handle:
            raw = handle.read()
    except FileNotFoundError:
        return Config()
    return _decode(raw)