import pytest

from kindling.kubeconfig.helpers import (
    KubeconfigError,
    check_kubeadm_expectations,
    kind_cluster_key,
)
from kindling.kubeconfig.types import Config, NamedCluster, NamedContext, NamedUser


def _config(clusters, contexts, users):
    return Config(
        clusters=[NamedCluster() for _ in range(clusters)],
        contexts=[NamedContext() for _ in range(contexts)],
        users=[NamedUser() for _ in range(users)],
    )


def test_kind_cluster_key():
    assert kind_cluster_key("foobar") == "kind-foobar"


@pytest.mark.parametrize(
    "clusters, contexts, users, message",
    [
        (5, 5, 5, "one cluster, but read 5"),
        (1, 1, 2, "one user, but read 2"),
        (2, 1, 1, "one cluster, but read 2"),
        (1, 2, 1, "one context, but read 2"),
    ],
)
def test_check_kubeadm_expectations_errors(clusters, contexts, users, message):
    with pytest.raises(KubeconfigError, match=message):
        check_kubeadm_expectations(_config(clusters, contexts, users))


def test_check_kubeadm_expectations_just_right():
    cfg = _config(1, 1, 1)
    assert check_kubeadm_expectations(cfg) is None
    cfg.users.append(NamedUser())
    with pytest.raises(KubeconfigError, match="one user"):
        check_kubeadm_expectations(cfg)