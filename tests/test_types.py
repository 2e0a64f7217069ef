import pytest

from kindling.kubeconfig.helpers import KubeconfigError
from kindling.kubeconfig.types import (
    ClusterInfo,
    Config,
    ContextInfo,
    NamedCluster,
    NamedContext,
    NamedUser,
)

USER = {"client-certificate-data": "seemslegit", "client-key-data": "yep"}
META = {"apiVersion": "v1", "kind": "Config", "preferences": {}}
SAMPLE = {
    **META,
    "clusters": [
        {"name": "a", "cluster": {"certificate-authority-data": "cert", "server": "https://h:1"}}
    ],
    "contexts": [{"name": "a", "context": {"cluster": "a", "user": "a", "namespace": "ns"}}],
    "users": [{"name": "a", "user": USER}],
    "current-context": "a",
}


def test_round_trip_preserves_document():
    assert Config.from_dict(SAMPLE).to_dict() == SAMPLE


def test_from_dict_splits_known_and_other_fields():
    cfg = Config.from_dict(SAMPLE)
    assert cfg.current_context == "a"
    assert cfg.other_fields == META
    assert cfg.clusters == [
        NamedCluster(
            name="a",
            cluster=ClusterInfo(server="https://h:1", other_fields={"certificate-authority-data": "cert"}),
        )
    ]
    assert cfg.contexts == [
        NamedContext(name="a", context=ContextInfo(cluster="a", user="a", other_fields={"namespace": "ns"}))
    ]
    assert cfg.users == [NamedUser(name="a", user=USER)]


def test_none_is_empty_config():
    assert Config.from_dict(None) == Config()


def test_empty_config_to_dict_is_empty():
    assert Config().to_dict() == {}


def test_empty_known_fields_are_omitted():
    out = Config(clusters=[NamedCluster(name="kind-kind")]).to_dict()
    assert sorted(out) == ["clusters"]
    assert out["clusters"][0]["name"] == "kind-kind"
    assert "server" not in out["clusters"][0]["cluster"]


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "mapping"],
        {"clusters": "nope"},
        {"clusters": [{"name": "x", "cluster": ["bad"]}]},
        {"current-context": ["bad"]},
    ],
)
def test_bad_shapes_raise(data):
    with pytest.raises(KubeconfigError):
        Config.from_dict(data)