"""KUBECONFIG data model.

Only the fields that cluster management inspects or modifies are modelled
explicitly; everything else is kept in ``other_fields`` so it can be written
back unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kindling.kubeconfig.helpers import KubeconfigError


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise KubeconfigError(f"{what} must be a mapping, got {type(value).__name__}")
    return dict(value)


def _sequence(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise KubeconfigError(f"{what} must be a list, got {type(value).__name__}")
    return value


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise KubeconfigError(f"{what} must be a string, got {type(value).__name__}")
    return value


@dataclass
class ClusterInfo:
    """How to reach a cluster."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def _from_dict(cls, data: Any) -> ClusterInfo:
        raw = _mapping(data, "cluster")
        server = _string(raw.pop("server", None), "cluster.server")
        return cls(server=server, other_fields=raw)

    def _to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.server:
            out["server"] = self.server
        return out


@dataclass
class NamedCluster:
    """A cluster entry under a name."""

    name: str = ""
    cluster: ClusterInfo = field(default_factory=ClusterInfo)

    @classmethod
    def _from_dict(cls, data: Any) -> NamedCluster:
        raw = _mapping(data, "clusters entry")
        return cls(
            name=_string(raw.get("name"), "clusters entry name"),
            cluster=ClusterInfo._from_dict(raw.get("cluster")),
        )

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cluster": self.cluster._to_dict()}


@dataclass
class NamedUser:
    """A user entry under a name; the user data is kept as is."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def _from_dict(cls, data: Any) -> NamedUser:
        raw = _mapping(data, "users entry")
        return cls(
            name=_string(raw.get("name"), "users entry name"),
            user=_mapping(raw.get("user"), "users entry user"),
        )

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "user": dict(self.user)}


@dataclass
class ContextInfo:
    """References to a cluster and a user, plus untouched extra fields."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def _from_dict(cls, data: Any) -> ContextInfo:
        raw = _mapping(data, "context")
        cluster = _string(raw.pop("cluster", None), "context.cluster")
        user = _string(raw.pop("user", None), "context.user")
        return cls(cluster=cluster, user=user, other_fields=raw)

    def _to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        out["cluster"] = self.cluster
        out["user"] = self.user
        return out


@dataclass
class NamedContext:
    """A context entry under a name."""

    name: str = ""
    context: ContextInfo = field(default_factory=ContextInfo)

    @classmethod
    def _from_dict(cls, data: Any) -> NamedContext:
        raw = _mapping(data, "contexts entry")
        return cls(
            name=_string(raw.get("name"), "contexts entry name"),
            context=ContextInfo._from_dict(raw.get("context")),
        )

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "context": self.context._to_dict()}


_KNOWN_KEYS = ("clusters", "users", "contexts", "current-context")


@dataclass
class Config:
    """A KUBECONFIG document."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a Config from a decoded YAML document (None means empty)."""
        raw = _mapping(data, "kubeconfig")
        clusters = [NamedCluster._from_dict(c) for c in _sequence(raw.get("clusters"), "clusters")]
        users = [NamedUser._from_dict(u) for u in _sequence(raw.get("users"), "users")]
        contexts = [NamedContext._from_dict(c) for c in _sequence(raw.get("contexts"), "contexts")]
        current = _string(raw.get("current-context"), "current-context")
        other = {key: value for key, value in raw.items() if key not in _KNOWN_KEYS}
        return cls(
            clusters=clusters,
            users=users,
            contexts=contexts,
            current_context=current,
            other_fields=other,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain data, leaving out empty known fields."""
        out = dict(self.other_fields)
        if self.clusters:
            out["clusters"] = [c._to_dict() for c in self.clusters]
        if self.users:
            out["users"] = [u._to_dict() for u in self.users]
        if self.contexts:
            out["contexts"] = [c._to_dict() for c in self.contexts]
        if self.current_context:
            out["current-context"] = self.current_context
        return out