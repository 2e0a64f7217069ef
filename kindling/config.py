"""Cluster configuration types, defaulting and validation.

This is the current, version-independent form of a cluster config together
with the rules for filling in unset fields and checking the result.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import Enum


class _StrEnum(str, Enum):
    """A string-valued enum that formats as its plain value."""

    def __str__(self) -> str:
        return str(self.value)


class NodeRole(_StrEnum):
    """Role of a node in the cluster."""

    CONTROL_PLANE = "control-plane"
    WORKER = "worker"


class ClusterIPFamily(_StrEnum):
    """Network IP family of the cluster."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class MountPropagation(_StrEnum):
    """Mount propagation modes."""

    NONE = "None"
    HOST_TO_CONTAINER = "HostToContainer"
    BIDIRECTIONAL = "Bidirectional"


class PortMappingProtocol(_StrEnum):
    """Port mapping protocols."""

    TCP = "TCP"
    UDP = "UDP"
    SCTP = "SCTP"


class ConfigValidationError(ValueError):
    """Raised when a config has one or more problems; ``errors`` lists them."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        if len(self.errors) == 1:
            message = self.errors[0]
        else:
            message = "[" + ", ".join(self.errors) + "]"
        super().__init__(message)


@dataclass
class Mount:
    """A host path mounted into a node container."""

    container_path: str = ""
    host_path: str = ""
    readonly: bool = False
    selinux_relabel: bool = False
    propagation: str = ""


@dataclass
class PortMapping:
    """A host port mapped into a node container port."""

    container_port: int = 0
    host_port: int = 0
    listen_address: str = ""
    protocol: str = ""


def _port_problem(port: int) -> str | None:
    if port < 0 or port > 65535:
        return f"invalid port number: {port}"
    return None


def _cidr_problem(value: str) -> str | None:
    if "/" not in value:
        return f"invalid CIDR address: {value}"
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return f"invalid CIDR address: {value}"
    return None


@dataclass
class Node:
    """A node of the cluster, provisioned as one container."""

    role: str = ""
    image: str = ""
    extra_mounts: list[Mount] = field(default_factory=list)
    extra_port_mappings: list[PortMapping] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ConfigValidationError listing every problem with the node."""
        errs: list[str] = []

        if self.role not in (NodeRole.CONTROL_PLANE, NodeRole.WORKER):
            errs.append(f'"{self.role}" is not a valid node role')

        if not self.image:
            errs.append("image is a required field")

        for mapping in self.extra_port_mappings:
            problem = _port_problem(mapping.host_port)
            if problem:
                errs.append(f"invalid hostPort: {problem}")
            problem = _port_problem(mapping.container_port)
            if problem:
                errs.append(f"invalid containerPort: {problem}")

        if errs:
            raise ConfigValidationError(errs)


@dataclass
class Networking:
    """Cluster-wide network settings."""

    ip_family: str = ""
    api_server_port: int = 0
    api_server_address: str = ""
    pod_subnet: str = ""
    service_subnet: str = ""
    disable_default_cni: bool = False


@dataclass
class PatchJSON6902:
    """An inline JSON 6902 patch and the resource it targets."""

    group: str = ""
    version: str = ""
    kind: str = ""
    patch: str = ""


@dataclass
class Cluster:
    """Configuration of a whole cluster."""

    nodes: list[Node] = field(default_factory=list)
    networking: Networking = field(default_factory=Networking)
    kubeadm_config_patches: list[str] = field(default_factory=list)
    kubeadm_config_patches_json6902: list[PatchJSON6902] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ConfigValidationError listing every problem with the cluster."""
        errs: list[str] = []
        net = self.networking

        # port 0 means a random port is picked at runtime
        if net.api_server_port != 0:
            problem = _port_problem(net.api_server_port)
            if problem:
                errs.append(f"invalid apiServerPort: {problem}")

        for label, subnet in (("podSubnet", net.pod_subnet), ("serviceSubnet", net.service_subnet)):
            problem = _cidr_problem(subnet)
            if problem:
                errs.append(f"invalid {label}: {problem}")

        for index, node in enumerate(self.nodes):
            try:
                node.validate()
            except ConfigValidationError as exc:
                errs.append(f"invalid configuration for node {index}: {exc}")

        control_planes = sum(1 for node in self.nodes if node.role == NodeRole.CONTROL_PLANE)
        if control_planes < 1:
            errs.append(f"must have at least one {NodeRole.CONTROL_PLANE} node")

        if errs:
            raise ConfigValidationError(errs)


def set_defaults_node(node: Node, default_image: str) -> None:
    """Fill in the unset fields of a node."""
    if not node.image:
        node.image = default_image
    if not node.role:
        node.role = NodeRole.CONTROL_PLANE


def set_defaults_cluster(cluster: Cluster, default_image: str) -> None:
    """Fill in the unset fields of a cluster and all of its nodes."""
    if not cluster.nodes:
        cluster.nodes = [Node(role=NodeRole.CONTROL_PLANE, image=default_image)]
    for node in cluster.nodes:
        set_defaults_node(node, default_image)

    net = cluster.networking
    if not net.ip_family:
        net.ip_family = ClusterIPFamily.IPV4
    ipv6 = net.ip_family == ClusterIPFamily.IPV6

    if not net.api_server_address:
        net.api_server_address = "::1" if ipv6 else "127.0.0.1"
    if not net.pod_subnet:
        net.pod_subnet = "fd00:10:244::/64" if ipv6 else "10.244.0.0/16"
    if not net.service_subnet:
        net.service_subnet = "fd00:10:96::/112" if ipv6 else "10.96.0.0/12"