# kindling

Building blocks for tools that manage local Kubernetes clusters whose nodes
run as containers:

- **Cluster configuration** (`kindling.config`): dataclasses for clusters,
  nodes, networking, mounts, port mappings and JSON 6902 patches, together
  with defaulting and validation.
- **Load balancer configuration** (`kindling.loadbalancer`): renders the
  HAProxy configuration that sits in front of the control-plane nodes.
- **Kubeconfig management** (`kindling.kubeconfig`): reads, encodes, merges
  and removes cluster entries in kubeconfig files, using `kubectl`'s lock-file
  convention and its rules for choosing which file to use.

## Installation

```
pip install kindling
```

PyYAML is the only dependency.

## Cluster configuration

```python
from kindling.config import Cluster, Node, NodeRole, set_defaults_cluster

cluster = Cluster(nodes=[Node(role=NodeRole.CONTROL_PLANE), Node(role=NodeRole.WORKER)])
set_defaults_cluster(cluster, "kindest/node:latest")
cluster.validate()  # raises ConfigValidationError listing every problem
```

`set_defaults_cluster(cluster, default_image)` adds a single control-plane
node when there are none, gives every node the default image and the
`control-plane` role where they are unset, and fills in networking:

| field                | ipv4 (default)  | ipv6               |
|----------------------|-----------------|--------------------|
| `api_server_address` | `127.0.0.1`     | `::1`              |
| `pod_subnet`         | `10.244.0.0/16` | `fd00:10:244::/64` |
| `service_subnet`     | `10.96.0.0/12`  | `fd00:10:96::/112` |

`Cluster.validate()` and `Node.validate()` raise
`ConfigValidationError`; its `errors` attribute holds one message per
problem. They check ports (0–65535, with an API server port of 0 meaning
"pick one at runtime"), that the pod and service subnets are CIDRs, that every
node has a known role and an image, and that there is at least one
control-plane node.

The enums `NodeRole`, `ClusterIPFamily`, `MountPropagation` and
`PortMappingProtocol` are string enums and compare equal to their values.

## Load balancer configuration

```python
from kindling.loadbalancer import ConfigData, render_config, IMAGE, CONFIG_PATH

text = render_config(ConfigData(
    control_plane_port=6443,
    backend_servers={"kind-control-plane": "172.17.0.2:6443"},
    ipv6=False,
))
```

Backend servers appear sorted by name. With `ipv6=True` an extra
`bind :::<port>;` line is added. `IMAGE` is the HAProxy image the
configuration is meant for and `CONFIG_PATH` is where it goes inside it.

## Kubeconfig files

```python
from kindling.kubeconfig.encode import from_raw_kubeadm, encode, read
from kindling.kubeconfig.merge import write_merged
from kindling.kubeconfig.remove import remove_kind

config = from_raw_kubeadm(raw_admin_conf, "kind", "https://127.0.0.1:6443")
write_merged(config, "")   # merges into $KUBECONFIG or ~/.kube/config
remove_kind("kind", "")    # removes the kind-kind entries again
```

- `from_raw_kubeadm(raw, cluster_name, server)` expects exactly one cluster,
  user and context, renames them all to `kind-<cluster name>` (see
  `kindling.kubeconfig.helpers.kind_cluster_key`), makes that the current
  context, and replaces the server when `server` is non-empty.
- `encode(config)` writes YAML with sorted keys; an empty config encodes to
  an empty string. `read(path)` returns an empty `Config` when the file does
  not exist. Fields the model does not know are kept in `other_fields` and
  written back unchanged.
- `merge(existing, kind)` (in `kindling.kubeconfig.merge`) inserts or
  replaces entries by name; `remove(config, name)` (in
  `kindling.kubeconfig.remove`) drops them and reports whether anything
  changed.
- `kindling.kubeconfig.paths` chooses files like `kubectl`: an explicit path,
  else the entries of `$KUBECONFIG`, else `$HOME/.kube/config`, with the
  Windows home-directory lookup rules.
- `kindling.kubeconfig.lock` creates and removes `<file>.lock`; `locked(path)`
  is a context manager that holds the lock. `write(config, path)` in
  `kindling.kubeconfig.write` creates parent directories and writes the file
  with mode `0600`.

Errors in reading, checking or writing kubeconfigs raise `KubeconfigError`.

## What this package does not do

It does not create, start or delete clusters or node containers, does not
talk to a container runtime or run `kubeadm`, and has no command-line
interface. It works only on configuration data and kubeconfig files; getting
the kubeadm admin kubeconfig from a node is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```