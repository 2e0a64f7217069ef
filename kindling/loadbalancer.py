"""External load balancer configuration for control-plane nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

IMAGE = "kindest/haproxy:2.0.0-alpine"
"""Load balancer image:tag."""

CONFIG_PATH = "/usr/local/etc/haproxy/haproxy.cfg"
"""Path of the config file inside the load balancer image."""

_TEMPLATE = (
    "# generated by kind\n"
    "global\n"
    "  log /dev/log local0\n"
    "  log /dev/log local1 notice\n"
    "  daemon\n"
    "\n"
    "defaults\n"
    "  log global\n"
    "  mode tcp\n"
    "  option dontlognull\n"
    "  timeout connect 5000\n"
    "  timeout client 50000\n"
    "  timeout server 50000\n"
    "\n"
    "frontend control-plane\n"
    "  bind *:{port}\n"
    "  {ipv6_bind}\n"
    "  default_backend kube-apiservers\n"
    "\n"
    "backend kube-apiservers\n"
    "  option httpchk GET /healthz\n"
    "  {servers}\n"
)


@dataclass
class ConfigData:
    """Values fed into the load balancer config."""

    control_plane_port: int
    backend_servers: dict[str, str] = field(default_factory=dict)
    ipv6: bool = False


def render_config(data: ConfigData) -> str:
    """Return the haproxy config for the given data; servers come sorted by name."""
    port = data.control_plane_port
    ipv6_bind = f"bind :::{port};" if data.ipv6 else ""
    servers = "".join(
        f"\n  server {name} {address} check check-ssl verify none"
        for name, address in sorted(data.backend_servers.items())
    )
    return _TEMPLATE.format(port=port, ipv6_bind=ipv6_bind, servers=servers)