"""Cluster configuration, load balancer config rendering and kubeconfig management."""

__version__ = "0.1.0"