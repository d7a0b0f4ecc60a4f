"""Cluster clients for SparkOps."""

from .cluster import ClusterStore, KubeClusterStore, load_cluster_store

__all__ = ["ClusterStore", "KubeClusterStore", "load_cluster_store"]
