"""Cluster store used to persist driver UI objects.

The provisioners only ever create objects, so the store interface is two
create calls scoped to a namespace. ``KubeClusterStore`` implements it with
the official Kubernetes client; tests substitute an in-memory store.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.config.config_exception import ConfigException

from ..errors import ConfigError

logger = logging.getLogger(__name__)


class ClusterStore(ABC):
    """Namespace-scoped create operations against a cluster."""

    @abstractmethod
    def create_service(self, namespace: str, body: k8s_client.V1Service) -> k8s_client.V1Service:
        """Create a Service and return the object as stored by the server."""
        pass

    @abstractmethod
    def create_ingress(self, namespace: str, body: k8s_client.V1Ingress) -> k8s_client.V1Ingress:
        """Create an Ingress and return the object as stored by the server."""
        pass


class KubeClusterStore(ClusterStore):
    """ClusterStore backed by CoreV1Api and NetworkingV1Api.

    Request timeouts come from the underlying client configuration and are
    not set here.
    """

    def __init__(
        self,
        core_v1: k8s_client.CoreV1Api | None = None,
        networking_v1: k8s_client.NetworkingV1Api | None = None,
    ):
        self.core_v1 = core_v1 or k8s_client.CoreV1Api()
        self.networking_v1 = networking_v1 or k8s_client.NetworkingV1Api()

    def create_service(self, namespace: str, body: k8s_client.V1Service) -> k8s_client.V1Service:
        return self.core_v1.create_namespaced_service(namespace=namespace, body=body)

    def create_ingress(self, namespace: str, body: k8s_client.V1Ingress) -> k8s_client.V1Ingress:
        return self.networking_v1.create_namespaced_ingress(namespace=namespace, body=body)


def load_cluster_store(
    kubeconfig: Path | None = None, context: str | None = None
) -> KubeClusterStore:
    """Build a KubeClusterStore from in-cluster or kubeconfig credentials.

    In-cluster service account credentials are used when running in a pod
    and no kubeconfig is given; otherwise the kubeconfig file (default
    ~/.kube/config or $KUBECONFIG) and optional context are loaded.

    Args:
        kubeconfig: Explicit kubeconfig path
        context: Kubeconfig context name

    Returns:
        KubeClusterStore bound to the loaded configuration

    Raises:
        ConfigError: If no usable cluster configuration is found
    """
    try:
        if kubeconfig is None and context is None and "KUBERNETES_SERVICE_HOST" in os.environ:
            logger.debug("Loading in-cluster Kubernetes configuration")
            k8s_config.load_incluster_config()
        else:
            logger.debug("Loading kubeconfig %s (context %s)", kubeconfig or "default", context)
            k8s_config.load_kube_config(
                config_file=str(kubeconfig) if kubeconfig else None,
                context=context,
            )
    except (ConfigException, OSError) as e:
        raise ConfigError(f"Failed to load Kubernetes configuration: {e}") from e

    return KubeClusterStore()
