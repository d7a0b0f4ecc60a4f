"""Driver UI Service provisioning."""

import logging

from kubernetes import client as k8s_client

from ..client.cluster import ClusterStore
from ..components.specs import (
    SparkApplication,
    get_owner_reference,
    get_resource_labels,
    get_service_annotations,
    get_service_labels,
    get_ui_service_name,
    get_ui_service_type,
)
from ..core.naming import UINaming
from ..errors import InvalidConfigValue, InvalidPortConfig, ServiceCreateFailed
from .models import ServiceDescriptor
from .ports import resolve_service_port, resolve_service_port_name, resolve_target_port

logger = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


def _checked_port(kind: str, resolve, app: SparkApplication) -> int:
    """Resolve a port and check it is usable in a Service.

    Raises:
        InvalidPortConfig: If resolution fails or the port is out of range
    """
    try:
        port = resolve(app)
    except InvalidConfigValue as e:
        raise InvalidPortConfig(kind, e.value) from e
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortConfig(kind, port)
    return port


def build_ui_service(app: SparkApplication) -> k8s_client.V1Service:
    """Build the driver UI Service for an application without creating it.

    Raises:
        InvalidPortConfig: If the service or target port is unusable
    """
    port_name = resolve_service_port_name(app)
    port = _checked_port("servicePort", resolve_service_port, app)
    target_port = _checked_port("targetPort", resolve_target_port, app)

    labels = get_resource_labels(app)
    labels.update(get_service_labels(app))
    annotations = get_service_annotations(app)

    return k8s_client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=k8s_client.V1ObjectMeta(
            name=get_ui_service_name(app),
            namespace=app.namespace,
            labels=labels,
            # Omitted rather than empty so repeated applies do not diff
            annotations=annotations or None,
            owner_references=[get_owner_reference(app)],
        ),
        spec=k8s_client.V1ServiceSpec(
            ports=[
                k8s_client.V1ServicePort(
                    name=port_name,
                    port=port,
                    target_port=target_port,
                )
            ],
            selector=UINaming.get_driver_selector(app.name),
            type=get_ui_service_type(app),
        ),
    )


def create_ui_service(app: SparkApplication, store: ClusterStore) -> ServiceDescriptor:
    """Create the driver UI Service and describe what the cluster stored.

    The descriptor is read from the server's response, which carries the
    assigned cluster IP and any normalized fields.

    Args:
        app: Application whose driver UI is exposed
        store: Cluster store receiving the create request

    Returns:
        ServiceDescriptor for the created Service

    Raises:
        InvalidPortConfig: If ports cannot be resolved; nothing is created
        ServiceCreateFailed: If the create request fails; not retried
    """
    service = build_ui_service(app)
    name = service.metadata.name

    logger.info("Creating a service %s for the Spark UI for application %s", name, app.name)
    try:
        created = store.create_service(app.namespace, service)
    except Exception as e:
        raise ServiceCreateFailed(name, e) from e

    port = created.spec.ports[0]
    return ServiceDescriptor(
        name=created.metadata.name,
        type=created.spec.type,
        port=port.port,
        port_name=port.name,
        target_port=port.target_port,
        cluster_ip=created.spec.cluster_ip,
        annotations=dict(created.metadata.annotations or {}),
    )
