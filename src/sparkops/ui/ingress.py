"""Driver UI Ingress provisioning.

When the UI is served on a sub-path the Ingress path becomes a regex with
two capture groups and the nginx rewrite annotation passes the second group
upstream, so the driver sees requests rooted at ``/`` whatever the public
prefix is.
"""

import logging

from kubernetes import client as k8s_client

from ..client.cluster import ClusterStore
from ..components.specs import (
    SparkApplication,
    get_ingress_annotations,
    get_ingress_tls,
    get_owner_reference,
    get_resource_labels,
    get_ui_ingress_name,
)
from ..errors import IngressCreateFailed
from .models import IngressDescriptor, ServiceDescriptor
from .url import ResolvedURL

logger = logging.getLogger(__name__)

REWRITE_TARGET_ANNOTATION = "nginx.ingress.kubernetes.io/rewrite-target"
REWRITE_TARGET_VALUE = "/$2"
SUBPATH_SUFFIX = "(/|$)(.*)"
PATH_TYPE = "ImplementationSpecific"


def is_subpath(path: str) -> bool:
    """True when a URL path mounts the UI below the host root."""
    return path not in ("", "/")


def ingress_path(path: str) -> str:
    """Ingress path for a URL path, with capture groups for sub-paths."""
    if is_subpath(path):
        return path + SUBPATH_SUFFIX
    return path


def build_ui_ingress(
    app: SparkApplication,
    service: ServiceDescriptor,
    url: ResolvedURL,
    ingress_class_name: str | None = None,
) -> k8s_client.V1Ingress:
    """Build the driver UI Ingress without creating it.

    Annotations from the application's UI options are applied first; the
    rewrite annotation for sub-paths is set after them and wins on a key
    collision.
    """
    annotations = get_ingress_annotations(app)
    if is_subpath(url.path):
        annotations[REWRITE_TARGET_ANNOTATION] = REWRITE_TARGET_VALUE
    tls = get_ingress_tls(app)

    backend = k8s_client.V1IngressBackend(
        service=k8s_client.V1IngressServiceBackend(
            name=service.name,
            port=k8s_client.V1ServiceBackendPort(number=service.port),
        )
    )

    return k8s_client.V1Ingress(
        api_version="networking.k8s.io/v1",
        kind="Ingress",
        metadata=k8s_client.V1ObjectMeta(
            name=get_ui_ingress_name(app),
            namespace=app.namespace,
            labels=get_resource_labels(app),
            annotations=annotations or None,
            owner_references=[get_owner_reference(app)],
        ),
        spec=k8s_client.V1IngressSpec(
            ingress_class_name=ingress_class_name,
            rules=[
                k8s_client.V1IngressRule(
                    host=url.host or None,
                    http=k8s_client.V1HTTPIngressRuleValue(
                        paths=[
                            k8s_client.V1HTTPIngressPath(
                                path=ingress_path(url.path) or None,
                                path_type=PATH_TYPE,
                                backend=backend,
                            )
                        ]
                    ),
                )
            ],
            tls=tls or None,
        ),
    )


def create_ui_ingress(
    app: SparkApplication,
    service: ServiceDescriptor,
    url: ResolvedURL,
    store: ClusterStore,
    ingress_class_name: str | None = None,
) -> IngressDescriptor:
    """Create the driver UI Ingress routing ``url`` to ``service``.

    Args:
        app: Application whose driver UI is exposed
        service: Descriptor of the already created driver UI Service
        url: Public URL of the UI
        store: Cluster store receiving the create request
        ingress_class_name: Optional ingress class for the Ingress

    Returns:
        IngressDescriptor echoing the server-confirmed name, annotations
        and TLS entries

    Raises:
        IngressCreateFailed: If the create request fails; not retried, and
            the Service is left in place
    """
    ingress = build_ui_ingress(app, service, url, ingress_class_name)
    name = ingress.metadata.name

    logger.info("Creating an Ingress %s for the Spark UI for application %s", name, app.name)
    try:
        created = store.create_ingress(app.namespace, ingress)
    except Exception as e:
        raise IngressCreateFailed(name, e) from e

    tls_hosts = [
        {"hosts": list(tls.hosts or []), "secret_name": tls.secret_name}
        for tls in (created.spec.tls or [])
    ]
    return IngressDescriptor(
        name=created.metadata.name,
        url=url,
        annotations=dict(created.metadata.annotations or {}),
        tls_hosts=tls_hosts,
    )
