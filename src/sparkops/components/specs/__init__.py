"""Resource specifications for SparkOps."""

from .application import (
    ApplicationMetadata,
    IngressTLS,
    SparkApplication,
    SparkApplicationSpec,
    SparkApplicationStatus,
    SparkUIOptions,
    get_ingress_annotations,
    get_ingress_tls,
    get_owner_reference,
    get_resource_labels,
    get_service_annotations,
    get_service_labels,
    get_ui_ingress_name,
    get_ui_service_name,
    get_ui_service_type,
)

__all__ = [
    # Models
    "ApplicationMetadata",
    "IngressTLS",
    "SparkApplication",
    "SparkApplicationSpec",
    "SparkApplicationStatus",
    "SparkUIOptions",
    # Accessors
    "get_ingress_annotations",
    "get_ingress_tls",
    "get_owner_reference",
    "get_resource_labels",
    "get_service_annotations",
    "get_service_labels",
    "get_ui_ingress_name",
    "get_ui_service_name",
    "get_ui_service_type",
]
