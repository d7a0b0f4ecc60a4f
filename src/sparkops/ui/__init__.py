"""Spark driver UI exposure: ports, Service, URL templating and Ingress."""

from .exposure import expose_driver_ui
from .ingress import build_ui_ingress, create_ui_ingress
from .models import DriverUIStatus, IngressDescriptor, ServiceDescriptor
from .ports import resolve_service_port, resolve_service_port_name, resolve_target_port
from .service import build_ui_service, create_ui_service
from .url import ResolvedURL, build_exposure_url

__all__ = [
    "DriverUIStatus",
    "IngressDescriptor",
    "ResolvedURL",
    "ServiceDescriptor",
    "build_exposure_url",
    "build_ui_ingress",
    "build_ui_service",
    "create_ui_ingress",
    "create_ui_service",
    "expose_driver_ui",
    "resolve_service_port",
    "resolve_service_port_name",
    "resolve_target_port",
]
