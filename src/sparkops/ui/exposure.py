"""One-shot driver UI exposure for a SparkApplication.

Runs Service creation and, when an ingress URL format is configured,
URL templating and Ingress creation. Each object is created exactly once
per call; deciding when to call, retrying, and persisting the returned
status belong to the caller.
"""

import logging

from ..client.cluster import ClusterStore
from ..components.specs import SparkApplication
from ..core.config import OperatorConfig
from .ingress import create_ui_ingress
from .models import DriverUIStatus
from .service import create_ui_service
from .url import build_exposure_url

logger = logging.getLogger(__name__)


def expose_driver_ui(
    app: SparkApplication, store: ClusterStore, config: OperatorConfig
) -> DriverUIStatus | None:
    """Create the driver UI Service and optional Ingress for an application.

    Args:
        app: Application whose driver UI is exposed
        store: Cluster store receiving create requests
        config: Operator settings (enable flag, URL format, ingress class)

    Returns:
        DriverUIStatus describing the created objects, or None when the UI
        service is disabled

    Raises:
        InvalidPortConfig: Port resolution failed; nothing was created
        ServiceCreateFailed: The Service could not be created
        InvalidURLTemplate: The URL format did not yield a URL; the Service
            remains
        IngressCreateFailed: The Ingress could not be created; the Service
            remains
    """
    if not config.enable_ui_service:
        logger.debug("UI service disabled, not exposing application %s", app.name)
        return None

    service = create_ui_service(app, store)
    if not config.ingress_enabled:
        return DriverUIStatus.from_descriptors(service)

    url = build_exposure_url(config.ingress_url_format, app.name, app.namespace)
    ingress = create_ui_ingress(app, service, url, store, config.ingress_class_name)
    return DriverUIStatus.from_descriptors(service, ingress)
