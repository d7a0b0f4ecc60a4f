"""Centralized naming conventions for Spark driver UI resources.

This module provides a single source of truth for the object names and
label keys used when exposing a SparkApplication's driver UI. Names are
derived only from the application name, so two applications in the same
namespace never share a Service or an Ingress.
"""


class UINaming:
    """Naming for driver UI Services, Ingresses and their labels.

    All label keys live under the operator's API group so that objects
    created here are selected the same way as the driver pods themselves.
    """

    API_GROUP = "sparkoperator.k8s.io"
    API_VERSION = "v1beta2"
    KIND = "SparkApplication"

    APP_NAME_LABEL = f"{API_GROUP}/app-name"
    SUBMISSION_ID_LABEL = f"{API_GROUP}/submission-id"
    ROLE_LABEL = "spark-role"
    DRIVER_ROLE = "driver"

    SERVICE_SUFFIX = "ui-svc"
    INGRESS_SUFFIX = "ui-ingress"

    @staticmethod
    def get_api_version() -> str:
        """Group/version string used in owner references.

        Returns:
            String like 'sparkoperator.k8s.io/v1beta2'
        """
        return f"{UINaming.API_GROUP}/{UINaming.API_VERSION}"

    @staticmethod
    def get_service_name(app_name: str) -> str:
        """Generate the driver UI Service name.

        Pattern: {app_name}-ui-svc

        Args:
            app_name: SparkApplication name

        Returns:
            Service name like 'spark-pi-ui-svc'
        """
        return f"{app_name}-{UINaming.SERVICE_SUFFIX}"

    @staticmethod
    def get_ingress_name(app_name: str) -> str:
        """Generate the driver UI Ingress name.

        Pattern: {app_name}-ui-ingress
        """
        return f"{app_name}-{UINaming.INGRESS_SUFFIX}"

    @staticmethod
    def get_driver_selector(app_name: str) -> dict[str, str]:
        """Label selector matching the driver pod of one application."""
        return {
            UINaming.APP_NAME_LABEL: app_name,
            UINaming.ROLE_LABEL: UINaming.DRIVER_ROLE,
        }
