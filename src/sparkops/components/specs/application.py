"""SparkApplication models and the accessors used for driver UI exposure.

Only the parts of the SparkApplication resource that matter for exposing
the driver UI are modelled; everything else in a manifest is accepted and
carried along untouched.
"""

from typing import Literal

from kubernetes import client as k8s_client
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...core.naming import UINaming
from ..config_base import ConfigModel

SERVICE_TYPES = ("ClusterIP", "NodePort", "LoadBalancer")


def _conf_value(value) -> str:
    """Render a YAML scalar the way Spark spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


class IngressTLS(BaseModel):
    """TLS entry attached to the driver UI Ingress."""

    model_config = ConfigDict(populate_by_name=True)

    hosts: list[str] = Field(default_factory=list)
    secret_name: str | None = Field(None, alias="secretName")


class SparkUIOptions(BaseModel):
    """Explicit driver UI exposure options.

    Every field is optional; ``None`` means "not set" and selects the
    default for that field, which keeps an explicit ``0`` distinguishable
    from an absent value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    service_port: int | None = Field(None, alias="servicePort")
    service_port_name: str | None = Field(None, alias="servicePortName")
    service_type: str | None = Field(None, alias="serviceType")
    service_annotations: dict[str, str] | None = Field(None, alias="serviceAnnotations")
    service_labels: dict[str, str] | None = Field(None, alias="serviceLabels")
    ingress_annotations: dict[str, str] | None = Field(None, alias="ingressAnnotations")
    ingress_tls: list[IngressTLS] | None = Field(None, alias="ingressTLS")

    @field_validator("service_type")
    @classmethod
    def validate_service_type(cls, v):
        """Validate the Kubernetes Service type."""
        if v is not None and v not in SERVICE_TYPES:
            raise ValueError(f"Unknown service type: {v}. Valid types: {', '.join(SERVICE_TYPES)}")
        return v


class ApplicationMetadata(BaseModel):
    """Subset of ObjectMeta read from the application."""

    model_config = ConfigDict(extra="allow")

    name: str
    namespace: str = "default"
    uid: str = ""
    labels: dict[str, str] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Application name must be non-empty."""
        if not v:
            raise ValueError("metadata.name cannot be empty")
        return v


class SparkApplicationSpec(BaseModel):
    """Spec fields consulted for driver UI exposure."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    spark_conf: dict[str, str] = Field(default_factory=dict, alias="sparkConf")
    spark_ui_options: SparkUIOptions | None = Field(None, alias="sparkUIOptions")

    @field_validator("spark_conf", mode="before")
    @classmethod
    def stringify_conf(cls, v):
        """Spark properties are strings; YAML may hand us ints or bools."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): _conf_value(value) for key, value in v.items()}
        return v


class SparkApplicationStatus(BaseModel):
    """Status fields propagated onto created objects."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    submission_id: str | None = Field(None, alias="submissionID")


class SparkApplication(ConfigModel):
    """A SparkApplication resource as read from the cluster or a manifest."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    api_version: str = Field(UINaming.get_api_version(), alias="apiVersion")
    kind: Literal["SparkApplication"] = "SparkApplication"
    metadata: ApplicationMetadata
    spec: SparkApplicationSpec = Field(default_factory=SparkApplicationSpec)
    status: SparkApplicationStatus | None = None

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def spark_conf(self) -> dict[str, str]:
        return self.spec.spark_conf

    @property
    def ui_options(self) -> SparkUIOptions | None:
        return self.spec.spark_ui_options


def get_resource_labels(app: SparkApplication) -> dict[str, str]:
    """Labels identifying objects created on behalf of an application."""
    labels = {UINaming.APP_NAME_LABEL: app.name}
    if app.status is not None and app.status.submission_id:
        labels[UINaming.SUBMISSION_ID_LABEL] = app.status.submission_id
    return labels


def get_owner_reference(app: SparkApplication) -> k8s_client.V1OwnerReference:
    """Owner reference making the application the controller of a child.

    The reference only identifies the parent; the cluster uses it to
    cascade deletes when the application goes away.
    """
    return k8s_client.V1OwnerReference(
        api_version=UINaming.get_api_version(),
        kind=UINaming.KIND,
        name=app.name,
        uid=app.metadata.uid,
        controller=True,
    )


def get_ui_service_name(app: SparkApplication) -> str:
    return UINaming.get_service_name(app.name)


def get_ui_ingress_name(app: SparkApplication) -> str:
    return UINaming.get_ingress_name(app.name)


def get_ui_service_type(app: SparkApplication) -> str:
    """Service type from UI options, defaulting to ClusterIP."""
    options = app.ui_options
    if options is not None and options.service_type:
        return options.service_type
    return "ClusterIP"


def get_service_annotations(app: SparkApplication) -> dict[str, str]:
    options = app.ui_options
    if options is None or not options.service_annotations:
        return {}
    return dict(options.service_annotations)


def get_service_labels(app: SparkApplication) -> dict[str, str]:
    options = app.ui_options
    if options is None or not options.service_labels:
        return {}
    return dict(options.service_labels)


def get_ingress_annotations(app: SparkApplication) -> dict[str, str]:
    options = app.ui_options
    if options is None or not options.ingress_annotations:
        return {}
    return dict(options.ingress_annotations)


def get_ingress_tls(app: SparkApplication) -> list[k8s_client.V1IngressTLS]:
    """TLS entries from UI options as Kubernetes model objects."""
    options = app.ui_options
    if options is None or not options.ingress_tls:
        return []
    return [
        k8s_client.V1IngressTLS(hosts=list(tls.hosts), secret_name=tls.secret_name)
        for tls in options.ingress_tls
    ]
