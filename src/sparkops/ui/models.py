"""Records describing driver UI objects created in the cluster.

Descriptor annotations are read-only mappings and TLS entries are tuples.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .url import ResolvedURL


def _frozen_mapping(data) -> Mapping:
    """Read-only copy of a mapping."""
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class ServiceDescriptor:
    """Driver UI Service as confirmed by the cluster."""

    name: str
    type: str
    port: int
    port_name: str
    target_port: int | str
    cluster_ip: str | None = None
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "annotations", _frozen_mapping(self.annotations))


@dataclass(frozen=True)
class IngressDescriptor:
    """Driver UI Ingress as confirmed by the cluster."""

    name: str
    url: ResolvedURL
    annotations: Mapping[str, str] = field(default_factory=dict)
    tls_hosts: tuple[Mapping[str, Any], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "annotations", _frozen_mapping(self.annotations))
        object.__setattr__(
            self,
            "tls_hosts",
            tuple(
                _frozen_mapping({**tls, "hosts": tuple(tls.get("hosts") or ())})
                for tls in self.tls_hosts
            ),
        )


@dataclass(frozen=True)
class DriverUIStatus:
    """Driver UI fields a controller records in the application status.

    ``web_ui_address`` is the in-cluster ``<clusterIP>:<port>`` address and
    ``web_ui_ingress_address`` the external URL, when an Ingress exists.
    """

    web_ui_service_name: str
    web_ui_port: int
    web_ui_address: str
    web_ui_ingress_name: str | None = None
    web_ui_ingress_address: str | None = None

    @classmethod
    def from_descriptors(
        cls, service: ServiceDescriptor, ingress: IngressDescriptor | None = None
    ) -> "DriverUIStatus":
        return cls(
            web_ui_service_name=service.name,
            web_ui_port=service.port,
            web_ui_address=f"{service.cluster_ip or ''}:{service.port}",
            web_ui_ingress_name=ingress.name if ingress else None,
            web_ui_ingress_address=str(ingress.url) if ingress else None,
        )

    def to_json(self) -> dict:
        """JSON-serializable representation using status field names."""
        data = {
            "webUIServiceName": self.web_ui_service_name,
            "webUIPort": self.web_ui_port,
            "webUIAddress": self.web_ui_address,
        }
        if self.web_ui_ingress_name:
            data["webUIIngressName"] = self.web_ui_ingress_name
            data["webUIIngressAddress"] = self.web_ui_ingress_address
        return data
