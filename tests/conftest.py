"""Test configuration and shared fixtures for SparkOps tests."""

import copy

import pytest
from kubernetes import client as k8s_client

from sparkops.client import ClusterStore
from sparkops.components.specs import SparkApplication
from sparkops.core.config import ENV_OVERRIDES


class FakeClusterStore(ClusterStore):
    """In-memory cluster store.

    Records every create request and answers the way an API server would:
    the returned object is a copy of the request with a cluster IP assigned
    to Services. Creating the same name twice in a namespace is rejected
    with a 409, like the real server.
    """

    def __init__(self, server_annotations=None):
        self.services = []
        self.ingresses = []
        self.server_annotations = server_annotations or {}
        self._names = set()

    def _admit(self, kind, namespace, body):
        key = (kind, namespace, body.metadata.name)
        if key in self._names:
            raise k8s_client.exceptions.ApiException(status=409, reason="AlreadyExists")
        self._names.add(key)
        stored = copy.deepcopy(body)
        if self.server_annotations:
            stored.metadata.annotations = {
                **(stored.metadata.annotations or {}),
                **self.server_annotations,
            }
        return stored

    def create_service(self, namespace, body):
        stored = self._admit("Service", namespace, body)
        self.services.append((namespace, body))
        stored.spec.cluster_ip = f"10.96.0.{len(self.services)}"
        return stored

    def create_ingress(self, namespace, body):
        stored = self._admit("Ingress", namespace, body)
        self.ingresses.append((namespace, body))
        return stored


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and SPARKOPS_* variables."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("SPARKOPS_CONFIG", str(tmp_path / "no-config.yaml"))


@pytest.fixture
def store():
    """Fresh in-memory cluster store."""
    return FakeClusterStore()


@pytest.fixture
def make_app():
    """Factory for SparkApplication objects.

    Keyword arguments map onto the manifest: ``conf`` becomes sparkConf and
    ``ui_options`` becomes sparkUIOptions (omitted when None).
    """

    def _make(name="spark-pi", namespace="default", conf=None, ui_options=None, submission_id=None):
        manifest = {
            "apiVersion": "sparkoperator.k8s.io/v1beta2",
            "kind": "SparkApplication",
            "metadata": {"name": name, "namespace": namespace, "uid": f"uid-{name}"},
            "spec": {"sparkConf": conf or {}},
        }
        if ui_options is not None:
            manifest["spec"]["sparkUIOptions"] = ui_options
        if submission_id is not None:
            manifest["status"] = {"submissionID": submission_id}
        return SparkApplication.model_validate(manifest)

    return _make


@pytest.fixture
def make_store():
    """Factory for in-memory stores with custom server behaviour."""
    return FakeClusterStore
