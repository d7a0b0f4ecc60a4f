"""Driver UI exposure commands."""

from pathlib import Path
from typing import Optional

import typer

from ..client import load_cluster_store
from ..components.specs import SparkApplication
from ..core.config import OperatorConfig
from ..errors import SparkOpsError
from ..ui import (
    ServiceDescriptor,
    build_exposure_url,
    build_ui_ingress,
    build_ui_service,
    expose_driver_ui,
)
from .display import error, info, info_dict, manifest, section, success, urls

app = typer.Typer(help="Expose Spark driver UIs through Services and Ingresses")

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Operator config file (default: $SPARKOPS_CONFIG or ~/.sparkops/config.yaml)"
)


@app.command()
def plan(
    app_file: Path = typer.Argument(..., help="SparkApplication manifest (YAML)"),
    config_file: Optional[Path] = CONFIG_OPTION,
):
    """Print the Service and Ingress manifests without touching the cluster."""
    spark_app = SparkApplication.from_yaml(app_file)
    config = OperatorConfig.load(config_file)

    try:
        service = build_ui_service(spark_app)
        section(f"Service {service.metadata.name}")
        manifest(service)

        if config.ingress_enabled:
            port = service.spec.ports[0]
            planned = ServiceDescriptor(
                name=service.metadata.name,
                type=service.spec.type,
                port=port.port,
                port_name=port.name,
                target_port=port.target_port,
            )
            url = build_exposure_url(config.ingress_url_format, spark_app.name, spark_app.namespace)
            ingress = build_ui_ingress(spark_app, planned, url, config.ingress_class_name)
            section(f"Ingress {ingress.metadata.name} ({url})")
            manifest(ingress)
    except SparkOpsError as e:
        error(str(e))
        raise typer.Exit(1)


@app.command()
def expose(
    app_file: Path = typer.Argument(..., help="SparkApplication manifest (YAML)"),
    config_file: Optional[Path] = CONFIG_OPTION,
    kubeconfig: Optional[Path] = typer.Option(None, "--kubeconfig", help="Kubeconfig file"),
    context: Optional[str] = typer.Option(None, "--context", help="Kubeconfig context"),
):
    """Create the driver UI Service (and Ingress when configured)."""
    spark_app = SparkApplication.from_yaml(app_file)
    config = OperatorConfig.load(config_file)

    try:
        store = load_cluster_store(kubeconfig, context)
        status = expose_driver_ui(spark_app, store, config)
    except SparkOpsError as e:
        error(str(e))
        raise typer.Exit(1)

    if status is None:
        info("UI service is disabled in the operator configuration; nothing created")
        return

    success(f"Exposed Spark UI for {spark_app.namespace}/{spark_app.name}")
    fields = status.to_json()
    ingress_address = fields.pop("webUIIngressAddress", None)
    info_dict(fields)
    if ingress_address:
        urls({"webUIIngressAddress": ingress_address})


@app.command()
def url(
    template: str = typer.Argument(..., help="URL template, e.g. '{{$appName}}.spark.example.com'"),
    name: str = typer.Option(..., "--name", "-n", help="Application name"),
    namespace: str = typer.Option("default", "--namespace", help="Application namespace"),
):
    """Resolve an ingress URL template for an application."""
    try:
        resolved = build_exposure_url(template, name, namespace)
    except SparkOpsError as e:
        error(str(e))
        raise typer.Exit(1)
    info(str(resolved))
