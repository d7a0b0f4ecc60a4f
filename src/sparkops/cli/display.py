"""Consolidated display utilities for CLI commands."""
from typing import Any, Dict

import yaml
from kubernetes import client as k8s_client
from rich.console import Console
from rich.syntax import Syntax

console = Console()


def success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠️  {message}[/yellow]")


def error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]❌ {message}[/red]")


def info(message: str) -> None:
    """Print info message."""
    console.print(message)


def section(title: str) -> None:
    """Print section header."""
    console.print(f"\n[bold]{title}[/bold]")


def info_dict(data: Dict[str, Any], indent: str = "  ") -> None:
    """Print a dictionary as indented key-value pairs."""
    for key, value in data.items():
        console.print(f"{indent}{key}: {value}")


def urls(url_map: Dict[str, str], indent: str = "  ") -> None:
    """Print URLs with highlighting."""
    for label, url in url_map.items():
        if url.startswith("http"):
            console.print(f"{indent}{label}: [cyan]{url}[/cyan]")
        else:
            console.print(f"{indent}{label}: {url}")


def manifest(obj: Any) -> None:
    """Print a Kubernetes model object as a YAML manifest."""
    data = k8s_client.ApiClient().sanitize_for_serialization(obj)
    text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    console.print(Syntax(text, "yaml", theme="ansi_dark", background_color="default"))
