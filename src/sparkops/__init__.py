"""SparkOps - Spark driver UI exposure on Kubernetes."""

from ._version import __version__

# Make key components available at package level
from .ui import expose_driver_ui

__all__ = ["expose_driver_ui", "__version__"]
