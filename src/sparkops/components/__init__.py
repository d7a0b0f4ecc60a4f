"""SparkOps components and resource models."""

from .config_base import ConfigModel
from .specs import (
    IngressTLS,
    SparkApplication,
    SparkUIOptions,
)

__all__ = [
    # Base
    "ConfigModel",
    # SparkApplication
    "SparkApplication",
    "SparkUIOptions",
    "IngressTLS",
]
