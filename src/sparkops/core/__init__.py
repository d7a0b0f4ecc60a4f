"""Core naming and configuration for SparkOps."""

from .naming import UINaming

__all__ = ["UINaming"]
