"""SparkOps operator configuration.

Configuration is read from ~/.sparkops/config.yaml (or the file named by
SPARKOPS_CONFIG) and may be overridden field by field with SPARKOPS_*
environment variables. A missing file is not an error: every field has a
default that exposes the driver UI through a Service only.
"""

import logging
import os
from pathlib import Path

from pydantic import Field, field_validator

from ..components.config_base import ConfigModel

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".sparkops" / "config.yaml"
CONFIG_ENV_VAR = "SPARKOPS_CONFIG"

ENV_OVERRIDES = {
    "SPARKOPS_INGRESS_URL_FORMAT": "ingress_url_format",
    "SPARKOPS_ENABLE_UI_SERVICE": "enable_ui_service",
    "SPARKOPS_INGRESS_CLASS_NAME": "ingress_class_name",
}


class OperatorConfig(ConfigModel):
    """Operator-level settings for driver UI exposure."""

    enable_ui_service: bool = True
    """Create a Service for the driver UI of each application."""

    ingress_url_format: str | None = None
    """Ingress URL template, e.g. '{{$appName}}.spark.example.com'. Unset disables the Ingress."""

    ingress_class_name: str | None = None
    """Optional ingressClassName set on created Ingresses."""

    @field_validator("ingress_url_format", "ingress_class_name", mode="before")
    @classmethod
    def empty_as_unset(cls, v):
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def ingress_enabled(self) -> bool:
        return self.enable_ui_service and self.ingress_url_format is not None

    @classmethod
    def load(cls, path: Path | None = None) -> "OperatorConfig":
        """Load configuration with environment overrides applied.

        Args:
            path: Explicit config file; falls back to SPARKOPS_CONFIG, then
                ~/.sparkops/config.yaml

        Returns:
            Validated OperatorConfig
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else CONFIG_FILE

        config = cls.load_or_default(path)
        overrides = {
            field: os.environ[var] for var, field in ENV_OVERRIDES.items() if var in os.environ
        }
        if overrides:
            logger.debug("Applying environment overrides: %s", sorted(overrides))
            config = cls.model_validate({**config.model_dump(), **overrides})
        return config
