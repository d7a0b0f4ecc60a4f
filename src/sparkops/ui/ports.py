"""Driver UI port resolution.

Three values are resolved independently because each has its own fallback
chain:

- target port: ``spark.ui.port`` from sparkConf, else the default port
- service port: when UI options are absent, the target port; otherwise the
  explicit ``servicePort``, else the default port. The conf map is not
  consulted once UI options exist.
- port name: the explicit ``servicePortName``, else the default name
"""

import logging
import re

from ..components.specs import SparkApplication
from ..errors import InvalidConfigValue

logger = logging.getLogger(__name__)

SPARK_UI_PORT_KEY = "spark.ui.port"
DEFAULT_UI_PORT = 4040
DEFAULT_UI_PORT_NAME = "spark-driver-ui-port"

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


def parse_port_value(key: str, value: str) -> int:
    """Parse a Spark property as a base-10 integer.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace, underscores and other forms ``int()`` tolerates are not.

    Raises:
        InvalidConfigValue: If the value is not a base-10 integer
    """
    if not _INTEGER.match(value):
        raise InvalidConfigValue(key, value)
    return int(value)


def resolve_target_port(app: SparkApplication) -> int:
    """Port the driver UI listens on inside the driver pod.

    Raises:
        InvalidConfigValue: If spark.ui.port is set but not numeric
    """
    value = app.spark_conf.get(SPARK_UI_PORT_KEY)
    if value is None:
        return DEFAULT_UI_PORT
    port = parse_port_value(SPARK_UI_PORT_KEY, value)
    logger.debug("Using %s=%d for application %s", SPARK_UI_PORT_KEY, port, app.name)
    return port


def resolve_service_port(app: SparkApplication) -> int:
    """Port advertised by the driver UI Service."""
    options = app.ui_options
    if options is None:
        return resolve_target_port(app)
    if options.service_port is not None:
        return options.service_port
    return DEFAULT_UI_PORT


def resolve_service_port_name(app: SparkApplication) -> str:
    """Name of the driver UI Service port."""
    options = app.ui_options
    if options is not None and options.service_port_name is not None:
        return options.service_port_name
    return DEFAULT_UI_PORT_NAME
