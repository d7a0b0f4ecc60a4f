"""Error types for SparkOps."""


class SparkOpsError(Exception):
    """Base exception for SparkOps errors."""
    pass


class ConfigError(SparkOpsError):
    """Configuration error."""
    pass


class InvalidConfigValue(ConfigError):
    """A Spark configuration property holds a value that cannot be used."""

    def __init__(self, key: str, value: str):
        super().__init__(f"invalid value for {key}: {value!r} is not a base-10 integer")
        self.key = key
        self.value = value


class InvalidPortConfig(ConfigError):
    """The driver UI service or target port could not be resolved."""

    def __init__(self, kind: str, value):
        super().__init__(f"invalid Spark UI {kind}: {value}")
        self.kind = kind
        self.value = value


class InvalidURLTemplate(ConfigError):
    """An ingress URL template expands to something that is not a URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid ingress URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ResourceCreateError(SparkOpsError):
    """The cluster rejected or failed to process a create request."""

    kind = "resource"

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"failed to create {self.kind} {name}: {cause}")
        self.name = name
        self.cause = cause


class ServiceCreateFailed(ResourceCreateError):
    """Creating the driver UI Service failed."""

    kind = "Service"


class IngressCreateFailed(ResourceCreateError):
    """Creating the driver UI Ingress failed."""

    kind = "Ingress"
