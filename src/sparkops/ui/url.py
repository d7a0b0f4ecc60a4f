"""Ingress URL templating.

Templates may reference the application with ``{{ $appName }}`` and
``{{ $appNamespace }}`` (whitespace inside the braces is optional). The
name is substituted first and the namespace placeholder is then replaced in
that result, so a name that itself contains the namespace placeholder text
is expanded twice.
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit, urlunsplit

from ..errors import InvalidURLTemplate

APP_NAME_PLACEHOLDER = re.compile(r"{{\s*[$]appName\s*}}")
APP_NAMESPACE_PLACEHOLDER = re.compile(r"{{\s*[$]appNamespace\s*}}")

DEFAULT_SCHEME = "http"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_FIRST_SEGMENT = re.compile(r"[^/?#]*")


@dataclass(frozen=True)
class ResolvedURL:
    """A parsed URL with a guaranteed scheme.

    ``host`` includes the port when one is given; ``path`` is
    percent-decoded and may be empty. ``raw_path`` keeps the escaped form
    when it differs from ``path`` and is what ``geturl`` renders.
    """

    scheme: str
    host: str
    path: str = ""
    query: str = ""
    fragment: str = ""
    userinfo: str = ""
    raw_path: str = ""

    @classmethod
    def parse(cls, text: str) -> "ResolvedURL":
        """Parse a URL string.

        The result may have an empty scheme; callers decide what to do
        about it.

        Raises:
            ValueError: If the string is not a well-formed URL
        """
        if _CONTROL_CHARS.search(text):
            raise ValueError("invalid control character in URL")
        if text != text.strip():
            raise ValueError("leading or trailing whitespace in URL")

        parts = urlsplit(text)
        # Accessing the port validates it (digits only, 0-65535)
        parts.port
        userinfo, _, host = parts.netloc.rpartition("@")
        if " " in host:
            raise ValueError(f"invalid character ' ' in host name {host!r}")
        # Schemes start with a letter; otherwise the text is a relative path
        if not parts.scheme[:1].isalpha() and not text.startswith("/"):
            if ":" in _FIRST_SEGMENT.match(text).group():
                raise ValueError("first path segment in URL cannot contain colon")

        bad = _BAD_ESCAPE.search(parts.path)
        if bad:
            raise ValueError(f"invalid URL escape {parts.path[bad.start():bad.start() + 3]!r}")
        path = unquote(parts.path)

        return cls(
            scheme=parts.scheme,
            host=host,
            path=path,
            raw_path=parts.path if parts.path != path else "",
            query=parts.query,
            fragment=parts.fragment,
            userinfo=userinfo,
        )

    @property
    def netloc(self) -> str:
        return f"{self.userinfo}@{self.host}" if self.userinfo else self.host

    def geturl(self) -> str:
        return urlunsplit((self.scheme, self.netloc, self.raw_path or self.path, self.query, self.fragment))

    def __str__(self) -> str:
        return self.geturl()


def expand_url_template(template: str, app_name: str, app_namespace: str) -> str:
    """Substitute the application placeholders in a URL template."""
    expanded = APP_NAME_PLACEHOLDER.sub(lambda _: app_name, template)
    return APP_NAMESPACE_PLACEHOLDER.sub(lambda _: app_namespace, expanded)


def build_exposure_url(template: str, app_name: str, app_namespace: str) -> ResolvedURL:
    """Expand a URL template and parse it, defaulting the scheme to http.

    Args:
        template: URL template such as '{{$appName}}.spark.example.com/ui'
        app_name: Application name substituted for $appName
        app_namespace: Application namespace substituted for $appNamespace

    Returns:
        ResolvedURL with a non-empty scheme

    Raises:
        InvalidURLTemplate: If the expanded URL cannot be parsed, with or
            without the default scheme
    """
    url = expand_url_template(template, app_name, app_namespace)
    try:
        parsed = ResolvedURL.parse(url)
    except ValueError as e:
        raise InvalidURLTemplate(url, str(e)) from e

    if parsed.scheme:
        return parsed

    schemed = f"{DEFAULT_SCHEME}://{url}"
    try:
        return ResolvedURL.parse(schemed)
    except ValueError as e:
        raise InvalidURLTemplate(schemed, str(e)) from e
