"""Format checks for values found in manifests."""

import re
from typing import Any
from urllib.parse import urlsplit

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
_HOST_PATTERN = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*$")


def url_validation(value: Any) -> bool:
    """Check whether a value is an absolute http(s) url.

    Args:
        value: Value to check (anything that is not a string fails)

    Returns:
        True if the value is a syntactically valid url

    Examples:
        >>> url_validation("https://addon-host.com/hello-world")
        True
        >>> url_validation("addon-host.com")
        False
    """
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        return False

    try:
        parts = urlsplit(value)
        hostname = parts.hostname
        parts.port  # raises ValueError on an out of range port
    except ValueError:
        return False

    if parts.scheme not in ("http", "https") or not hostname:
        return False

    return bool(_HOST_PATTERN.match(hostname))


def email_validation(value: Any) -> bool:
    """Check whether a value looks like an e-mail address.

    Examples:
        >>> email_validation("dev@addon-host.com")
        True
        >>> email_validation("dev@localhost")
        False
    """
    if not isinstance(value, str):
        return False
    return bool(_EMAIL_PATTERN.match(value))
