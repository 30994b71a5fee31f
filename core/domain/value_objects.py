"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
import string
from abc import ABC
from dataclasses import dataclass
from urllib.parse import urlsplit

# RFC 3986 unreserved + reserved characters, plus the percent sign
_URI_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_FIRST_SEGMENT = re.compile(r"[/?#]")
_WEB_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


def _check_uri_syntax(value: str) -> None:
    if not value or len(value.strip()) == 0:
        raise ValueError("URI cannot be empty")
    if any(char not in _URI_CHARACTERS for char in value):
        raise ValueError("URI contains characters that are not allowed")
    if _PERCENT_ESCAPE.search(value):
        raise ValueError("URI contains a malformed percent-encoding")
    if value.count("#") > 1:
        raise ValueError("URI may contain only one '#' fragment delimiter")
    if "[" in value or "]" in value:
        netloc = urlsplit(value).netloc
        outside = value.replace(netloc, "", 1) if netloc else value
        if "[" in outside or "]" in outside:
            raise ValueError("URI may use '[' and ']' only around an IPv6 host")


def _check_absolute(value: str) -> None:
    if not _SCHEME.match(value):
        raise ValueError("URI must start with a scheme such as https:")
    parts = urlsplit(value)
    if not (parts.netloc or parts.path or parts.query):
        raise ValueError("URI has nothing after the scheme")
    if parts.scheme.lower() in _WEB_SCHEMES:
        if not parts.hostname:
            raise ValueError("URL must include a host")
        # Accessing .port validates the port component
        parts.port


@dataclass(frozen=True)
class AbsoluteUri(ValueObject):
    """Absolute URI with a scheme, e.g. a brand's website."""

    value: str

    def __post_init__(self):
        """Validate URI syntax."""
        _check_uri_syntax(self.value)
        _check_absolute(self.value)

    def __str__(self) -> str:
        """Return URI as string."""
        return self.value


@dataclass(frozen=True)
class UriReference(ValueObject):
    """
    URI reference: either an absolute URI or a relative reference
    such as an asset path (``sportmaster-logo.png``).
    """

    value: str

    def __post_init__(self):
        """Validate reference syntax."""
        _check_uri_syntax(self.value)
        if self.is_absolute:
            _check_absolute(self.value)
        elif ":" in _FIRST_SEGMENT.split(self.value, 1)[0]:
            raise ValueError("Relative reference cannot have ':' in its first path segment")

    @property
    def is_absolute(self) -> bool:
        """True when the reference carries a scheme."""
        return bool(_SCHEME.match(self.value))

    def __str__(self) -> str:
        """Return reference as string."""
        return self.value
