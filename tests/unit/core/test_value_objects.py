"""
Unit tests for value objects.
"""

import pytest

from core.domain.value_objects import AbsoluteUri, UriReference


class TestAbsoluteUri:
    """Tests for AbsoluteUri value object."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://sportmaster.com",
            "http://example.com:8080/path?q=1#top",
            "https://sub.example.co.uk/a%20b",
            "ftp://files.example.com/pub",
            "mailto:team@example.com",
        ],
    )
    def test_valid_uri(self, value):
        """Test valid absolute URIs."""
        assert str(AbsoluteUri(value)) == value

    @pytest.mark.parametrize(
        "value,message",
        [
            ("", "cannot be empty"),
            ("not-a-valid-url", "scheme"),
            ("1http://example.com", "scheme"),
            ("https:", "nothing after the scheme"),
            ("https:///path-only", "host"),
            ("https://example.com/a b", "not allowed"),
            ("https://example.com/%4", "percent-encoding"),
            ("https://a.com/#x#y", "only one"),
            ("https://a.com/[x]", "IPv6 host"),
        ],
    )
    def test_invalid_uri(self, value, message):
        """Test invalid absolute URIs."""
        with pytest.raises(ValueError, match=message):
            AbsoluteUri(value)

    def test_ipv6_host(self):
        """Test brackets are accepted around an IPv6 host."""
        uri = AbsoluteUri("http://[2001:db8::1]:8080/status")
        assert str(uri) == "http://[2001:db8::1]:8080/status"

    def test_invalid_port(self):
        """Test a non-numeric port is rejected for web URLs."""
        with pytest.raises(ValueError):
            AbsoluteUri("https://example.com:abc/")

    def test_uri_equality(self):
        """Test URIs compare by value."""
        assert AbsoluteUri("https://a.test") == AbsoluteUri("https://a.test")
        assert hash(AbsoluteUri("https://a.test")) == hash(AbsoluteUri("https://a.test"))


class TestUriReference:
    """Tests for UriReference value object."""

    def test_relative_reference(self):
        """Test relative references such as asset file names."""
        reference = UriReference("sportmaster-logo.png")
        assert not reference.is_absolute
        assert str(reference) == "sportmaster-logo.png"

    def test_absolute_reference(self):
        """Test absolute references are checked like absolute URIs."""
        reference = UriReference("https://cdn.example.com/logo.png")
        assert reference.is_absolute

    def test_absolute_reference_without_host(self):
        """Test web URLs still need a host."""
        with pytest.raises(ValueError, match="host"):
            UriReference("https:///logo.png")

    def test_spaces_rejected(self):
        """Test whitespace is not allowed in references."""
        with pytest.raises(ValueError, match="not allowed"):
            UriReference("my logo.png")

    @pytest.mark.parametrize(
        "value,message",
        [
            ("1abc:foo", "first path segment"),
            ("logo:v2.png", "first path segment"),
            ("logo.png#a#b", "only one"),
            ("logos/[acme].png", "IPv6 host"),
        ],
    )
    def test_malformed_relative_references(self, value, message):
        """Test relative references follow the RFC 3986 grammar."""
        with pytest.raises(ValueError, match=message):
            UriReference(value)

    def test_colon_after_first_segment(self):
        """Test a colon is fine once the first segment has ended."""
        assert not UriReference("logos/v2:acme.png").is_absolute
