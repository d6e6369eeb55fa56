"""
Tests for input validation.
"""
import pytest

from shortener_client.services.validators import is_valid_http_url, resolve_validity


class TestIsValidHttpUrl:
    """Test http(s) URL detection"""

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "http://example.com/path?q=1#frag",
        "https://sub.example.co.uk:8443/a/b",
        "http://localhost:3000",
    ])
    def test_accepts_http_and_https(self, url):
        assert is_valid_http_url(url) is True

    @pytest.mark.parametrize("url", [
        "ftp://x",
        "mailto:someone@example.com",
        "javascript:alert(1)",
        "not a url",
        "example.com",
        "http://",
        "",
    ])
    def test_rejects_other_input(self, url):
        assert is_valid_http_url(url) is False

    def test_no_length_cap(self):
        long_url = "https://example.com/" + "a" * 5000
        assert is_valid_http_url(long_url) is True


class TestResolveValidity:
    """Test validity window parsing"""

    def test_blank_defaults_to_30(self):
        assert resolve_validity("") == 30
        assert resolve_validity("  ") == 30
        assert resolve_validity(None) == 30

    def test_custom_default(self):
        assert resolve_validity("", default=5) == 5

    def test_whole_number(self):
        assert resolve_validity("15") == 15
        assert resolve_validity(" 45 ") == 45

    @pytest.mark.parametrize("raw", ["0", "-5", "2.5", "15.0", "abc", "1e3", "10 minutes"])
    def test_invalid_values(self, raw):
        assert resolve_validity(raw) is None
