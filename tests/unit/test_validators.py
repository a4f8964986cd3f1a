from pathlib import Path

import pytest

from anyparser.exceptions import ConfigurationError, InvalidUrlError, NoInputError
from anyparser.validators import (
    CrawlUrlValidator,
    OptionValidator,
    PathValidator,
    URLValidator,
    is_blank,
)


class TestIsBlank:
    def test_blank_values(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("   ")

    def test_non_blank_values(self):
        assert not is_blank("a")
        assert not is_blank(0)
        assert not is_blank(False)


class TestURLValidator:
    def test_adds_root_path(self):
        assert URLValidator.validate_url("https://example.com") == "https://example.com/"

    def test_drops_default_port_and_lowercases(self):
        assert (
            URLValidator.validate_url("HTTPS://Example.COM:443/Docs?q=1")
            == "https://example.com/Docs?q=1"
        )

    def test_keeps_custom_port(self):
        assert URLValidator.validate_url("http://localhost:8080") == "http://localhost:8080/"

    def test_strips_whitespace(self):
        assert URLValidator.validate_url("  https://example.com/a  ") == "https://example.com/a"

    @pytest.mark.parametrize(
        "url",
        ["example.com", "not a url", "ftp://example.com", "https://", "http://host:port/"],
    )
    def test_rejects_malformed_urls(self, url):
        with pytest.raises(InvalidUrlError):
            URLValidator.validate_url(url)

    def test_rejects_empty(self):
        with pytest.raises(InvalidUrlError, match="cannot be empty"):
            URLValidator.validate_url("  ")

    @pytest.mark.parametrize("url", ["ftp://example.com", "file://host/etc/passwd"])
    def test_rejects_non_http_schemes(self, url):
        with pytest.raises(InvalidUrlError, match="Only HTTP/HTTPS URLs allowed"):
            URLValidator.validate_url(url)

    def test_missing_host_is_a_format_error(self):
        with pytest.raises(InvalidUrlError, match="Invalid URL format"):
            URLValidator.validate_url("https://")


class TestCrawlUrlValidator:
    def test_single_string(self):
        assert CrawlUrlValidator.validate("https://example.com") == "https://example.com/"

    def test_first_non_blank_candidate_wins(self):
        candidates = [None, "", "   ", "https://first.example.com", "https://second.example.com"]

        assert CrawlUrlValidator.validate(candidates) == "https://first.example.com/"

    def test_first_candidate_is_not_skipped_when_invalid(self):
        with pytest.raises(InvalidUrlError):
            CrawlUrlValidator.validate(["not-a-url", "https://example.com"])

    def test_all_blank_candidates(self):
        with pytest.raises(InvalidUrlError):
            CrawlUrlValidator.validate([None, " "])

    def test_missing_candidate(self):
        with pytest.raises(InvalidUrlError):
            CrawlUrlValidator.validate(None)


class TestPathValidator:
    def test_single_path(self):
        assert PathValidator.validate_paths("a.pdf") == ["a.pdf"]

    def test_path_objects(self):
        assert PathValidator.validate_paths([Path("a.pdf"), "b.pdf"]) == ["a.pdf", "b.pdf"]

    @pytest.mark.parametrize("paths", [None, "", []])
    def test_no_input(self, paths):
        with pytest.raises(NoInputError, match="No files provided"):
            PathValidator.validate_paths(paths)

    def test_none_entry(self):
        with pytest.raises(NoInputError):
            PathValidator.validate_paths(["a.pdf", None])


class TestOptionValidator:
    def test_valid_values(self):
        OptionValidator.validate_option(
            {
                "api_url": "https://api.example.com",
                "format": "markdown",
                "model": "ocr",
                "ocr_language": ["eng", "deu"],
                "ocr_preset": "receipt",
            }
        )

    def test_missing_api_url(self):
        with pytest.raises(ConfigurationError, match="API URL is required"):
            OptionValidator.validate_option({"api_url": None})

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError, match="Unsupported encoding"):
            OptionValidator.validate_option({"api_url": "https://a.b", "encoding": "ebcdic"})

    def test_unknown_traversal_scope(self):
        with pytest.raises(ConfigurationError, match="Invalid traversal scope"):
            OptionValidator.validate_option(
                {"api_url": "https://a.b", "traversal_scope": "internet"}
            )
