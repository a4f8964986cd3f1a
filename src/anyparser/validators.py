"""
Validation utilities for client options and parse inputs.
"""

import os
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
from urllib.parse import urlsplit, urlunsplit

from .constants import (
    ENCODINGS,
    FORMATS,
    MODELS,
    OCR_LANGUAGES,
    OCR_PRESETS,
    STRATEGIES,
    TRAVERSAL_SCOPES,
)
from .exceptions import ConfigurationError, InvalidUrlError, NoInputError

PathsOrUrl = Union[str, os.PathLike, Sequence[Optional[Union[str, os.PathLike]]], None]


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


class URLValidator:
    """Absolute http(s) URL validation and canonicalization."""

    DEFAULT_PORTS = {"http": 80, "https": 443}

    @classmethod
    def validate_url(cls, url: Any) -> str:
        """Parse ``url`` as an absolute URL and return its canonical form.

        Scheme and host are lower-cased, a default port is dropped and an
        empty path becomes ``/``.
        """
        if is_blank(url):
            raise InvalidUrlError("URL cannot be empty")

        text = str(url).strip()
        try:
            parsed = urlsplit(text)
            port = parsed.port
        except ValueError as e:
            raise InvalidUrlError(f"Invalid URL format: {text}", {"url": text}) from e

        scheme = parsed.scheme.lower()
        if not scheme or not parsed.hostname:
            raise InvalidUrlError(f"Invalid URL format: {text}", {"url": text})
        if scheme not in cls.DEFAULT_PORTS:
            raise InvalidUrlError(
                f"Only HTTP/HTTPS URLs allowed: {text}", {"url": text, "scheme": scheme}
            )

        host = parsed.hostname
        if ":" in host:
            host = f"[{host}]"

        netloc = host
        if port is not None and port != cls.DEFAULT_PORTS[scheme]:
            netloc = f"{netloc}:{port}"
        if parsed.username is not None:
            userinfo = parsed.username
            if parsed.password is not None:
                userinfo = f"{userinfo}:{parsed.password}"
            netloc = f"{userinfo}@{netloc}"

        return urlunsplit(
            (scheme, netloc, parsed.path or "/", parsed.query, parsed.fragment)
        )


class CrawlUrlValidator:
    """Picks and validates the start URL for crawler requests."""

    @classmethod
    def select_candidate(cls, candidates: PathsOrUrl) -> Optional[str]:
        """Return the first defined, non-blank candidate."""
        if isinstance(candidates, str) or candidates is None:
            return None if is_blank(candidates) else candidates

        for candidate in candidates:
            if not is_blank(candidate):
                return candidate
        return None

    @classmethod
    def validate(cls, candidates: PathsOrUrl) -> str:
        candidate = cls.select_candidate(candidates)
        if candidate is None:
            raise InvalidUrlError("No URL to crawl was provided")
        return URLValidator.validate_url(candidate)


class PathValidator:
    """Shape checks on the raw path input, before touching the filesystem."""

    @classmethod
    def validate_paths(cls, paths: PathsOrUrl) -> List[str]:
        if paths is None or (isinstance(paths, str) and paths == ""):
            raise NoInputError("No files provided")

        files = [paths] if isinstance(paths, (str, os.PathLike)) else list(paths)
        if not files:
            raise NoInputError("No files provided")

        if any(path is None for path in files):
            raise NoInputError("No files provided", {"paths": files})

        return [os.fspath(path) for path in files]


class OptionValidator:
    """Enumerated-value checks on merged option values."""

    @classmethod
    def validate_option(cls, values: Mapping[str, Any]) -> None:
        if is_blank(values.get("api_url")):
            raise ConfigurationError("API URL is required")

        cls._check_choice(values, "format", FORMATS, "Unsupported format")
        cls._check_choice(values, "model", MODELS, "Unsupported model")
        cls._check_choice(values, "encoding", ENCODINGS, "Unsupported encoding")
        cls._check_choice(values, "strategy", STRATEGIES, "Invalid crawl strategy")
        cls._check_choice(
            values, "traversal_scope", TRAVERSAL_SCOPES, "Invalid traversal scope"
        )

        languages = values.get("ocr_language")
        if languages is not None:
            for language in cls._as_values(languages):
                if language not in OCR_LANGUAGES:
                    raise ConfigurationError(
                        "Invalid OCR language", {"ocr_language": language}
                    )

        preset = values.get("ocr_preset")
        if preset is not None:
            preset = getattr(preset, "value", preset)
            if preset not in OCR_PRESETS:
                raise ConfigurationError("Invalid OCR preset", {"ocr_preset": preset})

    @staticmethod
    def _as_values(items: Iterable[Any]) -> List[Any]:
        return [getattr(item, "value", item) for item in items]

    @staticmethod
    def _check_choice(
        values: Mapping[str, Any], key: str, choices: Sequence[str], label: str
    ) -> None:
        value = values.get(key)
        if value is not None and value not in choices:
            raise ConfigurationError(f"{label}: {value}", {key: value})
