"""
Anyparser client: resolves options, reads inputs, sends one parse request
and normalizes the response.
"""

import asyncio
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urljoin

import httpx
from pydantic import ValidationError

from .casing import transform_to_camel
from .config import Settings, configure_logging, get_logger, get_settings, load_defaults
from .constants import PARSE_PATH
from .exceptions import ConfigurationError, UnsupportedFormatError
from .fetcher import build_auth_headers, wrapped_post
from .form import build_form
from .inputs import LocalFileSystem, validate_and_parse
from .options import AnyparserOption, explicit_fields
from .validators import PathsOrUrl

logger = get_logger("parser")

Result = Union[List[Dict[str, Any]], str]


def normalize_response(format: str, response: httpx.Response) -> Result:
    """Decode ``response`` according to the format that was requested."""
    if format == "json":
        return transform_to_camel(response.json())
    if format in ("markdown", "html"):
        return response.text
    raise UnsupportedFormatError(f"Unsupported format: {format}", {"format": format})


class Anyparser:
    """
    Client for the Anyparser parse API.

    Options can be given as an ``AnyparserOption`` or as keyword arguments;
    anything left unset falls back to the ``ANYPARSER_*`` settings and the
    built-in defaults.

    Example:
        >>> parser = Anyparser(api_key="...", format="markdown")
        >>> markdown = await parser.parse("docs/sample.pdf")
        >>> results = Anyparser(model="crawler", max_depth=2).parse_sync("https://example.com")
    """

    def __init__(
        self,
        options: Optional[AnyparserOption] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        fs: Optional[LocalFileSystem] = None,
        **overrides: Any,
    ):
        if overrides:
            options = self._merge_overrides(options, overrides)

        self.options = options
        self.settings = settings or get_settings()
        if self.settings.model_fields_set & {"debug", "log_level"}:
            configure_logging(self.settings)
        self.defaults = load_defaults(self.settings)
        self.timeout = self.settings.timeout
        self._transport = transport
        self._fs = fs

    @staticmethod
    def _merge_overrides(
        options: Optional[AnyparserOption], overrides: Dict[str, Any]
    ) -> AnyparserOption:
        values = explicit_fields(options) if options else {}
        values.update(overrides)
        try:
            return AnyparserOption(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid options: {e}", {"errors": e.errors()}) from e

    async def parse(self, inputs: PathsOrUrl) -> Result:
        """
        Parse local files, or crawl from a start URL when ``model="crawler"``.

        Args:
            inputs: A file path, a list of file paths, or the URL to crawl

        Returns:
            A list of camelCase result records for JSON, or the raw body for
            markdown and HTML

        Raises:
            ConfigurationError: Options are missing or invalid
            InputError: The files or URL cannot be used
            TransportFailure: The API answered with a non-success status
        """
        parsed = validate_and_parse(inputs, self.options, self.defaults, self._fs)
        request = build_form(parsed)
        url = urljoin(parsed.api_url, PARSE_PATH)

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await wrapped_post(
                client,
                url,
                files=request.to_multipart(),
                headers=build_auth_headers(parsed.api_key),
            )
            return normalize_response(parsed.format, response)

    def parse_sync(self, inputs: PathsOrUrl) -> Result:
        """Synchronous version of parse."""
        return asyncio.run(self.parse(inputs))
