"""
Custom exceptions for the Anyparser client.
"""

from typing import Dict, Any, Optional


class AnyparserError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(AnyparserError):
    """Raised when client options are missing or invalid."""

    pass


class InputError(AnyparserError):
    """Base class for problems with the paths or URL handed to parse()."""

    pass


class NoInputError(InputError):
    """Raised when no file paths were provided."""

    pass


class InvalidUrlError(InputError):
    """Raised when the crawl start URL is not an absolute http(s) URL."""

    pass


class FileNotFoundError(InputError):
    """Raised when an input file does not exist or was removed."""

    pass


class FileLockedError(InputError):
    """Raised when an input file is locked by another process."""

    pass


class TransportFailure(AnyparserError):
    """Raised when the API answers with a non-success status.

    ``cause`` wraps the response body so it survives the failure.
    """

    def __init__(self, message: str, cause: Exception, status_code: int):
        super().__init__(message, {"status_code": status_code, "body": str(cause)})
        self.cause = cause
        self.status_code = status_code

    @property
    def body(self) -> str:
        return str(self.cause)


class UnsupportedFormatError(AnyparserError):
    """Raised when a response format has no handler."""

    pass
