"""
Anyparser

Python client for the Anyparser document parsing and crawling API.
"""

from .parser import Anyparser, Result
from .options import (
    AnyparserOption,
    ParsedOption,
    TextOption,
    VlmOption,
    LamOption,
    OcrOption,
    CrawlerOption,
)
from .constants import OCR_LANGUAGES, OCR_PRESETS, OcrLanguage, OcrPreset
from .config import Settings, configure_logging
from .casing import transform_to_camel
from .models import (
    FileInput,
    ResultBase,
    PdfResult,
    PdfPage,
    CrawlResult,
    CrawledUrl,
    RobotsTxtDirective,
    ImageReference,
    result_kind,
)
from .exceptions import (
    AnyparserError,
    ConfigurationError,
    InputError,
    NoInputError,
    InvalidUrlError,
    FileNotFoundError,
    FileLockedError,
    TransportFailure,
    UnsupportedFormatError,
)

__version__ = "1.0.0"

__all__ = [
    "Anyparser",
    "Result",
    "AnyparserOption",
    "ParsedOption",
    "TextOption",
    "VlmOption",
    "LamOption",
    "OcrOption",
    "CrawlerOption",
    "OCR_LANGUAGES",
    "OCR_PRESETS",
    "OcrLanguage",
    "OcrPreset",
    "configure_logging",
    "Settings",
    "transform_to_camel",
    "FileInput",
    "ResultBase",
    "PdfResult",
    "PdfPage",
    "CrawlResult",
    "CrawledUrl",
    "RobotsTxtDirective",
    "ImageReference",
    "result_kind",
    "AnyparserError",
    "ConfigurationError",
    "InputError",
    "NoInputError",
    "InvalidUrlError",
    "FileNotFoundError",
    "FileLockedError",
    "TransportFailure",
    "UnsupportedFormatError",
]
