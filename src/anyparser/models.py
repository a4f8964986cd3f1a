"""
Data models for resolved inputs and the camelCase result records returned
by the API.
"""

import sys
from typing import Any, List, Literal, Mapping, Set

from pydantic import BaseModel, ConfigDict

if sys.version_info >= (3, 11):
    from typing import NotRequired, TypedDict
else:
    from typing_extensions import NotRequired, TypedDict


class FileInput(BaseModel):
    """
    One validated input file, fully read into memory.

    Attributes:
        file_name: Base name sent with the multipart part
        contents: Raw file bytes
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    contents: bytes


class ImageReference(TypedDict):
    base64Data: str
    displayName: str
    page: NotRequired[int]
    imageIndex: int


class ResultBase(TypedDict):
    rid: str
    originalFilename: str
    checksum: str
    totalCharacters: NotRequired[int]
    markdown: NotRequired[str]


class PdfPage(TypedDict):
    pageNumber: int
    markdown: NotRequired[str]
    text: NotRequired[str]
    images: NotRequired[List[ImageReference]]


class PdfResult(ResultBase):
    totalItems: NotRequired[int]
    items: NotRequired[List[PdfPage]]


class CrawlDirectiveBase(TypedDict):
    type: Literal["HTTP Header", "HTML Meta", "Combined"]
    priority: int
    name: NotRequired[str]
    noindex: NotRequired[bool]
    nofollow: NotRequired[bool]
    crawlDelay: NotRequired[int]
    unavailableAfter: NotRequired[str]


class CrawlDirective(CrawlDirectiveBase):
    underlying: List[CrawlDirectiveBase]


class CrawledUrl(TypedDict):
    url: str
    title: NotRequired[str]
    crawledAt: NotRequired[str]
    statusCode: int
    statusMessage: str
    directive: CrawlDirective
    totalCharacters: NotRequired[int]
    markdown: NotRequired[str]
    images: NotRequired[List[ImageReference]]
    text: NotRequired[str]
    politenessDelay: int


class RobotsTxtDirective(TypedDict):
    userAgent: str
    disallow: Set[str]
    allow: Set[str]
    crawlDelay: NotRequired[int]


class CrawlResult(TypedDict):
    rid: str
    startUrl: str
    totalCharacters: int
    totalItems: int
    markdown: str
    items: NotRequired[List[CrawledUrl]]
    robotsDirective: RobotsTxtDirective


ResultKind = Literal["crawl", "pdf", "text"]


def result_kind(record: Mapping[str, Any]) -> ResultKind:
    """Tell crawl, multi-page and plain results apart by their fields."""
    if "startUrl" in record or "robotsDirective" in record:
        return "crawl"
    if "items" in record or "totalItems" in record:
        return "pdf"
    return "text"


def is_crawl_result(record: Mapping[str, Any]) -> bool:
    return result_kind(record) == "crawl"


def is_pdf_result(record: Mapping[str, Any]) -> bool:
    return result_kind(record) == "pdf"


__all__ = [
    "FileInput",
    "ImageReference",
    "ResultBase",
    "PdfPage",
    "PdfResult",
    "CrawlDirectiveBase",
    "CrawlDirective",
    "CrawledUrl",
    "RobotsTxtDirective",
    "CrawlResult",
    "ResultKind",
    "result_kind",
    "is_crawl_result",
    "is_pdf_result",
]
