"""
Multipart request building from resolved options.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .models import FileInput
from .options import CrawlerOption, OcrOption, ParsedOption

MultipartPart = Tuple[str, Tuple[Optional[str], Union[str, bytes], str]]
FormPart = Tuple[str, Tuple[Optional[str], Union[str, bytes]]]


@dataclass(frozen=True)
class WireRequest:
    """Form fields and file parts for one parse request."""

    fields: Dict[str, str]
    files: Tuple[FileInput, ...] = field(default_factory=tuple)

    def to_multipart(self) -> List[Union[FormPart, MultipartPart]]:
        """Render all fields and files as httpx multipart parts.

        Plain fields are sent as parts without a filename so the body stays
        multipart even when there are no files.
        """
        parts: List[Union[FormPart, MultipartPart]] = [
            (name, (None, value)) for name, value in self.fields.items()
        ]
        parts.extend(
            ("files", (file.file_name, file.contents, "application/octet-stream"))
            for file in self.files
        )
        return parts


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_form(parsed: ParsedOption) -> WireRequest:
    """Build the form for ``parsed``; crawler fields and files never mix."""
    fields: Dict[str, str] = {"format": parsed.format, "model": parsed.model}

    if isinstance(parsed, OcrOption):
        if parsed.ocr_language:
            fields["ocrLanguage"] = ",".join(parsed.ocr_language)
        if parsed.ocr_preset:
            fields["ocrPreset"] = parsed.ocr_preset
        return WireRequest(fields=fields, files=parsed.files)

    if isinstance(parsed, CrawlerOption):
        fields["url"] = parsed.url or ""
        if parsed.max_depth is not None:
            fields["maxDepth"] = str(parsed.max_depth)
        if parsed.max_executions is not None:
            fields["maxExecutions"] = str(parsed.max_executions)
        if parsed.strategy:
            fields["strategy"] = parsed.strategy
        if parsed.traversal_scope:
            fields["traversalScope"] = parsed.traversal_scope
        return WireRequest(fields=fields)

    if parsed.image is not None:
        fields["image"] = _flag(parsed.image)
    if parsed.table is not None:
        fields["table"] = _flag(parsed.table)

    return WireRequest(fields=fields, files=parsed.files)
