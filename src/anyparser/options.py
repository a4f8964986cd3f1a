"""
Option merging and resolution.

User options are merged over the client defaults, validated, and resolved
into one frozen option object per model. Each model variant only carries
the fields that are legal for it.
"""

from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .config import DefaultOptions, get_logger
from .exceptions import ConfigurationError, InvalidUrlError
from .models import FileInput
from .validators import OptionValidator, URLValidator, is_blank

logger = get_logger("options")


class AnyparserOption(BaseModel):
    """
    Caller-supplied options; every field is optional.

    Only fields that are explicitly passed override the client defaults, so
    ``image=False`` is honoured while an omitted ``image`` keeps the default.

    Example:
        >>> options = AnyparserOption(api_key="key", model="ocr", ocr_language=["eng"])
        >>> parser = Anyparser(options)
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    api_url: Optional[Union[str, httpx.URL]] = None
    api_key: Optional[str] = None
    format: Optional[str] = None
    model: Optional[str] = None
    encoding: Optional[str] = None
    image: Optional[bool] = None
    table: Optional[bool] = None
    ocr_language: Optional[List[str]] = None
    ocr_preset: Optional[str] = None
    url: Optional[str] = None
    max_depth: Optional[int] = None
    max_executions: Optional[int] = None
    strategy: Optional[str] = None
    traversal_scope: Optional[str] = None


class _ParsedOptionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_url: str
    api_key: str
    format: str
    encoding: str = "utf-8"


class _FileModelOption(_ParsedOptionBase):
    image: Optional[bool] = None
    table: Optional[bool] = None
    files: Tuple[FileInput, ...] = ()


class TextOption(_FileModelOption):
    model: Literal["text"] = "text"


class VlmOption(_FileModelOption):
    model: Literal["vlm"] = "vlm"


class LamOption(_FileModelOption):
    model: Literal["lam"] = "lam"


class OcrOption(_ParsedOptionBase):
    model: Literal["ocr"] = "ocr"
    ocr_language: Tuple[str, ...] = ()
    ocr_preset: Optional[str] = None
    files: Tuple[FileInput, ...] = ()


class CrawlerOption(_ParsedOptionBase):
    model: Literal["crawler"] = "crawler"
    url: Optional[str] = None
    max_depth: Optional[int] = None
    max_executions: Optional[int] = None
    strategy: Optional[str] = None
    traversal_scope: Optional[str] = None


ParsedOption = Annotated[
    Union[TextOption, VlmOption, LamOption, OcrOption, CrawlerOption],
    Field(discriminator="model"),
]

_parsed_option_adapter: TypeAdapter = TypeAdapter(ParsedOption)


def validate_api_key(api_key: Any) -> None:
    """Reject a missing API key and a blank one, with distinct messages."""
    if api_key is None or api_key == "":
        raise ConfigurationError("API key is required")

    if not isinstance(api_key, str) or api_key.strip() == "":
        raise ConfigurationError("API key must be a non-empty string")


def explicit_fields(options: AnyparserOption) -> Dict[str, Any]:
    """Return only the fields the caller passed, including falsy values."""
    return {name: getattr(options, name) for name in options.model_fields_set}


def merge_options(
    options: Optional[AnyparserOption], defaults: DefaultOptions
) -> Dict[str, Any]:
    """Overlay the explicitly set fields of ``options`` on ``defaults``."""
    merged: Dict[str, Any] = asdict(defaults)
    if options is not None:
        merged.update(explicit_fields(options))
    return merged


def build_options(
    options: Optional[AnyparserOption], defaults: DefaultOptions
) -> ParsedOption:
    """Merge, validate and resolve options into a model-specific variant."""
    merged = merge_options(options, defaults)

    validate_api_key(merged.get("api_key"))

    if is_blank(merged.get("api_url")):
        raise ConfigurationError("API URL is required")

    merged["format"] = merged.get("format") or "json"
    merged["model"] = merged.get("model") or "text"
    merged["encoding"] = merged.get("encoding") or "utf-8"

    OptionValidator.validate_option(merged)

    try:
        merged["api_url"] = URLValidator.validate_url(merged["api_url"])
    except InvalidUrlError as e:
        raise ConfigurationError(
            f"Invalid API URL: {merged['api_url']}", {"api_url": str(merged["api_url"])}
        ) from e

    if merged.get("ocr_language") is not None:
        merged["ocr_language"] = tuple(
            getattr(language, "value", language) for language in merged["ocr_language"]
        )
    if merged.get("ocr_preset") is not None:
        merged["ocr_preset"] = getattr(merged["ocr_preset"], "value", merged["ocr_preset"])

    parsed = _resolve_variant(merged)
    logger.debug("Resolved options: model=%s format=%s", parsed.model, parsed.format)
    return parsed


def _resolve_variant(merged: Dict[str, Any]) -> ParsedOption:
    """Keep only the fields that the selected model accepts."""
    variant = {
        "text": TextOption,
        "vlm": VlmOption,
        "lam": LamOption,
        "ocr": OcrOption,
        "crawler": CrawlerOption,
    }[merged["model"]]

    accepted = set(variant.model_fields)
    dropped = sorted(
        key for key, value in merged.items() if key not in accepted and value is not None
    )
    if dropped:
        logger.debug("Ignoring options not used by model %s: %s", merged["model"], dropped)

    values = {
        key: value
        for key, value in merged.items()
        if key in accepted and value is not None
    }
    return _parsed_option_adapter.validate_python(values)
