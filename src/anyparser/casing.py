"""
Key casing helpers and the recursive snake_case to camelCase transformer
applied to JSON responses.
"""

import copy
import datetime
import re
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Set
from urllib.parse import ParseResult, ParseResultBytes, SplitResult, SplitResultBytes

import httpx

from .config import get_logger

logger = get_logger("casing")

_UNDERSCORE_RUN = re.compile(r"_+(.)")
_HYPHEN_RUN = re.compile(r"-+(.)")
# The lookbehind skips a position right after a dot so "a.B" yields one separator.
_CAMEL_BOUNDARY = re.compile(r"(?<=[^.])\.?(?=[A-Z])")

# Values whose internals must never be walked.
OPAQUE_TYPES = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    re.Pattern,
    ParseResult,
    ParseResultBytes,
    SplitResult,
    SplitResultBytes,
    httpx.URL,
)


def underscore_to_camel(key: str) -> str:
    """Rewrite ``snake_key`` as ``snakeKey``; runs of underscores collapse."""
    return _UNDERSCORE_RUN.sub(lambda match: match.group(1).upper(), key)


def hyphen_to_camel(key: str) -> str:
    return _HYPHEN_RUN.sub(lambda match: match.group(1).upper(), key)


def to_underscore(key: str = "") -> str:
    return _CAMEL_BOUNDARY.sub("_", key.strip()).lower()


def camel_to_title(key: str) -> str:
    return re.sub(r"\s+", "", key[:1].upper() + key[1:])


def transform_to_camel(value: Any) -> Any:
    """
    Recursively camel-case the keys of a decoded JSON value.

    Lists and tuples are mapped element-wise, sets keep their kind, plain
    dicts get their string keys rewritten and other mappings keep their
    type with keys and values transformed. Opaque values (dates, patterns,
    URLs), callables and primitives are returned as the same object.

    Example:
        >>> transform_to_camel({"total_characters": 10, "items": [{"page_number": 1}]})
        {'totalCharacters': 10, 'items': [{'pageNumber': 1}]}
    """
    if isinstance(value, OPAQUE_TYPES):
        return value

    if callable(value):
        return value

    if value is None:
        return value

    if isinstance(value, list):
        return [transform_to_camel(item) for item in value]

    if isinstance(value, tuple):
        items = [transform_to_camel(item) for item in value]
        if hasattr(value, "_fields"):
            return type(value)(*items)
        return type(value)(items)

    if isinstance(value, Mapping) and type(value) is not dict:
        return _transform_mapping(value)

    if isinstance(value, (set, frozenset)):
        return type(value)(transform_to_camel(member) for member in value)

    if isinstance(value, dict):
        return _transform_record(value)

    return value


def _transform_mapping(value: Mapping) -> Mapping:
    """Transform keys and values of a mapping while keeping its type."""
    if isinstance(value, MutableMapping):
        result = copy.copy(value)
        result.clear()
        for key, item in value.items():
            result[transform_to_camel(key)] = transform_to_camel(item)
        return result

    return type(value)(
        {transform_to_camel(key): transform_to_camel(item) for key, item in value.items()}
    )


def _transform_record(value: Dict[Any, Any]) -> Dict[Any, Any]:
    """Camel-case the string keys of a plain dict.

    When two keys land on the same camelCase name, a key that was already
    camelCase wins; otherwise the later key wins.
    """
    result: Dict[Any, Any] = {}
    verbatim: Set[Any] = set()

    for key, item in value.items():
        camel_key = underscore_to_camel(key) if isinstance(key, str) else key

        if camel_key in result:
            logger.debug("Key %r collides with an existing %r", key, camel_key)
            if camel_key in verbatim:
                continue

        if camel_key == key:
            verbatim.add(camel_key)
        result[camel_key] = transform_to_camel(item)

    return result
