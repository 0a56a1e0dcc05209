"""JSON serialization of response bodies using orjson.

Bodies are rendered either compactly (the default) or indented with one
tab per nesting level when the indent flag is set. Both forms decode to the
same value: only whitespace differs.

orjson natively handles datetime, UUID, dataclasses and enums; Pydantic
models are dumped before encoding, at any nesting depth. Non-string dict
keys (ints, enums, dates...) are written as strings and all keys are
sorted for predictable output.

Anything JSON cannot represent (unsupported types, cyclic structures,
integers beyond 64 bits, NaN and infinities) raises ``SerializationError``.
That is a programming defect, so no fallback body is ever produced.
"""

import dataclasses
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, Final

import orjson
from loguru import logger
from pydantic import BaseModel

from jsonresponse.core.constants import INDENT_UNIT
from jsonresponse.core.exceptions import SerializationError

_LEADING_INDENT: Final[re.Pattern[bytes]] = re.compile(rb"^(?:  )+", re.MULTILINE)

# Nesting depth orjson refuses to go beyond
MAX_NESTING_DEPTH: Final[int] = 254


def _retab(match: re.Match[bytes]) -> bytes:
    return INDENT_UNIT.encode() * (len(match.group(0)) // 2)


def _default(obj: object) -> Any:  # noqa: ANN401 - orjson default hook
    """Dump nested Pydantic models; reject everything else orjson rejects."""
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def _children(value: object) -> Iterable[object] | None:
    """Return the nested values orjson would encode, or None for leaves."""
    if isinstance(value, BaseModel):
        value = value.model_dump()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [getattr(value, f.name) for f in dataclasses.fields(value)]
    if isinstance(value, Mapping):
        return [*value.keys(), *value.values()]
    if isinstance(value, list | tuple):
        return value
    return None


def _ensure_finite(value: object, path: set[int]) -> None:
    """Reject NaN and infinities, which orjson would silently emit as null.

    Cycles and excessive nesting are left for the encoder to report.

    Raises:
        ValueError: If a non-finite float is found at any depth.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            msg = f"Out of range float value is not JSON compliant: {value}"
            raise ValueError(msg)
        return
    children = _children(value)
    if children is None or id(value) in path or len(path) > MAX_NESTING_DEPTH:
        return
    path.add(id(value))
    try:
        for child in children:
            _ensure_finite(child, path)
    finally:
        path.discard(id(value))


def serialize(content: Any, *, indent: bool = False) -> bytes:  # noqa: ANN401 - any JSON-serializable content
    """Render content as JSON bytes.

    Args:
        content: The value to serialize.
        indent: Produce the multi-line tab-indented form.

    Returns:
        bytes: UTF-8 encoded JSON text, without trailing newline.

    Raises:
        SerializationError: If the content cannot be represented as JSON.
    """
    if isinstance(content, BaseModel):
        content = content.model_dump()

    option = orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2

    try:
        _ensure_finite(content, set())
        rendered = orjson.dumps(content, default=_default, option=option)
    except (orjson.JSONEncodeError, ValueError) as e:
        logger.error(
            "Failed to serialize response body of type {}: {}",
            type(content).__name__,
            e,
        )
        msg = f"Response body is not JSON serializable: {e}"
        raise SerializationError(
            msg, context={"body_type": type(content).__name__}, cause=e
        ) from e

    if indent:
        # orjson string values never contain raw newlines, so every leading
        # run of spaces is structural indentation
        rendered = _LEADING_INDENT.sub(_retab, rendered)
    return rendered
