"""Structural fallback for value shapes the dispatcher does not know.

This is a legacy escape hatch, not a primary path: it maps a value to its
nearest built-in equivalent, which the dispatcher then encodes as usual.

* ``Enum`` members become their ``.value``.
* UUIDs, IP addresses/networks and paths become their ``str()``.
* Anything pydantic can serialise (dicts, lists, tuples, sets, dataclasses,
  pydantic models, ...) becomes a JSON document string.

The conversion is lossy: a list and its JSON text encode identically.
Disable it with ``EncoderConfig(structural_fallback=False)``.
"""
from __future__ import annotations

import ipaddress
from enum import Enum
from pathlib import PurePath
from typing import Any
from uuid import UUID

from pydantic_core import to_json

from sqlquote.errors import UnsupportedValueError

_STRINGLIKE: tuple[type, ...] = (
    UUID,
    PurePath,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
)


def structural_value(value: Any, value_type: str) -> Any:
    """Return the built-in value that ``value`` should be encoded as.

    Raises:
        UnsupportedValueError: If ``value`` has no built-in equivalent.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, _STRINGLIKE):
        return str(value)
    try:
        return to_json(value).decode("utf-8")
    except ValueError as exc:  # PydanticSerializationError, circular references
        raise UnsupportedValueError(
            f"unsupported value type {value_type}", value_type=value_type
        ) from exc
