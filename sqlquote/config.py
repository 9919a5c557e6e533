"""Pydantic model for encoder configuration.

An :class:`EncoderConfig` is immutable and shared freely between threads.
The defaults reproduce the historical behaviour: delegate failures are
rendered inline as ``?!(message)`` markers, map entries keep their
iteration order, and unknown value shapes go through the structural
fallback::

    from sqlquote import Encoder, EncoderConfig

    strict = Encoder(EncoderConfig(on_failure="raise", sort_map_keys=True))
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sqlquote.errors import ConfigError

#: What to do when a delegate fails or a value cannot be encoded.
FailurePolicy = Literal["marker", "raise"]


class EncoderConfig(BaseModel):
    """Settings that shape how values are encoded.

    Attributes:
        on_failure: ``"marker"`` appends ``?!(message)`` and carries on;
            ``"raise"`` aborts with :class:`~sqlquote.errors.EncodeError`.
        sort_map_keys: Emit map entries sorted by key instead of in
            iteration order.
        structural_fallback: Serialise unknown value shapes (enums, UUIDs,
            dataclasses, containers, ...) best-effort.  When disabled they
            are reported as unsupported values.
        max_indirection: Maximum chain length of ``sql_value()`` delegates
            returning further delegates.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    on_failure: FailurePolicy = "marker"
    sort_map_keys: bool = False
    structural_fallback: bool = True
    max_indirection: int = Field(default=8, ge=1)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> EncoderConfig:
        """Validate an untrusted settings dict.

        Raises:
            ConfigError: If a key is unknown or a value is invalid.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors()
            field = ".".join(str(p) for p in errors[0]["loc"]) if errors else None
            raise ConfigError(f"Invalid encoder configuration: {exc}", field=field) from exc


DEFAULT_CONFIG = EncoderConfig()
