"""Per-call encode state and the inline error marker.

A single :class:`EncodeRun` is threaded through one top-level encode call,
including every re-dispatch of ``sql_value()`` results and structural
fallbacks, so all failures of that call end up in one list.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from sqlquote.config import EncoderConfig
from sqlquote.encode.result import EncodeFailure
from sqlquote.errors import EncodeError, FailureSource
from sqlquote.log import get_logger

logger = get_logger(__name__)

_EVENTS: dict[FailureSource, str] = {
    "appender": "sqlquote.delegate_failed",
    "valuer": "sqlquote.delegate_failed",
    "unsupported": "sqlquote.unsupported_value",
}


def type_name(value: object) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def append_error(buf: bytearray, message: str) -> bytearray:
    """Append ``?!(message)``."""
    buf += b"?!("
    buf += message.encode("utf-8", "surrogatepass")
    buf += b")"
    return buf


@dataclass
class EncodeRun:
    """Failure accumulator for a single encode call.

    Attributes:
        config: Settings in force for this call.
        failures: Failures recorded so far.
        depth: Current ``sql_value()`` / fallback re-dispatch depth.
    """

    config: EncoderConfig
    failures: list[EncodeFailure] = field(default_factory=list)
    depth: int = 0

    def fail(
        self,
        buf: bytearray,
        start: int,
        value: object,
        exc: Exception,
        source: FailureSource,
    ) -> bytearray:
        """Record a failure and apply the failure policy.

        Anything appended since ``start`` is discarded under either policy.
        Under ``"marker"`` the marker is appended in its place.

        Raises:
            EncodeError: Under the ``"raise"`` policy.
        """
        message = str(exc) or type(exc).__name__
        failure = EncodeFailure(value_type=type_name(value), message=message, source=source)
        self.failures.append(failure)
        logger.warning(
            _EVENTS[source],
            value_type=failure.value_type,
            source=source,
            error=message,
            policy=self.config.on_failure,
        )

        del buf[start:]
        if self.config.on_failure == "raise":
            if isinstance(exc, EncodeError):
                raise exc
            raise failure.to_error() from exc
        return append_error(buf, message)
