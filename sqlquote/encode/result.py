"""Encode results: the bytes produced plus any failures met on the way."""
from __future__ import annotations

from dataclasses import dataclass, field

from sqlquote.errors import EncodeError, FailureSource, UnsupportedValueError


@dataclass(frozen=True)
class EncodeFailure:
    """One delegate failure or unsupported value.

    Attributes:
        value_type: Qualified type name of the value that failed.
        message: The failure description, as rendered in the marker.
        source: ``appender``, ``valuer`` or ``unsupported``.
    """

    value_type: str
    message: str
    source: FailureSource

    def to_error(self) -> EncodeError:
        if self.source == "unsupported":
            return UnsupportedValueError(self.message, value_type=self.value_type)
        return EncodeError(self.message, value_type=self.value_type, source=self.source)


@dataclass
class EncodeResult:
    """The output of :meth:`~sqlquote.Encoder.encode`.

    Attributes:
        data: Encoded fragment.  Under the ``"marker"`` policy it contains a
            ``?!(message)`` marker for every entry in ``failures``.
        failures: Failures in the order they happened; empty on success.
    """

    data: bytes
    failures: list[EncodeFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def sql(self) -> str:
        """The fragment as text.

        Bytes written by custom appenders that are not valid UTF-8 are kept
        via ``surrogateescape``.
        """
        return self.data.decode("utf-8", "surrogateescape")

    def raise_for_failures(self) -> EncodeResult:
        """Raise the first failure as an exception; return ``self`` if none.

        Raises:
            EncodeError: If any failure was recorded.
        """
        if self.failures:
            raise self.failures[0].to_error()
        return self
