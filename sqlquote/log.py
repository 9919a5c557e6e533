"""Structured logging helpers.

sqlquote is a library, so it never calls ``structlog.configure`` or adds
real handlers.  Loggers wrap stdlib :mod:`logging` loggers under the
``sqlquote`` namespace, which carries only a :class:`logging.NullHandler`;
applications decide levels and destinations.  Rendering follows whatever
processors the application configured for structlog.  Events are emitted
with a stable name and keyword context::

    logger = get_logger(__name__)
    logger.warning("sqlquote.delegate_failed", value_type="app.Money", error="boom")
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

logging.getLogger("sqlquote").addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """Return a structlog logger over the stdlib logger ``name`` (usually ``__name__``)."""
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
