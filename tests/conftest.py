"""Shared pytest fixtures for sqlquote unit tests."""
from __future__ import annotations

import pytest

from sqlquote import Encoder, EncoderConfig


@pytest.fixture
def buf() -> bytearray:
    """A fresh, empty output buffer."""
    return bytearray()


@pytest.fixture(scope="session")
def strict_encoder() -> Encoder:
    """Encoder that raises instead of rendering failure markers."""
    return Encoder(EncoderConfig(on_failure="raise"))


@pytest.fixture(scope="session")
def sorted_encoder() -> Encoder:
    """Encoder that emits map entries sorted by key."""
    return Encoder(EncoderConfig(sort_map_keys=True))


@pytest.fixture(scope="session")
def no_fallback_encoder() -> Encoder:
    """Encoder with the structural fallback switched off."""
    return Encoder(EncoderConfig(structural_fallback=False))
