"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def ascending_bytes() -> bytes:
    """256-byte sequence 0, 1, ..., 255."""
    return bytes(range(256))


@pytest.fixture
def redundant_bytes() -> bytes:
    """512 bytes cycling through a short pattern."""
    return bytes((i + ord(" ")) % 36 for i in range(512))


@pytest.fixture
def mixed_text() -> str:
    """Text mixing ASCII and non-ASCII characters."""
    return "aあiいuうeえoお"
