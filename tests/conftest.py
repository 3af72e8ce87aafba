"""Shared fixtures for the share tests."""
from __future__ import annotations

import os

import pytest


@pytest.fixture
def secret64() -> bytes:
    return os.urandom(64)


@pytest.fixture
def zero_secret() -> bytes:
    return bytes(32)
