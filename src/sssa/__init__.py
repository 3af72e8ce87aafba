"""Shamir's Secret Sharing over a 256-bit prime field.

``create_bytes`` splits a secret into raw share buffers and ``combine_bytes``
puts any ``minimum`` of them back together. :mod:`sssa.text` wraps both with
URL-safe base64 for transport.
"""

from __future__ import annotations

from .combiner import combine_bytes
from .errors import (
    ArgumentError,
    DecodingError,
    InconsistentShareSetError,
    InvalidShareError,
    SSSAError,
)
from .field import PRIME
from .splitter import create_bytes
from .text import combine, create
from .validation import is_valid_share

__version__ = "0.1.0"

__all__ = [
    "PRIME",
    "create_bytes",
    "combine_bytes",
    "create",
    "combine",
    "is_valid_share",
    "SSSAError",
    "ArgumentError",
    "DecodingError",
    "InvalidShareError",
    "InconsistentShareSetError",
]
