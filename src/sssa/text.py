"""Base64 text form of shares.

Shares travel as URL-safe base64 without padding, one string per share.
"""
from __future__ import annotations

import base64
import binascii
import re
from typing import Iterable, List, Optional, Union

from .combiner import combine_bytes
from .errors import DecodingError
from .splitter import create_bytes

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode_share(buffer: bytes) -> str:
    return base64.urlsafe_b64encode(bytes(buffer)).rstrip(b"=").decode("ascii")


def decode_share(text: str) -> bytes:
    """Decode one textual share, raising :class:`DecodingError` on bad input."""
    if not isinstance(text, str):
        raise DecodingError(f"share must be str, got {type(text).__name__}")
    stripped = text.strip()
    if "=" in stripped:
        raise DecodingError("share must not carry base64 padding")
    if not _ALPHABET.fullmatch(stripped):
        raise DecodingError("share contains characters outside the URL-safe alphabet")
    raw = stripped.encode("ascii")
    if len(raw) % 4 == 1:
        raise DecodingError("share has an impossible base64 length")
    try:
        return base64.b64decode(raw + b"=" * (-len(raw) % 4), altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise DecodingError(f"share is not valid base64: {exc}") from exc


def create(minimum: int, shares: int, secret: Union[str, bytes]) -> List[str]:
    """Split ``secret`` and return the shares as base64 strings."""
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    return [encode_share(buffer) for buffer in create_bytes(minimum, shares, secret)]


def combine(shares: Iterable[str], length: Optional[int] = None) -> bytes:
    """Decode textual shares and reconstruct the secret."""
    return combine_bytes([decode_share(share) for share in shares], length)


__all__ = ["encode_share", "decode_share", "create", "combine"]
