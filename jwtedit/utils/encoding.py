"""Unpadded base64url helpers for JWT segments (RFC 4648 §5)."""

from __future__ import annotations

import base64


def b64url_encode(data: bytes) -> str:
    """Encode ``data`` with the URL-safe alphabet and strip ``=`` padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(encoded: str) -> bytes:
    """Decode data produced by :func:`b64url_encode`.

    Missing padding is restored before decoding.

    Raises:
        binascii.Error: If ``encoded`` is not valid base64url
    """
    padded = encoded + "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))
