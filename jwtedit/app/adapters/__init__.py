"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .hmac_signer import HmacSigner, get_signer

__all__ = [
    "HmacSigner",
    "get_signer",
]
