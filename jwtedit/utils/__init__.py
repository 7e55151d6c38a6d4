"""Shared helpers for jwtedit."""

from jwtedit.utils.encoding import b64url_decode, b64url_encode

__all__ = ["b64url_decode", "b64url_encode"]
