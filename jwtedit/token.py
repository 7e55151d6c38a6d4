"""Split compact JWTs into segments and decode their headers."""

from __future__ import annotations

import binascii
import json
from dataclasses import dataclass

from pydantic import ValidationError

from jwtedit.errors import TokenFormatError
from jwtedit.header import JwtHeader
from jwtedit.utils.encoding import b64url_decode


@dataclass(frozen=True, slots=True)
class TokenParts:
    """Segments of a compact token. ``signature`` is empty for unsigned input."""

    header_segment: str
    payload_segment: str
    signature: str = ""

    @property
    def signing_input(self) -> str:
        return f"{self.header_segment}.{self.payload_segment}"

    def header(self) -> JwtHeader:
        return decode_header(self.header_segment)

    def with_signature(self, signature: str) -> str:
        """Return the compact token carrying ``signature``."""
        return f"{self.signing_input}.{signature}"


def split_token(text: str) -> TokenParts:
    """Split ``header.payload`` or ``header.payload.signature``.

    Raises:
        TokenFormatError: If ``text`` does not have two or three segments
    """
    segments = text.strip().split(".")
    if len(segments) not in (2, 3) or not segments[0]:
        raise TokenFormatError(
            f"Expected 2 or 3 dot-separated segments, found {len(segments)}"
        )
    return TokenParts(*segments)


def decode_header(segment: str) -> JwtHeader:
    """Decode a base64url header segment into a :class:`JwtHeader`.

    Raises:
        TokenFormatError: If the segment is not base64url-encoded JSON
            object text with a string ``alg`` member
    """
    try:
        raw = b64url_decode(segment)
    except (binascii.Error, ValueError) as exc:
        raise TokenFormatError(f"Header is not valid base64url: {exc}") from exc

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TokenFormatError(f"Header is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise TokenFormatError("Header must be a JSON object")

    try:
        return JwtHeader.model_validate(data)
    except ValidationError as exc:
        raise TokenFormatError(f"Header failed validation: {exc}") from exc
