"""Exception hierarchy shared by the signing core and its callers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from jwtedit.algorithms import SignatureType


class JwtEditError(Exception):
    """Base class for errors surfaced to jwtedit callers."""


class SignatureError(JwtEditError):
    """Signature computation failed."""


class UnsupportedAlgorithmError(SignatureError):
    """Raised when no signer exists for the requested algorithm.

    ``algorithm`` is the rejected :class:`SignatureType`, or the raw header
    text when the header could not be resolved to a catalog entry.
    """

    def __init__(self, algorithm: "SignatureType | str") -> None:
        self.algorithm = algorithm
        super().__init__(f"Unrecognised signature type: {algorithm}")


class KeyInitializationError(SignatureError):
    """The MAC primitive rejected the supplied key material."""


class MissingSecretError(SignatureError):
    """An HMAC signature was requested without a secret."""


class TokenFormatError(JwtEditError, ValueError):
    """Token text is not a well-formed ``header.payload[.signature]`` string."""
