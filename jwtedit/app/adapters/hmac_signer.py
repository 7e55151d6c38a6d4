"""HMAC signer adapter for the HS256/HS384/HS512 family."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from jwtedit.algorithms import SignatureType
from jwtedit.app.ports.signer import SignerPort
from jwtedit.errors import KeyInitializationError, UnsupportedAlgorithmError

_DIGESTS: dict[SignatureType, Callable[..., Any]] = {
    SignatureType.HS256: hashlib.sha256,
    SignatureType.HS384: hashlib.sha384,
    SignatureType.HS512: hashlib.sha512,
}


@dataclass(frozen=True, slots=True)
class HmacSigner:
    """Keyed-hash MAC over the signing input.

    Keys of any length are accepted; HMAC hashes or pads them internally.
    """

    algorithm: SignatureType

    def __post_init__(self) -> None:
        if self.algorithm not in _DIGESTS:
            raise UnsupportedAlgorithmError(self.algorithm)

    def sign(self, data: bytes, key: bytes) -> bytes:
        try:
            mac = hmac.new(key, digestmod=_DIGESTS[self.algorithm])
        except (TypeError, ValueError) as exc:
            # Raised when the runtime disables the digest (e.g. FIPS builds).
            raise KeyInitializationError(
                f"Failed to initialise {self.algorithm} key: {exc}"
            ) from exc
        mac.update(data)
        return mac.digest()


def get_signer(signature_type: SignatureType) -> SignerPort:
    """Return the signer adapter for ``signature_type``.

    Raises:
        UnsupportedAlgorithmError: If no adapter implements the algorithm
    """
    return HmacSigner(signature_type)
