"""Signer port interface for token signature computation."""

from typing import Protocol

from jwtedit.algorithms import SignatureType


class SignerPort(Protocol):
    """Port interface for computing a raw token signature.

    Adapters: HMAC (HS256/HS384/HS512). Asymmetric adapters are not provided.

    Side effects: None (pure computation).
    """

    @property
    def algorithm(self) -> SignatureType:
        """Catalog member this signer implements."""
        ...

    def sign(self, data: bytes, key: bytes) -> bytes:
        """Sign data.

        Args:
            data: Signing input bytes (``header.payload``)
            key: Raw key material

        Returns:
            Signature bytes, before base64url encoding
        """
        ...
