"""Signature algorithm catalog, header resolution, and family classification.

The catalog is the ordered :class:`SignatureType` enumeration. Header
resolution only consults an explicit registry of matchable members so that
``AUTO`` (a caller-side request for detection) and the reserved asymmetric
placeholders can never be produced from header text.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from jwtedit.header import JwtHeader


class SignatureClass(Enum):
    """Handling family of a signature algorithm."""

    OTHER = "other"  # no cryptographic operation
    HMAC = "hmac"  # symmetric MAC, needs a shared secret
    PUBKEY = "pubkey"  # asymmetric signature

    def __str__(self) -> str:
        return self.value


@total_ordering
class SignatureType(Enum):
    """Signature algorithms known to jwtedit, in catalog order.

    Values are the canonical display identifiers. ``AUTO`` keeps its mixed
    case form because it is never matched against a header.
    """

    AUTO = "Auto"  # detect from header
    RETAIN = "RETAIN"  # keep the original signature
    NONE = "NONE"  # unsigned token
    HS256 = "HS256"  # HMAC using SHA-256
    HS384 = "HS384"  # HMAC using SHA-384
    HS512 = "HS512"  # HMAC using SHA-512
    # Reserved; classified but not signed.
    RS256 = "RS256"  # RSASSA-PKCS1-v1_5 using SHA-256
    RS384 = "RS384"
    RS512 = "RS512"
    ES256 = "ES256"  # ECDSA using P-256 and SHA-256
    ES384 = "ES384"
    ES512 = "ES512"
    PS256 = "PS256"  # RSASSA-PSS using SHA-256 and MGF1 with SHA-256
    PS384 = "PS384"
    PS512 = "PS512"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SignatureType):
            return NotImplemented
        return _CATALOG_POSITION[self] < _CATALOG_POSITION[other]

    @classmethod
    def default(cls) -> SignatureType:
        """Return the algorithm used when the caller expresses no preference."""
        return cls.AUTO

    @classmethod
    def parse(cls, text: str) -> SignatureType:
        """Parse a caller-supplied algorithm name, ignoring case.

        Unlike :func:`resolve`, every catalog member is accepted here,
        including ``auto``.

        Raises:
            ValueError: If ``text`` names no catalog member
        """
        wanted = text.strip().upper()
        for member in cls:
            if member.value.upper() == wanted:
                return member
        raise ValueError(f"Unknown signature algorithm: {text!r}")

    @classmethod
    def from_header(cls, header: "JwtHeader") -> SignatureType | None:
        """Shorthand for :func:`resolve`."""
        return resolve(header)

    def signature_class(self, header_alg: str) -> SignatureClass:
        """Shorthand for :func:`classify`."""
        return classify(self, header_alg)

    @property
    def is_reserved(self) -> bool:
        """True for catalog placeholders that have no signer."""
        return self in PUBKEY_ALGORITHMS


_CATALOG_POSITION: dict[SignatureType, int] = {
    member: index for index, member in enumerate(SignatureType)
}

HMAC_ALGORITHMS: frozenset[SignatureType] = frozenset(
    {SignatureType.HS256, SignatureType.HS384, SignatureType.HS512}
)

PUBKEY_ALGORITHMS: frozenset[SignatureType] = frozenset(
    {
        SignatureType.RS256,
        SignatureType.RS384,
        SignatureType.RS512,
        SignatureType.ES256,
        SignatureType.ES384,
        SignatureType.ES512,
        SignatureType.PS256,
        SignatureType.PS384,
        SignatureType.PS512,
    }
)

# Members a header ``alg`` may resolve to, in match order.
HEADER_MATCHABLE: tuple[SignatureType, ...] = (
    SignatureType.RETAIN,
    SignatureType.NONE,
    SignatureType.HS256,
    SignatureType.HS384,
    SignatureType.HS512,
)


def resolve(header: "JwtHeader") -> SignatureType | None:
    """Resolve the algorithm declared by ``header``.

    The ``alg`` value is uppercased and compared with the display form of
    each :data:`HEADER_MATCHABLE` member; the first exact match wins.

    Args:
        header: Decoded header exposing ``alg``

    Returns:
        Matching catalog member, or None when the header names nothing this
        catalog can resolve (including ``"Auto"``)
    """
    declared = header.alg.upper()
    for member in HEADER_MATCHABLE:
        if declared == member.value:
            return member
    return None


def header_family_hint(header_alg: str) -> SignatureClass:
    """Guess the algorithm family from raw header text.

    Loose heuristic: looks for the markers ``HS``, then ``RS``/``ES``,
    anywhere in the text regardless of case. A substring hit is enough, so
    unrelated text such as ``"USERS"`` reads as ``PUBKEY`` and ``"PS256"``
    reads as ``OTHER``.
    """
    text = header_alg.upper()
    if "HS" in text:
        return SignatureClass.HMAC
    if "RS" in text or "ES" in text:
        return SignatureClass.PUBKEY
    return SignatureClass.OTHER


def classify(signature_type: SignatureType, header_alg: str) -> SignatureClass:
    """Return the family governing how ``signature_type`` is handled.

    ``AUTO`` and ``RETAIN`` carry no family of their own, so the raw header
    text decides via :func:`header_family_hint`.
    """
    if signature_type is SignatureType.NONE:
        return SignatureClass.OTHER
    if signature_type in HMAC_ALGORITHMS:
        return SignatureClass.HMAC
    if signature_type in PUBKEY_ALGORITHMS:
        return SignatureClass.PUBKEY
    return header_family_hint(header_alg)
