"""Signature engine: recompute a token signature for a chosen algorithm."""

from __future__ import annotations

import logging

from jwtedit.algorithms import HMAC_ALGORITHMS, SignatureType
from jwtedit.app.adapters import get_signer
from jwtedit.errors import UnsupportedAlgorithmError
from jwtedit.utils.encoding import b64url_encode

logger = logging.getLogger(__name__)


def _as_bytes(text: str | bytes) -> bytes:
    # surrogateescape restores non-UTF-8 bytes decoded from argv or env.
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8", "surrogateescape")


def calc_signature(
    signing_input: str,
    secret: str | bytes,
    original_signature: str,
    signature_type: SignatureType,
) -> str:
    """Compute the signature segment for ``signing_input``.

    Args:
        signing_input: ``<header>.<payload>`` exactly as it appears in the token
        secret: MAC key; text is UTF-8 encoded (lone surrogates map back
            to their original bytes), bytes are used as-is
        original_signature: Signature segment currently on the token
        signature_type: Algorithm to sign with

    Returns:
        Unpadded base64url signature. ``RETAIN`` returns
        ``original_signature`` unchanged and ``NONE`` returns ``""``.

    Raises:
        UnsupportedAlgorithmError: If ``signature_type`` has no signer
            (reserved asymmetric algorithms, unresolved ``AUTO``)
        KeyInitializationError: If the MAC primitive rejects the key
    """
    if signature_type is SignatureType.RETAIN:
        return original_signature
    if signature_type is SignatureType.NONE:
        return ""
    if signature_type not in HMAC_ALGORITHMS:
        raise UnsupportedAlgorithmError(signature_type)

    signer = get_signer(signature_type)
    raw = signer.sign(_as_bytes(signing_input), _as_bytes(secret))
    logger.debug("Computed %s signature (%d bytes)", signature_type, len(raw))
    return b64url_encode(raw)
