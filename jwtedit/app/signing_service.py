"""Signing service composing header resolution, classification, and the engine."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from jwtedit.algorithms import SignatureClass, SignatureType, classify, resolve
from jwtedit.config import Settings
from jwtedit.errors import MissingSecretError, UnsupportedAlgorithmError
from jwtedit.header import JwtHeader
from jwtedit.signature import calc_signature
from jwtedit.token import split_token

logger = logging.getLogger(__name__)


class AlgorithmReport(BaseModel):
    """How a raw header ``alg`` value is interpreted."""

    header_alg: str
    resolved: SignatureType | None
    family: SignatureClass


class SigningResult(BaseModel):
    """Outcome of re-signing a token."""

    token: str
    signature: str
    algorithm: SignatureType
    family: SignatureClass


class SigningService:
    """Re-sign tokens using configured defaults.

    The service never rewrites the header: a requested algorithm that
    differs from the declared ``alg`` is signed as requested and logged.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def describe(self, header_alg: str) -> AlgorithmReport:
        """Report resolution and family for a raw header ``alg`` value."""
        header = JwtHeader(alg=header_alg)
        resolved = resolve(header)
        requested = resolved if resolved is not None else SignatureType.AUTO
        return AlgorithmReport(
            header_alg=header_alg,
            resolved=resolved,
            family=classify(requested, header_alg),
        )

    def sign(
        self,
        token: str,
        *,
        secret: str | bytes | None = None,
        signature_type: SignatureType | None = None,
    ) -> SigningResult:
        """Recompute the signature of ``token``.

        Args:
            token: ``header.payload`` or ``header.payload.signature``
            secret: HMAC secret; falls back to the configured secret
            signature_type: Algorithm to use; falls back to
                ``settings.default_algorithm``

        Returns:
            Re-signed token and the algorithm actually applied

        Raises:
            TokenFormatError: If the token or its header cannot be decoded
            UnsupportedAlgorithmError: If ``AUTO`` cannot resolve the header
                or the algorithm has no signer
            MissingSecretError: If an HMAC algorithm is chosen without a secret
        """
        parts = split_token(token)
        header = parts.header()

        requested = signature_type or self.settings.default_algorithm
        family = classify(requested, header.alg)

        algorithm = requested
        if requested is SignatureType.AUTO:
            resolved = resolve(header)
            if resolved is None:
                raise UnsupportedAlgorithmError(header.alg)
            algorithm = resolved
            logger.debug("Detected %s from header", algorithm)
        elif requested is not SignatureType.RETAIN and header.alg.upper() != str(requested):
            logger.warning(
                "Signing with %s although the header declares %r", requested, header.alg
            )

        key = secret
        if key is None and family is SignatureClass.HMAC and algorithm is not SignatureType.RETAIN:
            key = self.settings.get_secret()
            if key is None:
                raise MissingSecretError(f"{algorithm} requires a secret; pass --secret")

        signature = calc_signature(parts.signing_input, key or b"", parts.signature, algorithm)
        return SigningResult(
            token=parts.with_signature(signature),
            signature=signature,
            algorithm=algorithm,
            family=family,
        )
