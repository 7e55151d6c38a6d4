"""jwtedit - JWT signature algorithm resolution and re-signing.

Resolves the algorithm a token header declares, classifies it into a
handling family, and recomputes HMAC signatures over a signing input.
"""

__version__ = "0.1.0"
__author__ = "jwtedit Contributors"

from jwtedit.algorithms import SignatureClass, SignatureType, classify, resolve
from jwtedit.config import Settings, get_settings
from jwtedit.errors import (
    JwtEditError,
    KeyInitializationError,
    MissingSecretError,
    SignatureError,
    TokenFormatError,
    UnsupportedAlgorithmError,
)
from jwtedit.header import JwtHeader
from jwtedit.signature import calc_signature

__all__ = [
    "JwtEditError",
    "JwtHeader",
    "KeyInitializationError",
    "MissingSecretError",
    "Settings",
    "SignatureClass",
    "SignatureError",
    "SignatureType",
    "TokenFormatError",
    "UnsupportedAlgorithmError",
    "__version__",
    "calc_signature",
    "classify",
    "get_settings",
    "resolve",
]
