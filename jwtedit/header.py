"""Read-only view over a decoded JWT header."""

from pydantic import BaseModel, ConfigDict, Field


class JwtHeader(BaseModel):
    """Decoded JOSE header.

    Only ``alg`` is interpreted by the signing core; any other members
    (``typ``, ``kid``, ...) are kept so callers can round-trip them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    alg: str = Field(..., description="Declared signature algorithm, e.g. HS256")
