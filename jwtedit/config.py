"""Configuration management with Pydantic settings."""

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jwtedit.algorithms import SignatureType


class Settings(BaseSettings):
    """jwtedit configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="JWTEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_algorithm: SignatureType = Field(
        default=SignatureType.AUTO,
        description="Algorithm used when none is requested (Auto = detect from header)",
    )

    secret: SecretStr | None = Field(
        default=None,
        description="HMAC secret used when none is passed explicitly",
    )

    secret_path: Path | None = Field(
        default=None,
        description="File whose raw bytes are the HMAC secret",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...)",
    )

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: object) -> object:
        # Accept any casing from env vars and .env files.
        if isinstance(value, str):
            return SignatureType.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    def get_secret(self) -> bytes | None:
        """Return the configured secret bytes, preferring the inline value."""
        if self.secret is not None:
            return self.secret.get_secret_value().encode("utf-8", "surrogateescape")
        if self.secret_path is not None:
            return self.secret_path.expanduser().read_bytes()
        return None


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
