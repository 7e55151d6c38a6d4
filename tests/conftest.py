"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable, Generator

import pytest

from jwtedit.config import Settings
from jwtedit.utils.encoding import b64url_encode

_SETTINGS_ENV = (
    "JWTEDIT_DEFAULT_ALGORITHM",
    "JWTEDIT_SECRET",
    "JWTEDIT_SECRET_PATH",
    "JWTEDIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of tests."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def override_settings() -> Generator[Settings, None, None]:
    """Provide isolated jwtedit settings scoped to tests."""

    import jwtedit.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(_env_file=None)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build compact tokens from JSON-serialisable header and payload."""

    def _make(header: dict, payload: dict | None = None, signature: str = "sig") -> str:
        header_segment = b64url_encode(
            json.dumps(header, separators=(",", ":")).encode("utf-8")
        )
        payload_segment = b64url_encode(
            json.dumps(payload or {"hello": "world"}, separators=(",", ":")).encode("utf-8")
        )
        return f"{header_segment}.{payload_segment}.{signature}"

    return _make


@pytest.fixture
def hs256_signing_input() -> str:
    """Signing input whose header declares HS256."""
    return "eyJhbGciOiJIUzI1NiIsInR5cGUiOiJKV1QifQ.eyJoZWxsbyI6IndvcmxkIn0"


@pytest.fixture
def hs256_token(hs256_signing_input: str) -> str:
    """HS256 token carrying a stale signature."""
    return f"{hs256_signing_input}.stale-signature"
