"""CLI integration smoke tests."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from jwtedit import __version__
from jwtedit.algorithms import SignatureType
from jwtedit.cli import app
from jwtedit.signature import calc_signature

HS256_PASSWORD_SIGNATURE = "jW6hG22ajnhgpvKKvkWUVI8CYobL7DOdmp6KlGYAfZ8"

runner = CliRunner()


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"jwtedit version {__version__}" in result.stdout


def test_sign_prints_resigned_token(
    override_settings, hs256_token: str, hs256_signing_input: str
) -> None:
    """`jwtedit sign` detects HS256 from the header and re-signs."""

    result = runner.invoke(app, ["sign", hs256_token, "--secret", "password"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == f"{hs256_signing_input}.{HS256_PASSWORD_SIGNATURE}"


def test_sign_signature_only(override_settings, hs256_token: str) -> None:
    result = runner.invoke(
        app, ["sign", hs256_token, "-s", "password", "-a", "hs256", "--signature-only"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == HS256_PASSWORD_SIGNATURE


def test_sign_reads_secret_file(override_settings, hs256_token: str, tmp_path: Path) -> None:
    secret_file = tmp_path / "hmac.key"
    secret_file.write_bytes(b"password")

    result = runner.invoke(
        app, ["--secret-file", str(secret_file), "sign", hs256_token, "--signature-only"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == HS256_PASSWORD_SIGNATURE


def test_sign_retain_passes_signature_through(override_settings, hs256_token: str) -> None:
    result = runner.invoke(app, ["sign", hs256_token, "--alg", "retain"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == hs256_token


def test_sign_reserved_algorithm_fails(override_settings, hs256_token: str) -> None:
    result = runner.invoke(app, ["sign", hs256_token, "-s", "password", "--alg", "RS256"])

    assert result.exit_code == 1
    assert "Unrecognised signature type: RS256" in result.output


def test_sign_without_secret_fails(override_settings, hs256_token: str) -> None:
    result = runner.invoke(app, ["sign", hs256_token])

    assert result.exit_code == 1
    assert "requires a secret" in result.output


def test_sign_unknown_algorithm_is_usage_error(override_settings, hs256_token: str) -> None:
    result = runner.invoke(app, ["sign", hs256_token, "--alg", "md5"])

    assert result.exit_code == 2


def test_sign_malformed_token_fails(override_settings) -> None:
    result = runner.invoke(app, ["sign", "garbage", "-s", "password"])

    assert result.exit_code == 1
    assert "segments" in result.output


def test_alg_show(override_settings) -> None:
    result = runner.invoke(app, ["alg", "show", "hs512"])

    assert result.exit_code == 0, result.output
    assert "resolved: HS512" in result.stdout
    assert "family:   hmac" in result.stdout


def test_alg_show_unresolved(override_settings) -> None:
    result = runner.invoke(app, ["alg", "show", "ES256"])

    assert result.exit_code == 0, result.output
    assert "resolved: unresolved" in result.stdout
    assert "family:   pubkey" in result.stdout


def test_alg_list_covers_catalog(override_settings) -> None:
    result = runner.invoke(app, ["alg", "list"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.strip().splitlines()
    assert lines[0].split() == ["Auto", "other", "supported"]
    assert lines[3].split() == ["HS256", "hmac", "supported"]
    assert ["PS512", "pubkey", "reserved"] in [line.split() for line in lines]


def test_sign_accepts_undecodable_secret_bytes(
    override_settings, hs256_token: str, hs256_signing_input: str
) -> None:
    expected = calc_signature(hs256_signing_input, b"pass\xffword", "", SignatureType.HS256)

    result = runner.invoke(
        app, ["sign", hs256_token, "-s", "pass\udcffword", "--signature-only"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_secret_file_does_not_leak_into_later_invocations(
    override_settings, hs256_token: str, tmp_path: Path
) -> None:
    secret_file = tmp_path / "hmac.key"
    secret_file.write_bytes(b"password")

    first = runner.invoke(app, ["--secret-file", str(secret_file), "sign", hs256_token])
    second = runner.invoke(app, ["sign", hs256_token])

    assert first.exit_code == 0, first.output
    assert override_settings.secret_path is None
    assert second.exit_code == 1
    assert "requires a secret" in second.output
