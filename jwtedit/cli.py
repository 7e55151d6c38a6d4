"""jwtedit CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from jwtedit import __version__
from jwtedit.algorithms import SignatureType, classify
from jwtedit.app.signing_service import SigningService
from jwtedit.config import get_settings
from jwtedit.errors import JwtEditError

app = typer.Typer(
    name="jwtedit",
    help="Resolve JWT signature algorithms and re-sign tokens",
    add_completion=True,
    no_args_is_help=True,
)
alg_app = typer.Typer(help="Inspect the signature algorithm catalog")
app.add_typer(alg_app, name="alg")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"jwtedit version {__version__}")
        raise typer.Exit()


def _parse_algorithm(value: str | None) -> SignatureType | None:
    if value is None:
        return None
    try:
        return SignatureType.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _fail(exc: Exception) -> NoReturn:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
    secret_file: Annotated[
        Path | None,
        typer.Option("--secret-file", help="Read the HMAC secret from this file"),
    ] = None,
) -> None:
    """jwtedit - JWT signature algorithm resolution and re-signing."""
    # CLI flags apply to this invocation only.
    settings = get_settings()
    if secret_file:
        settings = settings.model_copy(update={"secret_path": secret_file})
    ctx.obj = settings

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("sign")
def sign(
    ctx: typer.Context,
    token: Annotated[
        str,
        typer.Argument(help="Token (header.payload[.signature]) to re-sign"),
    ],
    secret: Annotated[
        str | None,
        typer.Option("--secret", "-s", help="HMAC secret (defaults to configured secret)"),
    ] = None,
    alg: Annotated[
        str | None,
        typer.Option(
            "--alg",
            "-a",
            help="Algorithm: auto, retain, none, hs256, hs384, hs512 (default from settings)",
        ),
    ] = None,
    signature_only: Annotated[
        bool,
        typer.Option("--signature-only", help="Print only the signature segment"),
    ] = False,
) -> None:
    """Recompute the signature of TOKEN."""

    signature_type = _parse_algorithm(alg)
    service = SigningService(ctx.obj)

    try:
        result = service.sign(token, secret=secret, signature_type=signature_type)
    except (JwtEditError, OSError) as exc:
        _fail(exc)

    typer.echo(result.signature if signature_only else result.token)


@alg_app.command("show")
def alg_show(
    ctx: typer.Context,
    header_alg: Annotated[
        str,
        typer.Argument(help="Raw 'alg' value from a token header"),
    ],
) -> None:
    """Show how a header ALG value resolves and which family it belongs to."""

    report = SigningService(ctx.obj).describe(header_alg)
    resolved = str(report.resolved) if report.resolved is not None else "unresolved"
    typer.echo(f"alg:      {report.header_alg}")
    typer.echo(f"resolved: {resolved}")
    typer.echo(f"family:   {report.family}")


@alg_app.command("list")
def alg_list() -> None:
    """List the algorithm catalog in resolution order."""

    for member in SignatureType:
        family = classify(member, str(member))
        status = "reserved" if member.is_reserved else "supported"
        typer.echo(f"{member!s:<8} {family!s:<8} {status}")
