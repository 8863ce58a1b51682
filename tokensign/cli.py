"""tokensign CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tokensign import __version__
from tokensign.algorithms import SUPPORTED_HMAC_NAMES, Algorithm
from tokensign.config import get_settings, set_settings
from tokensign.errors import (
    InvalidKeyMaterialError,
    SignatureGenerationError,
    SignatureVerificationError,
    UnsupportedEncodingError,
)
from tokensign.utils.encoding import decode_segment, encode_segment

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tokensign",
    help="Sign and verify token content with HMAC algorithms",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"tokensign version {__version__}")
        raise typer.Exit()


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load_algorithm() -> Algorithm:
    """Build the configured algorithm, exiting with code 2 on bad configuration."""
    try:
        return get_settings().build_algorithm()
    except (InvalidKeyMaterialError, UnsupportedEncodingError, ValueError) as exc:
        typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def _read_content(path: Path | None) -> bytes:
    if path is None:
        return typer.get_binary_stream("stdin").read()
    return path.expanduser().read_bytes()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help=f"HMAC algorithm ({', '.join(SUPPORTED_HMAC_NAMES)})",
        ),
    ] = None,
    secret_file: Annotated[
        Path | None,
        typer.Option("--secret-file", help="Read the raw secret from this file"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
    ] = None,
) -> None:
    """tokensign - keyed signatures for compact web tokens."""
    # Update settings with CLI flags
    settings = get_settings()
    if algorithm:
        settings.algorithm = algorithm.upper()
    if secret_file:
        settings.secret_file = secret_file
    if log_level:
        settings.log_level = log_level
    set_settings(settings)
    configure_logging(settings.log_level)


@app.command("sign")
def sign(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="File with the content to sign (stdin when omitted)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
) -> None:
    """Print the base64url signature of the content."""
    algorithm = _load_algorithm()
    content = _read_content(path)

    try:
        signature = algorithm.sign(content)
    except SignatureGenerationError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Signed %d bytes with %s", len(content), algorithm.name)
    typer.echo(encode_segment(signature))


@app.command("verify")
def verify(
    signature: Annotated[
        str,
        typer.Option("--signature", "-s", help="Base64url signature to check"),
    ],
    path: Annotated[
        Path | None,
        typer.Argument(
            help="File with the signed content (stdin when omitted)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
) -> None:
    """Verify a base64url signature over the content."""
    algorithm = _load_algorithm()
    content = _read_content(path)

    try:
        algorithm.verify(content, decode_segment(signature))
    except (SignatureVerificationError, ValueError) as exc:
        typer.secho(
            f"Signature verification failed ({algorithm.name})",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1) from exc

    typer.secho(f"Signature valid ({algorithm.name})", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
