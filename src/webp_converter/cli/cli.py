#!/usr/bin/env python3
"""
webp_converter.cli.app

Typer-based CLI for converting JPEG/PNG/GIF trees into WebP files.

Examples
--------
Convert a folder:

    webp-convert convert assets/images build/webp

Keep going past broken images and report them at the end:

    webp-convert convert assets/images build/webp --keep-going

Convert a single file:

    webp-convert file assets/images/logo.png build/webp
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from webp_converter.errors import ConversionError

app = typer.Typer(
    name="webp-convert",
    help="Convert JPEG / PNG / GIF images to WebP.",
    no_args_is_help=True,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(level: str) -> None:
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Invalid log level '{level}'. Choose from: {', '.join(LOG_LEVELS)}."
        )
    logging.basicConfig(
        level=getattr(logging, normalized),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="WEBP_CONVERTER_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    log_level : str, default="WARNING"
        Root logging level.
    """
    _configure_logging(log_level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(..., help="Folder scanned recursively for images."),
    output_dir: Path = typer.Argument(..., help="Folder receiving the .webp files."),
    keep_going: bool = typer.Option(
        False,
        "--keep-going",
        help="Record per-file failures and continue instead of stopping at the first one.",
    ),
) -> None:
    """Convert every JPEG/PNG/GIF below SOURCE_DIR into OUTPUT_DIR.

    Notes
    -----
    - Output names keep only the file stem, so equally named files from
      different sub-folders overwrite each other.
    - Existing ``.webp`` files are overwritten without warning.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from webp_converter.api import convert_directory_to_webp

        result = convert_directory_to_webp(
            source_dir,
            output_dir,
            fail_fast=not keep_going,
        )
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    for converted in result.converted:
        typer.echo(f"✓ Saved: {converted.output_path}")
    for failure in result.failures:
        typer.echo(f"✗ {type(failure.error).__name__}: {failure.error}", err=True)
    typer.echo(
        f"Converted {len(result.converted)} image(s), "
        f"{len(result.failures)} failed, {result.skipped} skipped."
    )
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("file")
def file_cmd(
    ctx: typer.Context,
    image_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Image to convert.",
    ),
    output_dir: Path = typer.Argument(..., help="Folder receiving the .webp file."),
) -> None:
    """Convert a single image into OUTPUT_DIR."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from webp_converter.api import convert_file_to_webp

        out = convert_file_to_webp(image_path, output_dir)
        typer.echo(f"✓ Saved: {out}")
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and codec support."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for distribution in ("pillow", "pydantic", "typer"):
        try:
            version = metadata.version(distribution)
            typer.echo(f"{distribution}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{distribution}: <not installed>")

    from webp_converter.adapters.codecs import webp_supported

    typer.echo(f"webp support: {'yes' if webp_supported() else 'no'}")


if __name__ == "__main__":
    app()
