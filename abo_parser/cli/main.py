"""
Main CLI application.

Entry point for abo-parser command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import abo_parser
from abo_parser.cli.context import ExitCode, build_config, resolve_max_bytes
from abo_parser.cli.output import OutputFormat, get_output_adapter
from abo_parser.core.parser import AboResourceError, ParsedDocument, parse_bytes, parse_file

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="abo-parser",
    help="ABO bank statement parser",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"abo-parser {abo_parser.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log parser decisions to stderr"),
    ] = False,
) -> None:
    """ABO bank statement parser."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load(
    file: Path | None,
    encoding: str | None,
    convert: bool,
    max_bytes: int | None,
) -> ParsedDocument:
    """Read and parse a file, or stdin when no file is given."""
    try:
        max_bytes_value = resolve_max_bytes(max_bytes)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    config = build_config(encoding, convert)
    logger.debug("Reading %s with %s", file or "<stdin>", config)

    try:
        if file is not None:
            document = parse_file(file, config, max_bytes=max_bytes_value)
        else:
            stream = typer.get_binary_stream("stdin")
            data = (
                stream.read(max_bytes_value + 1) if max_bytes_value is not None else stream.read()
            )
            document = parse_bytes(data, config, filename="<stdin>", max_bytes=max_bytes_value)
    except AboResourceError as e:
        typer.echo(f"Error: {e.error.message}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None

    # Blank input, from a file or stdin, leaves no records
    if not document.raw_records:
        typer.echo("Error: No input data provided", err=True)
        raise typer.Exit(ExitCode.USAGE)

    return document


# =============================================================================
# Convert Command
# =============================================================================


@app.command()
def convert(
    file: Annotated[
        Path | None,
        typer.Argument(help="ABO file to convert (reads stdin when omitted)", dir_okay=False),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write JSON to file instead of stdout"),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            "-e",
            help="Source encoding, or 'auto'. Defaults to ABO_PARSER_ENCODING or cp1250.",
        ),
    ] = None,
    convert_encoding: Annotated[
        bool,
        typer.Option("--convert/--no-convert", help="Convert from the source encoding"),
    ] = True,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Write JSON on a single line"),
    ] = False,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). Defaults to ABO_PARSER_MAX_BYTES or 100MiB.",
        ),
    ] = None,
) -> None:
    """Convert an ABO file to JSON."""
    document = _load(file, encoding, convert_encoding, max_bytes)

    adapter = get_output_adapter(OutputFormat.JSON, indent=None if compact else 2)
    rendered = adapter.render_document(document)

    if output:
        try:
            output.write_text(rendered + "\n", encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Unable to write to file '{output}': {e}", err=True)
            raise typer.Exit(ExitCode.ERROR) from None
        typer.echo(f"Output written to: {output}", err=True)
    else:
        typer.echo(rendered)

    raise typer.Exit(ExitCode.SUCCESS)


# =============================================================================
# Summary Command
# =============================================================================


@app.command()
def summary(
    file: Annotated[Path, typer.Argument(help="ABO file to summarize", exists=True, dir_okay=False)],
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", "-e", help="Source encoding, or 'auto'"),
    ] = None,
    convert_encoding: Annotated[
        bool,
        typer.Option("--convert/--no-convert", help="Convert from the source encoding"),
    ] = True,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    max_bytes: Annotated[
        int | None,
        typer.Option("--max-bytes", help="Maximum input size in bytes (0 = unlimited)"),
    ] = None,
) -> None:
    """Show an overview of an ABO file."""
    document = _load(file, encoding, convert_encoding, max_bytes)

    adapter = get_output_adapter(OutputFormat.TERMINAL, color=color)
    typer.echo(adapter.render_document(document))


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
