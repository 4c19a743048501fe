"""
proteinseq Command Line Interface.

Built with Click, with rich for tables and error messages. Invoked with no
command it behaves as a simple driver: one sequence token is read from
standard input and its sequence, size and weight are printed.

Usage:
    echo MVLSPADKTNV | proteinseq
    proteinseq describe ARG
    proteinseq residues
    proteinseq inspect MVLSPADKTNV
    proteinseq fasta proteins.fasta --format json
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import __version__
from ..core.fasta import parse_fasta
from ..core.protein import Protein
from ..core.residues import AMBIGUITY_CODES, RESIDUE_TABLE
from ..core.sequence import DEFAULT_VALIDATOR, SequenceError

console = Console()

PROMPT = "Provide an amino acid sequence: "


def format_weight(weight: float, precision: Optional[int] = None) -> str:
    """Format a weight with six significant digits, or fixed decimals."""
    if precision is None:
        return f"{weight:g}"
    return f"{weight:.{precision}f}"


def read_token(stream: TextIO) -> str:
    """Return the first whitespace-delimited token of a stream, or ''."""
    for line in stream:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return ""


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="proteinseq")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Decimal places for printed weights (default: 6 significant digits)"
)
@click.pass_context
def cli(ctx, verbose: bool, precision: Optional[int]):
    """
    proteinseq: amino-acid chains, their residues and their weight.

    With no command, reads one sequence from standard input and prints the
    sequence, its residue count and its weight in kiloDaltons.

    Run 'proteinseq COMMAND --help' for command-specific help.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["precision"] = precision

    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        ctx.invoke(describe)


@cli.command("describe")
@click.argument("sequence", required=False)
@click.pass_context
def describe(ctx, sequence: Optional[str]):
    """
    Print a sequence, its residue count and its weight.

    SEQUENCE defaults to the first token on standard input. A sequence with
    any invalid character is reported as empty; the exit code is always 0.

    \b
    Examples:
        proteinseq describe ARG
        echo arg | proteinseq describe
    """
    if sequence is None:
        if sys.stdin.isatty():
            click.echo(PROMPT, nl=False, err=True)
        sequence = read_token(sys.stdin)

    precision = ctx.obj.get("precision") if ctx.obj else None
    protein = Protein(sequence)

    click.echo(protein.sequence())
    click.echo(f"This protein contains {protein.size()} residues.")
    click.echo(
        f"This protein weighs {format_weight(protein.molecular_weight(), precision)} kiloDaltons."
    )


@cli.command("residues")
def residues():
    """List the accepted residue codes with their name, mass and volume."""
    table = Table(title="Residue Table", show_header=True, header_style="bold cyan")
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Mass (Da)", justify="right")
    table.add_column("Volume (Å³)", justify="right")

    for code, info in RESIDUE_TABLE.items():
        name = info.name
        if code in AMBIGUITY_CODES:
            name = f"{name} [dim](ambiguous)[/dim]"
        table.add_row(code, name, f"{info.mass:.2f}", f"{info.volume:.1f}")

    console.print(table)


@cli.command("inspect")
@click.argument("sequence")
@click.pass_context
def inspect_sequence(ctx, sequence: str):
    """
    Show every position of a sequence with its residue metadata.

    \b
    Examples:
        proteinseq inspect MVLSPADKTNV
    """
    is_valid, errors = DEFAULT_VALIDATOR.validate(sequence)
    if not is_valid:
        console.print(f"[red]✗ Invalid sequence:[/red] {sequence}")
        for error in errors:
            console.print(f"    - {error}")
        sys.exit(1)

    precision = ctx.obj.get("precision") if ctx.obj else None
    protein = Protein(sequence)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Position", justify="right")
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Mass (Da)", justify="right")
    table.add_column("Volume (Å³)", justify="right")

    for position in range(protein.size()):
        info = protein.residue_at(position)
        table.add_row(
            str(position), info.code, info.name,
            f"{info.mass:.2f}", f"{info.volume:.1f}",
        )

    console.print(table)
    console.print(
        f"[bold]{protein.size()}[/bold] residues, "
        f"[bold]{format_weight(protein.molecular_weight(), precision)}[/bold] kiloDaltons"
    )


@cli.command("fasta")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "-f",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format"
)
@click.option("--strict", is_flag=True, help="Fail on records with invalid characters")
@click.pass_context
def fasta(ctx, input_file: str, format: str, strict: bool):
    """
    Summarise every protein in a FASTA file.

    Records containing invalid characters are reported as empty proteins
    unless --strict is given.

    \b
    Examples:
        proteinseq fasta proteins.fasta
        proteinseq fasta proteins.fasta --format json --strict
    """
    try:
        summaries = [
            protein.summary(id=record_id)
            for record_id, protein in parse_fasta(input_file, strict=strict)
        ]
    except (SequenceError, ValueError, OSError) as e:
        console.print(f"[red]✗ Error loading sequences:[/red] {e}")
        sys.exit(1)

    if format == "json":
        click.echo(json.dumps([s.model_dump() for s in summaries], indent=2))
        return

    precision = ctx.obj.get("precision") if ctx.obj else None

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold")
    table.add_column("Residues", justify="right")
    table.add_column("Weight (kDa)", justify="right")

    for summary in summaries:
        table.add_row(
            summary.id or "-",
            str(summary.size),
            format_weight(summary.molecular_weight, precision),
        )

    console.print(table)


def main():
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
