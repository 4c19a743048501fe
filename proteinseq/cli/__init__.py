"""
Command-line interface for proteinseq.

Run with no command to read one sequence from standard input and print its
sequence, residue count and weight. Subcommands cover the residue table,
per-position inspection and FASTA files.

Usage patterns:
    echo ARG | proteinseq
    proteinseq inspect MVLSPADKTNV
    proteinseq fasta proteins.fasta --format json
"""

from .main import cli, main

__all__ = ["cli", "main"]
