"""
proteinseq: an amino-acid chain as a mutable Python value.

A ``Protein`` holds residues from a fixed 22-letter alphabet (the 20
standard amino acids plus the ambiguity codes B and Z). It supports append,
positional insert, per-residue metadata lookup and molecular weight in
kiloDaltons, with one water molecule removed per peptide bond.

Key components:
    - core.residues: The read-only residue table (name, mass, volume)
    - core.protein: The Protein container
    - core.sequence: Validation and error types
    - core.fasta: FASTA input/output
    - cli: Command-line interface

Basic usage:
    >>> from proteinseq import Protein
    >>>
    >>> protein = Protein("ag")
    >>> protein.insert("R", 1)
    >>> print(protein.sequence(), protein.size())
    ARG 3
    >>> protein.residue_name_at(0)
    'Alanine'

License: MIT
"""

__version__ = "0.1.0"

from .core.fasta import parse_fasta, to_fasta
from .core.models import ProteinSummary, ResidueInfo
from .core.protein import Protein, WeightConfig
from .core.residues import RESIDUE_TABLE, VALID_CODES, lookup
from .core.sequence import PositionError, SequenceError, SequenceValidator

__all__ = [
    # Version
    "__version__",
    # Container
    "Protein",
    "WeightConfig",
    # Residue table
    "RESIDUE_TABLE",
    "VALID_CODES",
    "lookup",
    # Models
    "ResidueInfo",
    "ProteinSummary",
    # Validation and errors
    "SequenceValidator",
    "SequenceError",
    "PositionError",
    # FASTA
    "parse_fasta",
    "to_fasta",
]
