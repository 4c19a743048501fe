"""
Core data structures for proteinseq.

Modules:
    models: Pydantic models for residue metadata and protein summaries
    residues: The read-only 22-code residue table
    sequence: Alphabet validation and the package error types
    protein: The mutable Protein container and weight configuration
    fasta: FASTA reading and writing via Biopython
"""

from .fasta import parse_fasta, to_fasta
from .models import ProteinSummary, ResidueInfo
from .protein import DEFAULT_WEIGHT_CONFIG, WATER_MASS, Protein, WeightConfig
from .residues import AMBIGUITY_CODES, RESIDUE_TABLE, VALID_CODES, is_valid_code, lookup
from .sequence import (
    PositionError,
    SequenceError,
    SequenceValidator,
    normalize_sequence,
)

__all__ = [
    # Models
    "ResidueInfo",
    "ProteinSummary",
    # Residue table
    "RESIDUE_TABLE",
    "VALID_CODES",
    "AMBIGUITY_CODES",
    "is_valid_code",
    "lookup",
    # Validation
    "SequenceValidator",
    "SequenceError",
    "PositionError",
    "normalize_sequence",
    # Container
    "Protein",
    "WeightConfig",
    "DEFAULT_WEIGHT_CONFIG",
    "WATER_MASS",
    # FASTA
    "parse_fasta",
    "to_fasta",
]
