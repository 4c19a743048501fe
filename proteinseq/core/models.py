"""
Core data models for proteinseq.

Residue metadata and protein summaries are represented as Pydantic models
so they validate on construction and serialise cleanly for the CLI's JSON
output. The mutable residue chain itself lives in ``protein.py``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResidueInfo(BaseModel):
    """
    Descriptive metadata for a single amino-acid code.

    The mass is the tabulated free amino-acid mass; water lost to peptide
    bond formation is subtracted when a whole chain is weighed, not here.
    """
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, max_length=1, description="One-letter code")
    name: str = Field(..., min_length=1, description="Full residue name")
    mass: float = Field(..., gt=0, description="Residue mass in Daltons")
    volume: float = Field(..., gt=0, description="Side chain volume (Å³)")

    @field_validator("code")
    @classmethod
    def code_is_uppercase(cls, v: str) -> str:
        if not v.isupper():
            raise ValueError(f"Residue code must be an uppercase letter: {v!r}")
        return v


class ProteinSummary(BaseModel):
    """Snapshot of a protein's size, sequence and molecular weight."""

    id: Optional[str] = Field(None, description="Record identifier, if any")
    sequence: str = Field(..., description="Residues in append order")
    size: int = Field(..., ge=0, description="Number of residues")
    molecular_weight: float = Field(..., ge=0, description="Weight in kiloDaltons")

    @field_validator("size")
    @classmethod
    def size_matches_sequence(cls, v: int, info) -> int:
        if "sequence" in info.data and v != len(info.data["sequence"]):
            raise ValueError(
                f"size ({v}) must match sequence length ({len(info.data['sequence'])})"
            )
        return v
