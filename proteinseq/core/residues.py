"""
Residue table: the 22 one-letter codes this package accepts.

Twenty standard amino acids plus the two ambiguity codes ``B`` (Asn/Asp) and
``Z`` (Gln/Glu). Masses are the free amino-acid masses in Daltons; volumes
are side chain volumes in cubic Ångströms and are informational only.

The table is built once at import and exposed through a read-only mapping,
so every ``Protein`` shares the same data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import ResidueInfo

# (code, name, mass in Da, volume in Å³)
_RESIDUE_ROWS = (
    ("A", "Alanine", 89.09, 88.6),
    ("R", "Arginine", 174.20, 173.4),
    ("N", "Asparagine", 132.12, 114.1),
    ("D", "Aspartic Acid", 133.10, 111.1),
    ("B", "Asparagine/Aspartic Acid", 132.67, 112.6),
    ("C", "Cysteine", 121.15, 108.5),
    ("Q", "Glutamine", 146.15, 143.8),
    ("E", "Glutamic Acid", 147.13, 138.4),
    ("Z", "Glutamine/Glutamic Acid", 146.76, 146.6),
    ("G", "Glycine", 75.07, 60.1),
    ("H", "Histidine", 155.16, 153.2),
    ("I", "Isoleucine", 131.17, 166.7),
    ("L", "Leucine", 131.17, 166.7),
    ("K", "Lysine", 146.19, 168.6),
    ("M", "Methionine", 149.21, 162.9),
    ("F", "Phenylalanine", 165.19, 189.9),
    ("P", "Proline", 115.13, 112.7),
    ("S", "Serine", 105.09, 89.0),
    ("T", "Threonine", 119.12, 116.1),
    ("W", "Tryptophan", 204.23, 227.8),
    ("Y", "Tyrosine", 181.19, 193.6),
    ("V", "Valine", 117.15, 140.0),
)

RESIDUE_TABLE: Mapping[str, ResidueInfo] = MappingProxyType({
    code: ResidueInfo(code=code, name=name, mass=mass, volume=volume)
    for code, name, mass, volume in _RESIDUE_ROWS
})

# Accepted alphabet, in table order
VALID_CODES = "".join(RESIDUE_TABLE)

# Ambiguity codes and the residues each stands for
AMBIGUITY_CODES = MappingProxyType({
    "B": ("N", "D"),
    "Z": ("Q", "E"),
})


def is_valid_code(code) -> bool:
    """True if ``code`` is a single uppercase character from the alphabet."""
    return isinstance(code, str) and len(code) == 1 and code in RESIDUE_TABLE


def lookup(code: str) -> ResidueInfo:
    """
    Return the table entry for a one-letter code.

    Raises:
        KeyError: If ``code`` is not one of the 22 accepted codes
    """
    return RESIDUE_TABLE[code]
