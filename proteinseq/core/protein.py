"""
The Protein container: an ordered, mutable chain of residue codes.

Residues are stored in the order they were added. Position 0 holds the
first residue appended and every positional operation (``insert``,
``residue_at``, ``residue_name_at``) counts from there.

Invalid residue codes passed to ``append`` or ``insert`` are ignored without
raising; callers that need to know whether a residue was accepted compare
``size()`` before and after. Construction from text is stricter: one bad
character anywhere leaves the protein empty.

Example:
    >>> protein = Protein("AG")
    >>> protein.insert("R", 1)
    >>> protein.sequence()
    'ARG'
    >>> protein.residue_name_at(1)
    'Arginine'
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from .models import ProteinSummary, ResidueInfo
from .residues import is_valid_code, lookup
from .sequence import DEFAULT_VALIDATOR, PositionError

logger = logging.getLogger(__name__)

# Mass of one water molecule released per peptide bond (Da)
WATER_MASS = 18.0153


@dataclass(frozen=True)
class WeightConfig:
    """
    Parameters for molecular weight calculation.

    The defaults report kiloDaltons with one water molecule removed for each
    peptide bond.
    """
    water_mass: float = WATER_MASS
    daltons_per_unit: float = 1000.0

    def __post_init__(self):
        if self.water_mass < 0:
            raise ValueError(f"water_mass must be non-negative: {self.water_mass}")
        if self.daltons_per_unit <= 0:
            raise ValueError(f"daltons_per_unit must be positive: {self.daltons_per_unit}")


DEFAULT_WEIGHT_CONFIG = WeightConfig()


class Protein:
    """
    A protein as an ordered list of one-letter residue codes.

    Args:
        text: Optional raw sequence. It is uppercased and accepted only if
            every character is a valid code; otherwise the protein starts
            empty.
    """

    def __init__(self, text: str = ""):
        self._residues: list[str] = []

        if not text:
            return

        is_valid, errors = DEFAULT_VALIDATOR.validate(text)
        if not is_valid:
            logger.debug(f"Rejected sequence text {text!r}: {'; '.join(errors)}")
            return

        for code in DEFAULT_VALIDATOR.normalize(text):
            self.append(code)

    @classmethod
    def from_residues(cls, codes: Iterable[str]) -> Protein:
        """
        Build a protein by appending codes one at a time.

        Unlike text construction, invalid codes are skipped individually.
        """
        protein = cls()
        for code in codes:
            protein.append(code)
        return protein

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, code: str) -> None:
        """Add a residue after the last one. Invalid codes are ignored."""
        if not is_valid_code(code):
            logger.debug(f"Ignored append of invalid residue code {code!r}")
            return
        self._residues.append(code)

    def insert(self, code: str, n: int) -> None:
        """
        Insert a residue so that it ends up at position ``n``.

        ``n == 0`` places it first and ``n == size()`` is the same as
        ``append``. An invalid code, or ``n`` outside ``[0, size()]``, leaves
        the protein unchanged.
        """
        if not is_valid_code(code):
            logger.debug(f"Ignored insert of invalid residue code {code!r}")
            return
        position = self._position(n, len(self._residues) + 1)
        if position is None:
            logger.debug(f"Ignored insert at position {n!r} (size {self.size()})")
            return
        if position == len(self._residues):
            self.append(code)
            return
        self._residues.insert(position, code)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Number of residues."""
        return len(self._residues)

    def sequence(self) -> str:
        """The residue codes as a single string, position 0 first."""
        return "".join(self._residues)

    def residue_at(self, n: int) -> ResidueInfo:
        """
        Residue table entry for the residue at position ``n``.

        Raises:
            PositionError: If ``n`` is not in ``[0, size())``
        """
        position = self._position(n, len(self._residues))
        if position is None:
            raise PositionError(n, len(self._residues))
        return lookup(self._residues[position])

    def residue_name_at(self, n: int) -> str:
        """
        Full name of the residue at position ``n``.

        Raises:
            PositionError: If ``n`` is not in ``[0, size())``
        """
        return self.residue_at(n).name

    def residue_masses(self) -> np.ndarray:
        """Per-position residue masses in Daltons."""
        return np.array([lookup(code).mass for code in self._residues], dtype=float)

    def molecular_weight(self, config: Optional[WeightConfig] = None) -> float:
        """
        Total molecular weight, in kiloDaltons by default.

        The tabulated residue masses are summed and one water molecule is
        subtracted for each of the ``count - 1`` peptide bonds. An empty
        protein weighs exactly 0.

        Args:
            config: Weight parameters (uses DEFAULT_WEIGHT_CONFIG if None)
        """
        if not self._residues:
            return 0.0

        config = config or DEFAULT_WEIGHT_CONFIG
        total = float(self.residue_masses().sum())
        water = config.water_mass * (len(self._residues) - 1)
        return (total - water) / config.daltons_per_unit

    def summary(self, id: Optional[str] = None) -> ProteinSummary:
        """Serialisable snapshot of this protein."""
        return ProteinSummary(
            id=id,
            sequence=self.sequence(),
            size=self.size(),
            molecular_weight=self.molecular_weight(),
        )

    @staticmethod
    def _position(n, upper: int) -> Optional[int]:
        """Return ``n`` as a plain int if it lies in ``[0, upper)``, else None."""
        # bool is an int subclass but never a position
        if isinstance(n, bool):
            return None
        try:
            position = operator.index(n)
        except TypeError:
            return None
        return position if 0 <= position < upper else None

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._residues)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._residues))

    def __str__(self) -> str:
        return self.sequence()

    def __repr__(self) -> str:
        return f"Protein({self.sequence()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Protein):
            return NotImplemented
        return self._residues == other._residues

    __hash__ = None
