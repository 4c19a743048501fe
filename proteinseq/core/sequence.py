"""
Sequence validation for proteinseq.

Text handed to a ``Protein`` is normalised to uppercase and then checked as
a whole against the residue alphabet. Validation here never partially
accepts a string: a sequence is either entirely valid or rejected.
"""

from __future__ import annotations

from .residues import VALID_CODES


class SequenceError(Exception):
    """Exception raised for sequence-related errors."""
    pass


class PositionError(SequenceError, IndexError):
    """Raised when a residue position does not exist in a protein."""

    def __init__(self, position, size: int):
        self.position = position
        self.size = size
        super().__init__(
            f"Position {position!r} out of range for protein of {size} residues"
        )


def normalize_sequence(text: str) -> str:
    """Uppercase a raw sequence string."""
    return text.upper()


class SequenceValidator:
    """
    Checks raw text against the residue alphabet.

    Non-ASCII characters are always rejected, so that Unicode case mapping
    (e.g. ``'ı'.upper() == 'I'``) cannot turn a foreign letter into a code.
    """

    def __init__(self, alphabet: str = VALID_CODES):
        """
        Initialize validator with an accepted alphabet.

        Args:
            alphabet: String of accepted uppercase one-letter codes
        """
        self.allowed_chars = frozenset(alphabet)

    def normalize(self, text: str) -> str:
        """Uppercase raw text without checking it."""
        return normalize_sequence(text)

    def validate(self, text: str) -> tuple[bool, list[str]]:
        """
        Validate a sequence and return status with error messages.

        Args:
            text: Raw sequence text (any case)

        Returns:
            Tuple of (is_valid, list_of_error_messages)
        """
        errors = []

        if not text.isascii():
            non_ascii = sorted({ch for ch in text if not ch.isascii()})
            errors.append(f"Non-ASCII characters: {non_ascii}")

        seq = self.normalize(text)
        invalid_chars = {ch for ch in seq if ch.isascii()} - self.allowed_chars
        if invalid_chars:
            errors.append(f"Invalid characters: {sorted(invalid_chars)}")

        return len(errors) == 0, errors

    def is_valid(self, text: str) -> bool:
        is_valid, _ = self.validate(text)
        return is_valid


DEFAULT_VALIDATOR = SequenceValidator()
