"""
Tests for sequence validation and the error types.

Validation is all-or-nothing: a single invalid character rejects the whole
string, and nothing is ever silently dropped.
"""

import pytest

from proteinseq.core.sequence import (
    PositionError,
    SequenceError,
    SequenceValidator,
    normalize_sequence,
)


class TestSequenceValidator:

    def test_valid_standard_sequence(self):
        validator = SequenceValidator()
        is_valid, errors = validator.validate("MVLSPADKTNVKAAWGKVGAH")

        assert is_valid
        assert errors == []

    def test_lowercase_accepted(self):
        validator = SequenceValidator()
        assert validator.is_valid("mvlspadktnv")
        assert validator.normalize("mvlspadktnv") == "MVLSPADKTNV"

    def test_ambiguity_codes_accepted(self):
        assert SequenceValidator().is_valid("BZbz")

    def test_reject_invalid_characters(self):
        validator = SequenceValidator()
        is_valid, errors = validator.validate("MVLS123ADKTNV")

        assert not is_valid
        assert errors == ["Invalid characters: ['1', '2', '3']"]

    @pytest.mark.parametrize("text", ["X", "MVLSX", "A G", "AG\n", "A-G", "J", "O", "U"])
    def test_reject_outside_alphabet(self, text):
        assert not SequenceValidator().is_valid(text)

    def test_reject_non_ascii(self):
        """Dotless i uppercases to I but is still not a residue code."""
        validator = SequenceValidator()
        is_valid, errors = validator.validate("ı")

        assert not is_valid
        assert any("Non-ASCII" in e for e in errors)

    def test_empty_string_is_valid(self):
        assert SequenceValidator().is_valid("")

    def test_custom_alphabet(self):
        validator = SequenceValidator(alphabet="AG")
        assert validator.is_valid("gaga")
        assert not validator.is_valid("GAR")


def test_normalize_sequence():
    assert normalize_sequence("aRg") == "ARG"


class TestPositionError:

    def test_hierarchy(self):
        """Catchable both as a package error and as a plain IndexError."""
        assert issubclass(PositionError, SequenceError)
        assert issubclass(PositionError, IndexError)

    def test_carries_context(self):
        error = PositionError(5, 3)
        assert error.position == 5
        assert error.size == 3
        assert "5" in str(error) and "3 residues" in str(error)
