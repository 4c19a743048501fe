"""
Tests for the proteinseq command line.

The bare command is the stdin driver: one token in, three lines out, exit
code 0 no matter what the token contains.
"""

import json
import warnings

import pytest
from click.testing import CliRunner

from proteinseq.cli.main import cli, format_weight, read_token


@pytest.fixture
def runner():
    return CliRunner()


class TestStdinDriver:

    def test_valid_sequence(self, runner):
        result = runner.invoke(cli, [], input="ag\n")

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "AG",
            "This protein contains 2 residues.",
            "This protein weighs 0.146145 kiloDaltons.",
        ]

    def test_invalid_sequence_prints_empty_protein(self, runner):
        result = runner.invoke(cli, [], input="a1b\n")

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "",
            "This protein contains 0 residues.",
            "This protein weighs 0 kiloDaltons.",
        ]

    def test_only_first_token_is_read(self, runner):
        result = runner.invoke(cli, [], input="\n  ARG  GGG\nWWW\n")
        assert result.output.splitlines()[0] == "ARG"

    def test_stdin_read_without_deprecation_warnings(self, runner):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = runner.invoke(cli, [], input="AG\n")

        assert result.exit_code == 0
        assert result.exception is None

    def test_empty_input(self, runner):
        result = runner.invoke(cli, [], input="")

        assert result.exit_code == 0
        assert "This protein contains 0 residues." in result.output

    def test_precision_option(self, runner):
        result = runner.invoke(cli, ["--precision", "2"], input="AG\n")
        assert result.output.splitlines()[2] == "This protein weighs 0.15 kiloDaltons."


class TestDescribe:

    def test_argument(self, runner):
        result = runner.invoke(cli, ["describe", "arg"])

        assert result.exit_code == 0
        assert result.output.splitlines()[:2] == ["ARG", "This protein contains 3 residues."]

    def test_reads_stdin_without_argument(self, runner):
        result = runner.invoke(cli, ["describe"], input="G\n")
        assert result.output.splitlines()[2] == "This protein weighs 0.07507 kiloDaltons."


class TestResidues:

    def test_lists_table(self, runner):
        result = runner.invoke(cli, ["residues"])

        assert result.exit_code == 0
        assert "Alanine" in result.output
        assert "Tryptophan" in result.output
        assert "204.23" in result.output


class TestInspect:

    def test_per_position_rows(self, runner):
        result = runner.invoke(cli, ["inspect", "mvl"])

        assert result.exit_code == 0
        for name in ("Methionine", "Valine", "Leucine"):
            assert name in result.output
        assert "3 residues" in result.output

    def test_invalid_sequence_fails(self, runner):
        result = runner.invoke(cli, ["inspect", "MV1"])

        assert result.exit_code == 1
        assert "Invalid sequence" in result.output


class TestFasta:

    @pytest.fixture
    def fasta_file(self, tmp_path):
        path = tmp_path / "proteins.fasta"
        path.write_text(">dipeptide\nAG\n>tripeptide\nARG\n")
        return path

    def test_json_output(self, runner, fasta_file):
        result = runner.invoke(cli, ["fasta", str(fasta_file), "--format", "json"])

        assert result.exit_code == 0
        summaries = json.loads(result.output)
        assert [s["id"] for s in summaries] == ["dipeptide", "tripeptide"]
        assert summaries[0]["size"] == 2
        assert summaries[0]["molecular_weight"] == pytest.approx(0.1461447)

    def test_table_output(self, runner, fasta_file):
        result = runner.invoke(cli, ["fasta", str(fasta_file)])

        assert result.exit_code == 0
        assert "dipeptide" in result.output
        assert "tripeptide" in result.output

    def test_strict_failure(self, runner, tmp_path):
        path = tmp_path / "bad.fasta"
        path.write_text(">bad\nMV1\n")

        result = runner.invoke(cli, ["fasta", str(path), "--strict"])

        assert result.exit_code == 1
        assert "Error loading sequences" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "binary.fasta"
        path.write_bytes(b">x\n\xff\xfe\x00AG\n")

        result = runner.invoke(cli, ["fasta", str(path)])

        assert result.exit_code == 1
        assert "Error loading sequences" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["fasta", str(tmp_path / "missing.fasta")])
        assert result.exit_code != 0


class TestHelpers:

    @pytest.mark.parametrize("weight,precision,expected", [
        (0.0, None, "0"),
        (0.1461447, None, "0.146145"),
        (8.564763, None, "8.56476"),
        (0.1461447, 3, "0.146"),
    ])
    def test_format_weight(self, weight, precision, expected):
        assert format_weight(weight, precision) == expected

    def test_read_token(self):
        from io import StringIO
        assert read_token(StringIO("\n\n  MVL extra\n")) == "MVL"
        assert read_token(StringIO("")) == ""
