#!/usr/bin/env python3
"""
proteinseq Example: Building and weighing peptide chains

This script walks through the Protein container with a few well-known
peptides: building them from text, editing them residue by residue, and
reading back per-residue metadata and molecular weight.

Run with: python examples/basic_usage.py
"""

from proteinseq import Protein, PositionError, RESIDUE_TABLE


def print_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def build_from_text():
    """
    Construct proteins from raw text.

    Text is uppercased and accepted only if every character is one of the
    22 residue codes; otherwise the protein is left empty.
    """
    print_header("Construction from text")

    # Human Amyloid-β (1-42)
    abeta = Protein("DAEFRHDSGYEVHHQKLVFFAEDVGSNKGAIIGLMVGGVVIA")
    print(f"Aβ42:        {abeta.size()} residues, {abeta.molecular_weight():.4f} kDa")

    lowercase = Protein("kLvFf")
    print(f"Lowercase:   {lowercase.sequence()}")

    malformed = Protein("KLVFF-42")
    print(f"Malformed:   {malformed.size()} residues (whole string rejected)")


def edit_residues():
    """Append and insert residues, including rejected edits."""
    print_header("Editing")

    protein = Protein("AG")
    protein.insert("R", 1)
    print(f"insert R at 1:     {protein.sequence()}")

    protein.append("W")
    print(f"append W:          {protein.sequence()}")

    before = protein.size()
    protein.append("X")
    protein.insert("M", 99)
    print(f"rejected edits:    {protein.sequence()} (size {before} -> {protein.size()})")


def residue_metadata():
    """Walk the chain and print each residue's table entry."""
    print_header("Per-residue metadata")

    protein = Protein("MVLSPADK")
    for position in range(protein.size()):
        info = protein.residue_at(position)
        print(f"  {position:>2}  {info.code}  {info.name:<15} {info.mass:>7.2f} Da  {info.volume:>6.1f} Å³")

    try:
        protein.residue_name_at(protein.size())
    except PositionError as e:
        print(f"\n  {e}")

    print(f"\n  Table holds {len(RESIDUE_TABLE)} codes, including B and Z.")


if __name__ == "__main__":
    build_from_text()
    edit_residues()
    residue_metadata()
