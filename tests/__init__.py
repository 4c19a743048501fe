"""
proteinseq test suite.

Tests are organized by module:
- test_residues: The residue table
- test_models: Pydantic models
- test_sequence: Validation and error types
- test_core: The Protein container
- test_fasta: FASTA input/output
- test_cli: Command-line interface
"""
