"""
FASTA reading and writing for proteins.

Records are parsed with Biopython's ``SeqIO`` and turned into ``Protein``
objects through the normal text constructor, so a record containing any
character outside the residue alphabet produces an empty protein.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

from Bio import SeqIO

from .protein import Protein
from .sequence import DEFAULT_VALIDATOR, SequenceError

logger = logging.getLogger(__name__)


def parse_fasta(
    source: Union[str, Path, TextIO],
    strict: bool = False,
) -> Iterator[tuple[str, Protein]]:
    """
    Parse protein sequences from FASTA format.

    Args:
        source: File path, FASTA string, or open text handle
        strict: Raise instead of yielding an empty protein for a record
            with invalid characters

    Yields:
        Tuples of (record id, Protein)

    Raises:
        SequenceError: If ``strict`` and a record fails validation
    """
    if isinstance(source, str) and (source.startswith(">") or "\n>" in source):
        handle, owned = StringIO(source), False
    elif isinstance(source, (str, Path)):
        handle, owned = open(source, "r", encoding="utf-8"), True
    else:
        handle, owned = source, False

    try:
        for record in SeqIO.parse(handle, "fasta"):
            seq_str = str(record.seq)
            is_valid, errors = DEFAULT_VALIDATOR.validate(seq_str)

            if not is_valid:
                message = f"Sequence '{record.id}' failed validation: {'; '.join(errors)}"
                if strict:
                    raise SequenceError(message)
                logger.warning(message)

            yield record.id, Protein(seq_str)
    finally:
        if owned:
            handle.close()


def to_fasta(
    records: Iterable[tuple[str, Protein]],
    line_length: int = 60,
) -> str:
    """
    Convert (id, Protein) pairs to a FASTA-formatted string.

    Args:
        records: Pairs of record id and protein
        line_length: Characters per sequence line
    """
    if line_length < 1:
        raise ValueError(f"line_length must be positive: {line_length}")

    lines = []
    for record_id, protein in records:
        lines.append(f">{record_id}")

        seq = protein.sequence()
        for i in range(0, len(seq), line_length):
            lines.append(seq[i:i + line_length])

    return "\n".join(lines)
