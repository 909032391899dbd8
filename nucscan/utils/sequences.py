"""
Core sequence scanning utilities.

Functions for working with DNA and RNA sequences including mismatch
counting, homopolymer and dinucleotide run detection, and complementation.
"""

import logging
from typing import NamedTuple

import numpy as np

from nucscan.bases.iupac import (
    DNA_COMPLEMENT_TABLE,
    RNA_COMPLEMENT_TABLE,
    fold_case,
)

logger = logging.getLogger(__name__)

# Common contig/chrom names for non-autosomal sequences in mammals
COMMON_NON_AUTOSOMAL_CONTIG_NAMES = ("M", "chrM", "MT", "X", "chrX", "Y", "chrY")


class OffsetAndLength(NamedTuple):
    """
    Zero-based offset and length of a region within a sequence.

    Attributes:
        offset: Index of the first symbol of the region
        length: Number of symbols in the region
    """
    offset: int
    length: int


def count_mismatches(s1: str, s2: str) -> int:
    """
    Count the number of mismatches between two sequences of the same length.

    Each pair of characters is upper-cased before comparison, so any
    letter with a case mapping matches its other case. IUPAC codes are
    compared literally.

    Args:
        s1: First sequence
        s2: Second sequence

    Returns:
        Number of positions where the sequences differ

    Example:
        >>> count_mismatches("ACGT", "acgA")
        1
    """
    if len(s1) != len(s2):
        logger.debug("Rejecting mismatch count for lengths %d and %d", len(s1), len(s2))
        raise ValueError(
            f"Cannot count mismatches in sequences of differing lengths "
            f"({len(s1)} and {len(s2)}): {s1} {s2}"
        )

    return sum(c1.upper() != c2.upper() for c1, c2 in zip(s1, s2))


def _longest_run(sequence: str, unit: int) -> OffsetAndLength:
    """
    Find the longest run of a repeated unit of ``unit`` bases.

    Gives the same answer as extending a run from every start position in
    turn and keeping the first strictly longer one, but in linear time: a
    run starting inside a longer run of the same phase can never win.
    """
    codes = fold_case(sequence)
    n = len(codes)
    if n < unit:
        return OffsetAndLength(0, 0)

    # repeats[i] is True when the unit at i occurs again at i + unit. The
    # last windows have no complete next unit, so they stay False.
    n_windows = n - unit + 1
    n_repeats = max(n_windows - unit, 0)
    repeats = np.zeros(n_windows, dtype=bool)
    repeats[:n_repeats] = True
    for j in range(unit):
        repeats[:n_repeats] &= codes[j:j + n_repeats] == codes[unit + j:unit + j + n_repeats]

    best = OffsetAndLength(0, 0)
    for phase in range(min(unit, n_windows)):
        in_phase = repeats[phase::unit]
        ends = np.flatnonzero(~in_phase)
        starts = np.concatenate(([0], ends[:-1] + 1))
        lengths = (ends - starts + 1) * unit

        i = int(np.argmax(lengths))
        offset = phase + int(starts[i]) * unit
        length = int(lengths[i])
        if length > best.length or (length == best.length and offset < best.offset):
            best = OffsetAndLength(offset, length)

    return best


def longest_homopolymer(sequence: str) -> OffsetAndLength:
    """
    Get the offset and length of the longest homopolymer in a sequence.

    When several homopolymers share the maximum length, the earliest one is
    returned.

    Args:
        sequence: DNA or RNA sequence

    Returns:
        OffsetAndLength of the longest homopolymer, (0, 0) for an empty sequence

    Example:
        >>> longest_homopolymer("AACCCGT")
        OffsetAndLength(offset=2, length=3)
    """
    return _longest_run(sequence, 1)


def longest_dinuc(sequence: str) -> OffsetAndLength:
    """
    Get the offset and length of the longest dinucleotide run in a sequence.

    A run is extended two bases at a time and only by a complete pair, so an
    odd trailing base is never included. Any pair counts as a unit,
    including a repeated base: ``AAAA`` is a run of ``AA``. When several
    runs share the maximum length, the earliest one is returned.

    Args:
        sequence: DNA or RNA sequence

    Returns:
        OffsetAndLength of the longest dinucleotide run, (0, 0) for sequences
        shorter than two bases

    Example:
        >>> longest_dinuc("ATATATG")
        OffsetAndLength(offset=0, length=6)
    """
    return _longest_run(sequence, 2)


def complement(sequence: str, rna: bool = False) -> str:
    """
    Get the complement of a DNA or RNA sequence, without reversing it.

    Args:
        sequence: DNA or RNA sequence string
        rna: If True, complement A to U instead of T

    Returns:
        Complement sequence

    Example:
        >>> complement("AACG")
        'TTGC'
    """
    table = RNA_COMPLEMENT_TABLE if rna else DNA_COMPLEMENT_TABLE
    return sequence.translate(table)


def revcomp(sequence: str, rna: bool = False) -> str:
    """
    Get the reverse complement of a DNA or RNA sequence.

    Args:
        sequence: DNA or RNA sequence string
        rna: If True, complement A to U instead of T

    Returns:
        Reverse complement sequence

    Example:
        >>> revcomp("ACGT")
        'ACGT'
        >>> revcomp("AACG")
        'CGTT'
    """
    return complement(sequence, rna=rna)[::-1]
