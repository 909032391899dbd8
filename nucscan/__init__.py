"""
NucScan: Scanning primitives for nucleotide sequences

This package provides tools for:
- Counting mismatches between equal-length sequences
- Finding the longest homopolymer and dinucleotide runs
- Complementing and reverse complementing DNA/RNA, IUPAC codes included

Built on top of NumPy for the run scans.
"""

import logging

__version__ = "0.1.0"
__author__ = "NucScan Contributors"

from nucscan.bases import (
    complement_base,
    bases_equal,
)

from nucscan.utils import (
    count_mismatches,
    longest_homopolymer,
    longest_dinuc,
    complement,
    revcomp,
    OffsetAndLength,
    COMMON_NON_AUTOSOMAL_CONTIG_NAMES,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Bases
    "complement_base",
    "bases_equal",
    # Sequences
    "count_mismatches",
    "longest_homopolymer",
    "longest_dinuc",
    "complement",
    "revcomp",
    "OffsetAndLength",
    "COMMON_NON_AUTOSOMAL_CONTIG_NAMES",
]
