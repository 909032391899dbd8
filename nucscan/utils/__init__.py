"""
Sequence scanning utilities.

This module provides common operations for DNA/RNA sequences:
- Mismatch counting
- Homopolymer and dinucleotide run detection
- Complement and reverse complement
"""

from nucscan.utils.sequences import (
    count_mismatches,
    longest_homopolymer,
    longest_dinuc,
    complement,
    revcomp,
    OffsetAndLength,
    COMMON_NON_AUTOSOMAL_CONTIG_NAMES,
)

__all__ = [
    "count_mismatches",
    "longest_homopolymer",
    "longest_dinuc",
    "complement",
    "revcomp",
    "OffsetAndLength",
    "COMMON_NON_AUTOSOMAL_CONTIG_NAMES",
]
