"""
Base-level symbol handling for nucleotide sequences.

This module provides:
- IUPAC complement tables for DNA and RNA
- Single-base complementation
- Case-insensitive base equality
"""

from nucscan.bases.iupac import (
    complement_base,
    bases_equal,
    fold_case,
    IUPAC_CODES,
    DNA_COMPLEMENT,
    RNA_COMPLEMENT,
    DNA_COMPLEMENT_TABLE,
    RNA_COMPLEMENT_TABLE,
)

__all__ = [
    "complement_base",
    "bases_equal",
    "fold_case",
    "IUPAC_CODES",
    "DNA_COMPLEMENT",
    "RNA_COMPLEMENT",
    "DNA_COMPLEMENT_TABLE",
    "RNA_COMPLEMENT_TABLE",
]
