"""
IUPAC base symbols: complements and case-insensitive equality.

Single-symbol capabilities consumed by the sequence utilities. Ambiguity
codes are compared as plain symbols; their base sets in IUPAC_CODES are
only used to derive the complement tables.
"""

import string

import numpy as np

# Base sets of the IUPAC nucleotide codes
IUPAC_CODES = {
    "A": "A", "C": "C", "G": "G", "T": "T", "U": "T",
    "R": "AG", "Y": "CT", "S": "GC", "W": "AT",
    "K": "GT", "M": "AC", "B": "CGT", "D": "AGT",
    "H": "ACT", "V": "ACG", "N": "ACGT",
}

_WATSON_CRICK = {"A": "T", "C": "G", "G": "C", "T": "A"}


def _complement_code(code: str) -> str:
    """Find the code whose base set pairs with the base set of ``code``."""
    paired = set(_WATSON_CRICK[b] for b in IUPAC_CODES[code])
    for other, bases in IUPAC_CODES.items():
        if other != "U" and set(bases) == paired:
            return other
    return code


# DNA complement mapping, U pairs with A
DNA_COMPLEMENT = {code: _complement_code(code) for code in IUPAC_CODES}
DNA_COMPLEMENT.update({k.lower(): v.lower() for k, v in list(DNA_COMPLEMENT.items())})

# RNA complement mapping
RNA_COMPLEMENT = dict(DNA_COMPLEMENT, A="U", a="u")

DNA_COMPLEMENT_TABLE = str.maketrans(DNA_COMPLEMENT)
RNA_COMPLEMENT_TABLE = str.maketrans(RNA_COMPLEMENT)

_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def complement_base(base: str, rna: bool = False) -> str:
    """
    Get the complement of a single base.

    Case is preserved and symbols without a complement are returned as is.

    Args:
        base: A single base symbol
        rna: If True, complement A to U instead of T

    Example:
        >>> complement_base("a")
        't'
        >>> complement_base("R")
        'Y'
        >>> complement_base("A", rna=True)
        'U'
        >>> complement_base("-")
        '-'
    """
    complement_map = RNA_COMPLEMENT if rna else DNA_COMPLEMENT
    return complement_map.get(base, base)


def bases_equal(b1: str, b2: str) -> bool:
    """
    Compare two bases ignoring case.

    The bases may be IUPAC codes, but the sets of bases they stand for are
    not considered: ``N`` only equals ``N``.

    Example:
        >>> bases_equal("a", "A")
        True
        >>> bases_equal("N", "A")
        False
    """
    return b1.translate(_UPPER_TABLE) == b2.translate(_UPPER_TABLE)


def fold_case(sequence: str) -> np.ndarray:
    """
    Convert a sequence to an array of upper-cased code points.

    Element-wise ``==`` between two folded arrays follows the same rule as
    :func:`bases_equal`. Only ASCII letters change case, any other symbol
    keeps its code point, lone surrogates included.

    Args:
        sequence: DNA or RNA sequence

    Returns:
        numpy array of dtype uint32 with one entry per symbol
    """
    codes = np.frombuffer(sequence.encode("utf-32-le", "surrogatepass"), dtype="<u4").astype(np.uint32)
    lower = (codes >= ord("a")) & (codes <= ord("z"))
    codes[lower] -= ord("a") - ord("A")
    return codes
