#!/usr/bin/env python3
"""
Example: Sequence Scanning with NucScan

This example demonstrates the scanning primitives of NucScan:
- Counting mismatches between barcodes
- Finding homopolymer and dinucleotide runs
- Complementing and reverse complementing sequences
"""

import logging

from nucscan import (
    count_mismatches,
    longest_homopolymer,
    longest_dinuc,
    complement,
    revcomp,
)


def demo_mismatches():
    """Demonstrate mismatch counting."""
    print("\n" + "=" * 60)
    print("MISMATCHES")
    print("=" * 60)

    observed = "ACGTACGT"
    expected = "acgaacgA"

    print(f"\nObserved: {observed}")
    print(f"Expected: {expected}")
    print(f"Mismatches: {count_mismatches(observed, expected)}")

    try:
        count_mismatches(observed, expected[:-1])
    except ValueError as e:
        print(f"\nDiffering lengths are rejected: {e}")


def demo_runs():
    """Demonstrate homopolymer and dinucleotide run detection."""
    print("\n" + "=" * 60)
    print("RUNS")
    print("=" * 60)

    for seq in ["AACCCGT", "GTACACACAGGGGG", "ATATATG", "AAAA", ""]:
        hp = longest_homopolymer(seq)
        dn = longest_dinuc(seq)
        print(f"\nSequence: {seq!r}")
        print(f"  Homopolymer: offset={hp.offset} length={hp.length} "
              f"{seq[hp.offset:hp.offset + hp.length]!r}")
        print(f"  Dinucleotide: offset={dn.offset} length={dn.length} "
              f"{seq[dn.offset:dn.offset + dn.length]!r}")


def demo_complement():
    """Demonstrate complement and reverse complement."""
    print("\n" + "=" * 60)
    print("COMPLEMENT")
    print("=" * 60)

    seq = "ATGCGATCRYN"
    print(f"\nOriginal:   5'-{seq}-3'")
    print(f"Complement: 3'-{complement(seq)}-5'")
    print(f"Rev Comp:   5'-{revcomp(seq)}-3'")

    rna = "AUGCGAUC"
    print(f"\nRNA:        5'-{rna}-3'")
    print(f"Rev Comp:   5'-{revcomp(rna, rna=True)}-3'")

    # Verify palindrome detection
    palindrome = "GAATTC"  # EcoRI site
    print(f"\nEcoRI site {palindrome} is palindromic: {palindrome == revcomp(palindrome)}")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    print("=" * 60)
    print("NucScan Sequence Scanning Demo")
    print("=" * 60)

    demo_mismatches()
    demo_runs()
    demo_complement()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
