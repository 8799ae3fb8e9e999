# File: backend/app/core/sequence/codons.py
# Version: v0.1.0
"""
Standard genetic code (NCBI table 1) for RNA codons.

Built once at import time from Biopython's unambiguous RNA table. The three
stop codons are folded into the same mapping as "*" so translation can do a
single lookup per codon.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from Bio.Data.CodonTable import unambiguous_rna_by_id

from .constants import STOP_SYMBOL, UNKNOWN_AMINO_ACID

STANDARD_TABLE_ID = 1


def _build_rna_codon_table() -> Mapping[str, str]:
    table = unambiguous_rna_by_id[STANDARD_TABLE_ID]
    codons = dict(table.forward_table)
    for stop in table.stop_codons:
        codons[stop] = STOP_SYMBOL
    return MappingProxyType(codons)


RNA_CODON_TABLE: Mapping[str, str] = _build_rna_codon_table()


def amino_acid_for(codon: str) -> str:
    """Single-letter amino acid for an RNA codon, '*' for stops, '?' if unknown."""
    return RNA_CODON_TABLE.get(codon, UNKNOWN_AMINO_ACID)
