# File: backend/app/core/sequence/constants.py
# Version: v0.1.0
"""
Constants shared by the sequence analysis engine.

The sentinel strings are part of the wire contract: the frontend and the
saved_analyses table both store them verbatim.
"""

from __future__ import annotations

DNA_ALPHABET = frozenset("ATGC")

# Leading/trailing characters removed by the normalizer
TRIM_CHARS = " \t\r\n"

NOT_APPLICABLE = "N/A for non-DNA sequences"
NO_START_CODON = "No start codon found."

DNA_START_CODON = "ATG"
RNA_START_CODON = "AUG"
DNA_STOP_CODONS = frozenset({"TAA", "TAG", "TGA"})

STOP_SYMBOL = "*"
UNKNOWN_AMINO_ACID = "?"
UNKNOWN_BASE = "N"

# Sequences shorter than this use the Wallace rule, longer ones Marmur
WALLACE_MAX_LENGTH = 20
MARMUR_BASE_TM = 64.9
MARMUR_GC_FACTOR = 41.0
MARMUR_GC_OFFSET = 16.4

# Request-boundary emptiness check trims every character <= U+0020
BLANK_CHARS = "".join(chr(c) for c in range(0x21))
