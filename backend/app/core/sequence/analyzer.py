# File: backend/app/core/sequence/analyzer.py
# Version: v0.3.0
"""
Sequence analysis engine.

`analyze(raw)` is the single entry point used by the API and the CLI. It is a
pure function: normalise the input, classify it, then derive every descriptor
from the normalised string. It never raises; non-DNA input is reported in-band
via `SequenceType.UNKNOWN` and sentinel strings.

Implements:
- Normalisation (trim + ASCII upper-case)
- DNA classification
- Base composition, GC %, melting temperature (Wallace / Marmur)
- Reverse complement, transcription, translation
- Forward-strand ORF enumeration (one ORF per ATG with an in-frame stop)
"""

from __future__ import annotations

import logging
import string
from types import MappingProxyType
from typing import Dict, List

from Bio.SeqUtils import MeltingTemp as mt

from .codons import amino_acid_for
from .constants import (
    BLANK_CHARS,
    DNA_ALPHABET,
    DNA_START_CODON,
    DNA_STOP_CODONS,
    MARMUR_BASE_TM,
    MARMUR_GC_FACTOR,
    MARMUR_GC_OFFSET,
    NO_START_CODON,
    NOT_APPLICABLE,
    RNA_START_CODON,
    STOP_SYMBOL,
    TRIM_CHARS,
    UNKNOWN_BASE,
    WALLACE_MAX_LENGTH,
)
from .models import SequenceAnalysis, SequenceType

logger = logging.getLogger(__name__)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_COMPLEMENT = {"A": "T", "T": "A", "G": "C", "C": "G"}


def ascii_upper(text: str) -> str:
    """Upper-case ASCII letters only; every other character is left as-is."""
    return text.translate(_ASCII_UPPER)


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and upper-case. Inner whitespace is kept."""
    return ascii_upper(raw.strip(TRIM_CHARS))


def is_blank(raw: str) -> bool:
    """True when nothing but control characters or spaces (<= U+0020) is left after trimming."""
    return not raw.strip(BLANK_CHARS)


def classify(normalized: str) -> SequenceType:
    if normalized and all(c in DNA_ALPHABET for c in normalized):
        return SequenceType.DNA
    return SequenceType.UNKNOWN


def count_nucleotides(dna: str) -> Dict[str, int]:
    counts = {"A": 0, "T": 0, "G": 0, "C": 0}
    for base in dna:
        counts[base] = counts.get(base, 0) + 1
    return counts


def gc_content(dna: str) -> float:
    """GC percentage in [0, 100]; 0.0 for an empty sequence."""
    if not dna:
        return 0.0
    gc = sum(1 for c in dna if c in ("G", "C"))
    return gc / len(dna) * 100.0


def melting_temperature(dna: str) -> float:
    """
    Approximate Tm (°C).

    - len < 20: Wallace rule, 2·(A+T) + 4·(G+C)
    - len >= 20: Marmur, 64.9 + 41·(G+C−16.4)/(A+T+G+C)
    """
    if not dna:
        return 0.0
    if len(dna) < WALLACE_MAX_LENGTH:
        return float(mt.Tm_Wallace(dna))
    counts = count_nucleotides(dna)
    at = counts["A"] + counts["T"]
    gc = counts["G"] + counts["C"]
    return MARMUR_BASE_TM + MARMUR_GC_FACTOR * (gc - MARMUR_GC_OFFSET) / (at + gc)


def reverse_complement(dna: str) -> str:
    return "".join(_COMPLEMENT.get(base, UNKNOWN_BASE) for base in reversed(dna))


def transcribe(dna: str) -> str:
    return dna.replace("T", "U")


def translate(rna: str) -> str:
    """
    Translate from the first AUG until the first stop codon or the end of the
    reading frame. Returns NO_START_CODON when there is no AUG at all.
    """
    start = rna.find(RNA_START_CODON)
    if start == -1:
        return NO_START_CODON

    protein: List[str] = []
    for i in range(start, len(rna) - 2, 3):
        aa = amino_acid_for(rna[i : i + 3])
        if aa == STOP_SYMBOL:
            break
        protein.append(aa)
    return "".join(protein)


def find_orfs(dna: str) -> List[str]:
    """
    Forward-strand ORFs, one per ATG that reaches an in-frame stop codon.

    Starts are visited in ascending order, so nested ORFs sharing a stop are
    all reported.
    """
    orfs: List[str] = []
    start = dna.find(DNA_START_CODON)
    while start != -1:
        for i in range(start + 3, len(dna) - 2, 3):
            if dna[i : i + 3] in DNA_STOP_CODONS:
                orfs.append(dna[start : i + 3])
                break
        start = dna.find(DNA_START_CODON, start + 1)
    return orfs


def _not_dna(length: int) -> SequenceAnalysis:
    return SequenceAnalysis(
        length=length,
        sequence_type=SequenceType.UNKNOWN,
        gc_content=0.0,
        nucleotide_counts=MappingProxyType({}),
        rna_transcript=NOT_APPLICABLE,
        protein_sequence=NOT_APPLICABLE,
        open_reading_frames=(),
        reverse_complement=NOT_APPLICABLE,
        melting_temperature=0.0,
    )


def analyze(raw: str) -> SequenceAnalysis:
    """Run the full analysis on a raw client string."""
    seq = normalize(raw)
    seq_type = classify(seq)
    logger.debug("analyze: length=%d type=%s", len(seq), seq_type.value)

    if seq_type is not SequenceType.DNA:
        return _not_dna(len(seq))

    rna = transcribe(seq)
    return SequenceAnalysis(
        length=len(seq),
        sequence_type=SequenceType.DNA,
        gc_content=gc_content(seq),
        nucleotide_counts=MappingProxyType(count_nucleotides(seq)),
        rna_transcript=rna,
        protein_sequence=translate(rna),
        open_reading_frames=tuple(find_orfs(seq)),
        reverse_complement=reverse_complement(seq),
        melting_temperature=melting_temperature(seq),
    )
