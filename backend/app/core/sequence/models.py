# File: backend/app/core/sequence/models.py
# Version: v0.2.0
"""Value objects produced by the sequence analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class SequenceType(str, Enum):
    """Classification of a normalised input string."""
    DNA = "DNA"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class SequenceAnalysis:
    """
    Full result of one `analyze()` call.

    String fields carry the sentinel values from `constants` when they do not
    apply (non-DNA input, or DNA without a start codon for the protein).
    `nucleotide_counts` is a read-only view; it still compares equal to a
    plain dict with the same items but is left out of the hash.
    """
    length: int
    sequence_type: SequenceType
    gc_content: float = 0.0
    nucleotide_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    rna_transcript: str = ""
    protein_sequence: str = ""
    open_reading_frames: Tuple[str, ...] = ()
    reverse_complement: str = ""
    melting_temperature: float = 0.0

    @property
    def is_dna(self) -> bool:
        return self.sequence_type is SequenceType.DNA
