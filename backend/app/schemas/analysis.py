# File: backend/app/schemas/analysis.py
# Version: v0.2.0
"""
Pydantic schemas for sequence analysis and saved analyses.

Field names are camelCase because they are the wire contract consumed by the
frontend.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from backend.app.core.sequence.models import SequenceAnalysis
from backend.app.db.models import SavedAnalysis


class AnalysisRequest(BaseModel):
    """Request payload for analyze/save.

    `sequence` is optional at the schema level so that a missing field yields
    the same 400 as an empty one instead of a 422.
    """
    sequence: Optional[str] = Field(
        None,
        description="Raw nucleotide string; trimmed and upper-cased server-side.",
        examples=["ATGAAATAA"],
    )


class AnalysisResultResponse(BaseModel):
    length: int = Field(..., ge=0)
    gcContent: float = Field(..., ge=0, le=100, description="GC percentage.")
    nucleotideCounts: Dict[str, int] = Field(default_factory=dict)
    rnaTranscript: str
    proteinSequence: str
    sequenceType: str = Field(..., description="'DNA' or 'Unknown'.")
    openReadingFrames: List[str] = Field(default_factory=list)
    reverseComplement: str
    meltingTemperature: float = Field(..., description="Approximate Tm (°C).")

    @classmethod
    def from_analysis(cls, a: SequenceAnalysis) -> "AnalysisResultResponse":
        return cls(
            length=a.length,
            gcContent=a.gc_content,
            nucleotideCounts=dict(a.nucleotide_counts),
            rnaTranscript=a.rna_transcript,
            proteinSequence=a.protein_sequence,
            sequenceType=a.sequence_type.value,
            openReadingFrames=list(a.open_reading_frames),
            reverseComplement=a.reverse_complement,
            meltingTemperature=a.melting_temperature,
        )


class SavedAnalysisRecord(BaseModel):
    """For POST /analysis/save and GET /analysis/history."""
    id: int
    archiveId: str
    status: str
    originalSequence: str
    sequenceType: str
    sequenceLength: int
    gcContent: float
    rnaTranscript: str
    proteinSequence: str
    createdAt: datetime

    @classmethod
    def from_row(cls, row: SavedAnalysis) -> "SavedAnalysisRecord":
        return cls(
            id=row.id,
            archiveId=row.archive_id,
            status=row.status,
            originalSequence=row.original_sequence,
            sequenceType=row.sequence_type,
            sequenceLength=row.sequence_length,
            gcContent=row.gc_content,
            rnaTranscript=row.rna_transcript,
            proteinSequence=row.protein_sequence,
            createdAt=row.created_at,
        )
