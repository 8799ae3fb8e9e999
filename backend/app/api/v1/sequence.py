# File: backend/app/api/v1/sequence.py
# Version: v0.1.0
"""
Sequence analysis API (stateless).

POST /sequence/analyze
  - Body: AnalysisRequest {"sequence": "..."}
  - 400 if the sequence is missing, empty or whitespace-only
  - Returns: AnalysisResultResponse
"""
from __future__ import annotations

from fastapi import APIRouter

from backend.app.core.sequence.analyzer import analyze
from backend.app.schemas.analysis import AnalysisRequest, AnalysisResultResponse

from .deps import require_sequence

router = APIRouter(prefix="/sequence", tags=["sequence"])


@router.post("/analyze", response_model=AnalysisResultResponse)
def analyze_sequence(payload: AnalysisRequest) -> AnalysisResultResponse:
    """Analyze a single raw nucleotide string. Non-DNA input is not an error."""
    sequence = require_sequence(payload)
    return AnalysisResultResponse.from_analysis(analyze(sequence))
