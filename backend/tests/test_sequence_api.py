# File: backend/tests/test_sequence_api.py
# Version: v0.1.0
"""
Tests for POST /api/sequence/analyze (wire format and 400 handling).
"""
import pytest
from fastapi.testclient import TestClient

from backend.app.main import app

client = TestClient(app)

FIELDS = {
    "length",
    "gcContent",
    "nucleotideCounts",
    "rnaTranscript",
    "proteinSequence",
    "sequenceType",
    "openReadingFrames",
    "reverseComplement",
    "meltingTemperature",
}


def test_analyze_dna_wire_format():
    r = client.post("/api/sequence/analyze", json={"sequence": "atgaaataa"})
    assert r.status_code == 200
    data = r.json()
    assert set(data) == FIELDS
    assert data["length"] == 9
    assert data["sequenceType"] == "DNA"
    assert data["nucleotideCounts"] == {"A": 6, "T": 2, "G": 1, "C": 0}
    assert data["rnaTranscript"] == "AUGAAAUAA"
    assert data["proteinSequence"] == "MK"
    assert data["openReadingFrames"] == ["ATGAAATAA"]
    assert data["reverseComplement"] == "TTATTTCAT"
    assert data["meltingTemperature"] == 20.0


def test_analyze_non_dna_is_not_an_error():
    r = client.post("/api/sequence/analyze", json={"sequence": "ATGZZZ"})
    assert r.status_code == 200
    data = r.json()
    assert data["sequenceType"] == "Unknown"
    assert data["length"] == 6
    assert data["nucleotideCounts"] == {}
    assert data["openReadingFrames"] == []
    assert data["rnaTranscript"] == "N/A for non-DNA sequences"
    assert data["gcContent"] == 0.0
    assert data["meltingTemperature"] == 0.0


@pytest.mark.parametrize(
    "body",
    [{}, {"sequence": None}, {"sequence": ""}, {"sequence": "  \n\t "}, {"sequence": "\x0b"}, {"sequence": " \x0c "}],
)
def test_analyze_rejects_empty_sequence(body):
    r = client.post("/api/sequence/analyze", json=body)
    assert r.status_code == 400
    assert r.json()["detail"] == "Sequence must not be empty."


def test_analyze_does_not_require_user_header():
    r = client.post("/api/sequence/analyze", json={"sequence": "GGGCCC"})
    assert r.status_code == 200
    assert r.json()["proteinSequence"] == "No start codon found."
