# File: backend/app/cli/analyze_cli.py
# Version: v0.1.0
"""
CLI for one-off sequence analysis (no database involved).

Prints the same JSON document that POST /api/sequence/analyze returns.

Usage:
    python -m backend.app.cli.analyze_cli ATGAAATAA
    echo "atgc" | python -m backend.app.cli.analyze_cli --stdin --indent 2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from backend.app.core.sequence.analyzer import analyze, is_blank
from backend.app.schemas.analysis import AnalysisResultResponse

EXIT_OK = 0
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Analyze a single raw DNA sequence")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("sequence", nargs="?", help="Raw nucleotide string")
    src.add_argument("--stdin", action="store_true", help="Read the raw sequence from standard input")
    p.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    raw = sys.stdin.read() if args.stdin else args.sequence
    if raw is None or is_blank(raw):
        print("error: sequence must not be empty", file=sys.stderr)
        return EXIT_USAGE

    payload = AnalysisResultResponse.from_analysis(analyze(raw)).model_dump()
    print(json.dumps(payload, indent=args.indent))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
