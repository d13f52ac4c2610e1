"""Public interface for the JSON-lines candidate adapter."""

from __future__ import annotations

from .reader import CandidateFileError, parse_candidate_lines, read_candidate_records
from .schema import CandidateRecord

__all__ = [
    "CandidateFileError",
    "CandidateRecord",
    "parse_candidate_lines",
    "read_candidate_records",
]
