"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from dateparts.adapters.jsonl import CandidateRecord, read_candidate_records
from dateparts.domain.orderings import check_parts

if TYPE_CHECKING:
    from pathlib import Path

    from dateparts.domain.types import PartsCheck


log = getLogger(__name__)


@dataclass(frozen=True)
class BatchCheckResult:
    """Per-record outcomes of a batch run, in input order."""

    results: tuple[tuple[CandidateRecord, PartsCheck], ...] = field(default_factory=tuple)

    @property
    def checked(self) -> int:
        return len(self.results)

    @property
    def valid(self) -> int:
        return sum(1 for _, outcome in self.results if outcome.is_valid)

    @property
    def invalid(self) -> int:
        return self.checked - self.valid


def check_date_parts(
    candidate_part_a: int,
    candidate_part_b: int,
    candidate_part_c: int,
) -> PartsCheck:
    """Check three parts of unknown role and report every ordering that fits."""

    outcome = check_parts(candidate_part_a, candidate_part_b, candidate_part_c)
    log.debug(
        "Checked parts %s: valid=%s, orders=%s",
        outcome.parts,
        outcome.is_valid,
        ",".join(outcome.orders) or "none",
    )
    return outcome


def check_candidate_file(path: str | Path) -> BatchCheckResult:
    """Validate every candidate record in a JSON-lines file."""

    log.info("Starting batch check: path=%s", path)
    results = tuple(
        (record, check_date_parts(*record.parts)) for record in read_candidate_records(path)
    )
    batch = BatchCheckResult(results=results)
    log.info(
        f"Finished batch check: checked={batch.checked}, valid={batch.valid}, "
        f"invalid={batch.invalid}"
    )
    return batch


__all__ = ["BatchCheckResult", "check_candidate_file", "check_date_parts"]
