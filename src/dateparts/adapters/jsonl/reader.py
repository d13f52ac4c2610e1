"""Read candidate records from JSON-lines files."""

from __future__ import annotations

import json
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import CandidateRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


log = getLogger(__name__)


class CandidateFileError(ValueError):
    """Raised when a JSON-lines input line cannot be read as a candidate record."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{message}")
        self.line_number = line_number


def _decode_line(line: str | bytes, line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CandidateFileError(
            f"invalid UTF-8 at byte {exc.start}", line_number=line_number
        ) from exc


def parse_candidate_lines(lines: Iterable[str | bytes]) -> Iterator[CandidateRecord]:
    """Yield a record per non-blank line, raising on the first malformed one.

    Byte lines are decoded as UTF-8 so decoding failures carry their line number.
    """

    for line_number, raw_line in enumerate(lines, start=1):
        line = _decode_line(raw_line, line_number)
        if not line.strip():
            continue
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as exc:
            raise CandidateFileError(f"invalid JSON ({exc.msg})", line_number=line_number) from exc
        except ValueError as exc:
            # integer literals beyond the interpreter's digit limit
            raise CandidateFileError(f"invalid JSON ({exc})", line_number=line_number) from exc
        try:
            record = CandidateRecord.model_validate(payload)
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc']) or 'record'}: {error['msg']}"
                for error in exc.errors()
            )
            raise CandidateFileError(errors, line_number=line_number) from exc
        yield record


def read_candidate_records(path: str | Path) -> Iterator[CandidateRecord]:
    file_path = Path(path)
    log.debug("Reading candidate records from %s", file_path)
    try:
        with file_path.open("rb") as handle:
            yield from parse_candidate_lines(handle)
    except OSError as exc:
        raise CandidateFileError(f"cannot read {file_path}: {exc.strerror or exc}") from exc
