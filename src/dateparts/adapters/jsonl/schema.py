"""Pydantic models describing candidate records in JSON-lines input."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _reject_booleans(value: object) -> object:
    if isinstance(value, list | tuple) and any(isinstance(item, bool) for item in value):
        raise ValueError("date parts must be integers, not booleans")
    return value


class CandidateBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


class CandidateRecord(CandidateBaseModel):
    """One line of input: three date parts of unknown role plus an optional label."""

    parts: tuple[int, int, int]
    id: str | None = None

    _normalize_id = field_validator("id", mode="before")(_blank_to_none)
    _check_parts = field_validator("parts", mode="before")(_reject_booleans)

    @property
    def label(self) -> str:
        return self.id or "-".join(str(part) for part in self.parts)
