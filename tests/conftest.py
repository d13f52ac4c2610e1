from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def write_candidates(tmp_path: Path) -> Callable[[list[str]], Path]:
    def _write(lines: list[str]) -> Path:
        path = tmp_path / "candidates.jsonl"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clear_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATEPARTS_LOG_LEVEL", raising=False)


@pytest.fixture
def int_digit_limit() -> Iterator[int]:
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        yield 4300
    finally:
        sys.set_int_max_str_digits(previous)
