from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dateparts import main as main_module
from dateparts.ui import cli as cli_module

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def _run(argv: list[str]) -> int:
    try:
        cli_module.main(argv)
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


def test_check_valid_parts(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["check", "15", "2023", "6"]) == 0
    assert capsys.readouterr().out == "valid\n"


def test_check_invalid_parts(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["check", "2023", "2", "30"]) == 1
    assert capsys.readouterr().out == "invalid\n"


def test_check_accepts_date_string(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["check", "15/06/2023"]) == 0
    assert capsys.readouterr().out == "valid\n"


def test_check_accepts_negative_parts(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["check", "-1", "2", "3"]) == 1
    assert capsys.readouterr().out == "invalid\n"


def test_check_ordered_reads_parts_positionally(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["check", "--ordered", "15", "2023", "6"]) == 1
    assert _run(["check", "--ordered", "2023", "6", "15"]) == 0
    assert capsys.readouterr().out == "invalid\nvalid\n"


@pytest.mark.parametrize("argv", [["check", "x", "2", "3"], ["check", "1", "2"], ["orders", "6.5"]])
def test_check_rejects_malformed_parts(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(argv) == 2
    assert capsys.readouterr().out == ""


def test_missing_command_is_usage_error() -> None:
    assert _run([]) == 2


def test_orders_lists_every_reading(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["orders", "2023", "6", "5"]) == 0
    assert capsys.readouterr().out == "ymd 2023-06-05\nydm 2023-05-06\n"


def test_orders_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["orders", "0", "1", "1"]) == 1
    assert capsys.readouterr().out == "invalid\n"


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [("2020", "2", "28"), ("2021", "2", "29"), ("2023", "4", "30"), ("2023", "13", "31")],
)
def test_days_in_month(
    year: str, month: str, expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(["days-in-month", year, month]) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_check_file_reports_each_record(
    write_candidates: Callable[[list[str]], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_candidates(
        ['{"parts": [15, 2023, 6], "id": "june"}', '{"parts": [2023, 2, 30]}']
    )

    assert _run(["check-file", str(path)]) == 1
    assert capsys.readouterr().out == (
        "june: valid (dym)\n2023-2-30: invalid\nchecked=2 valid=1 invalid=1\n"
    )


def test_check_file_all_valid(
    write_candidates: Callable[[list[str]], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_candidates(['{"parts": [2023, 6, 15]}'])

    assert _run(["check-file", str(path)]) == 0
    assert capsys.readouterr().out.endswith("checked=1 valid=1 invalid=0\n")


def test_check_file_bad_input_exits_with_error(
    write_candidates: Callable[[list[str]], Path],
    tmp_path: Path,
) -> None:
    assert _run(["check-file", str(write_candidates(["{oops"]))]) == 2
    assert _run(["check-file", str(tmp_path / "absent.jsonl")]) == 2


def test_invalid_log_level_configuration_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATEPARTS_LOG_LEVEL", "chatty")

    assert _run(["check", "2023", "6", "15"]) == 2


def test_run_loads_dotenv_and_delegates(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    monkeypatch.setattr(main_module, "load_dotenv", lambda: calls.append("dotenv"))
    monkeypatch.setattr(main_module, "signal", lambda *_: calls.append("signal"))
    monkeypatch.setattr(main_module, "main", lambda: calls.append("main"))

    main_module.run()

    assert calls == ["dotenv", "signal", "main"]


def test_check_uses_short_circuiting_validator(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    calls: list[tuple[int, int, int]] = []

    def fake_is_valid_date(a: int, b: int, c: int) -> bool:
        calls.append((a, b, c))
        return True

    def unexpected_check(*_: int) -> None:
        raise AssertionError("check should not enumerate every ordering")

    monkeypatch.setattr(cli_module, "is_valid_date", fake_is_valid_date)
    monkeypatch.setattr(cli_module, "check_date_parts", unexpected_check)

    assert _run(["check", "15", "2023", "6"]) == 0
    assert calls == [(15, 2023, 6)]
    assert capsys.readouterr().out == "valid\n"


def test_check_file_invalid_utf8_exits_with_error(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "candidates.jsonl"
    path.write_bytes(b'{"parts": [1, 2, 3], "id": "\xff"}\n')

    assert _run(["check-file", str(path)]) == 2
    assert "Invalid candidate file" in caplog.text
