from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest

from onewriter_actions import cli
from onewriter_actions.runtime import telemetry


@pytest.fixture(autouse=True)
def quiet_telemetry() -> Iterator[None]:
    telemetry.configure(settings=telemetry.TelemetrySettings(console=False))
    yield
    telemetry.configure()


def write_doc(tmp_path: Path, text: str = "a\nb\nc") -> Path:
    path = tmp_path / "doc.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_list_prints_every_action(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["list"]) == 0

    out = capsys.readouterr().out
    assert "lines.move_up\tMove Up Current Line\talt+up" in out
    assert "lines.select" in out


def test_run_prints_result(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_doc(tmp_path)

    assert cli.main(["run", "lines.move_up", str(path), "--caret", "2"]) == 0

    assert "b\na\nc" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == "a\nb\nc"


def test_run_in_place(tmp_path: Path) -> None:
    path = write_doc(tmp_path)

    cli.main(["run", "Move Down Current Line", str(path), "--in-place"])

    assert path.read_text(encoding="utf-8") == "b\na\nc"


def test_run_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_doc(tmp_path)

    cli.main(["run", "lines.move_down", str(path), "--json"])

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["text"] == "b\na\nc"
    assert payload["selection"] == [2, 2]
    assert payload["status"] == "applied"


def test_run_noop_reports_status(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_doc(tmp_path)

    cli.main(["run", "lines.move_up", str(path), "--json"])

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["applied"] is False
    assert payload["message"] == "first_line"


def test_unknown_action_exits_with_usage_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_doc(tmp_path)

    assert cli.main(["run", "lines.explode", str(path)]) == cli.EXIT_USAGE
    assert "error:" in capsys.readouterr().err


def test_missing_file_and_bad_caret(tmp_path: Path) -> None:
    assert cli.main(["run", "lines.move_up", str(tmp_path / "nope.txt")]) == 2

    path = write_doc(tmp_path)
    assert cli.main(["run", "lines.move_up", str(path), "--caret", "99"]) == 2


def test_undecodable_file_exits_with_usage_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    assert cli.main(["run", "lines.move_up", str(path)]) == cli.EXIT_USAGE
    assert "codec can't decode" in capsys.readouterr().err
    assert path.read_bytes() == b"\xff\xfe\xfa"


def test_missing_file_error_names_the_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "nope.txt"

    assert cli.main(["run", "lines.move_up", str(missing)]) == cli.EXIT_USAGE
    assert "nope.txt" in capsys.readouterr().err
