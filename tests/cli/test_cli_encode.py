"""In-process tests for the bytes-lit command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("rich")

from bytes_lit.cli import main  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BYTES_LIT_POLICY", "BYTES_LIT_FORMAT", "BYTES_LIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_encode_prints_rust_arrays(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "0x0001", "0b111111111"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["[0u8, 1u8]", "[1u8, 255u8]"]


def test_encode_policy_and_format_flags(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "--policy", "minimal", "--format", "hex", "0x0001", "0o0377"]) == 0
    assert capsys.readouterr().out.splitlines() == ["01", "ff"]


def test_encode_uses_environment_defaults(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BYTES_LIT_POLICY", "minimal")
    monkeypatch.setenv("BYTES_LIT_FORMAT", "list")
    assert main(["encode", "0x0001"]) == 0
    assert capsys.readouterr().out.strip() == "[1]"


def test_encode_reports_first_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "0x1", "0o0377"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error:" in captured.err
    assert "octal form" in captured.err
    assert "argv[1]" in captured.err


def test_encode_negative_after_separator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "--", "-0x1"]) == 1
    assert "negative values unsupported" in capsys.readouterr().err


def test_encode_writes_output_file(tmp_path: Path) -> None:
    out_path = tmp_path / "bytes.txt"
    assert main(["encode", "-f", "c", "-o", str(out_path), "256"]) == 0
    assert out_path.read_text(encoding="utf-8") == "{0x01, 0x00}\n"


def test_encode_unwritable_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "missing-dir" / "bytes.txt"
    assert main(["encode", "-o", str(out_path), "256"]) == 1
    assert "cannot write" in capsys.readouterr().err


def test_batch_unwritable_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "literals.txt"
    source.write_text("0x01\n", encoding="utf-8")
    report = tmp_path / "missing-dir" / "report.json"
    assert main(["batch", "--in", str(source), "--out", str(report)]) == 1
    assert "cannot write" in capsys.readouterr().err


def test_invalid_environment_setting(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BYTES_LIT_POLICY", "widest")
    assert main(["encode", "0x1"]) == 1
    assert "unsupported policy" in capsys.readouterr().err


def test_batch_writes_json_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "literals.txt"
    report = tmp_path / "report.json"
    source.write_text("# constants\n0x0001\n\n-0x1\n0255\n256\n", encoding="utf-8")

    assert main(["batch", "--in", str(source), "--out", str(report)]) == 1

    payload = json.loads(report.read_text(encoding="utf-8"))
    assert [item["locator"] for item in payload] == [
        f"{source}:2",
        f"{source}:4",
        f"{source}:5",
        f"{source}:6",
    ]
    assert payload[0]["bytes"] == [0, 1]
    assert payload[1]["kind"] == "NegativeUnsupported"
    assert payload[2]["kind"] == "LeadingZerosUnsupported"
    assert payload[3]["bytes"] == [1, 0]
    assert "negative values unsupported" in capsys.readouterr().err


def test_batch_all_ok_returns_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "literals.txt"
    source.write_text("0x0001\n0o0377\n", encoding="utf-8")

    assert main(["batch", "--in", str(source), "--policy", "minimal"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [item["bytes"] for item in payload] == [[1], [255]]


def test_batch_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["batch", "--in", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "bytes-lit" in capsys.readouterr().out


def test_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["explode"]) == 1
    assert "unknown command" in capsys.readouterr().err
