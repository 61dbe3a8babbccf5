"""Tests for the command-line interface."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from json2csv.cli import main, options_from_args, parse_args


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    path = tmp_path / "records.json"
    path.write_text('{"Id": 1, "User": {"Name": "Ann"}}\n{"Id": 2, "Extra": true}\n', encoding="utf-8")
    return path


def fake_stdin(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(text.encode("utf-8"))))


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        options = options_from_args(parse_args([]))
        assert options.columns == ()
        assert options.scan_all is True
        assert options.lowercase_keys is True
        assert options.columns_only is False

    def test_single_positional_is_input_file(self) -> None:
        args = parse_args(["data.json"])
        assert args.in_file == Path("data.json")
        assert args.columns == []

    def test_single_positional_is_column_with_input_flag(self) -> None:
        args = parse_args(["--in", "data.json", "user.name"])
        assert args.in_file == Path("data.json")
        assert args.columns == ["user.name"]

    def test_several_positionals_are_columns(self) -> None:
        args = parse_args(["a", "b.c"])
        assert args.in_file is None
        assert options_from_args(args).columns == ("a", "b.c")

    def test_negated_flags(self) -> None:
        options = options_from_args(parse_args(["--no-scan-all", "--no-to-lower", "--cols"]))
        assert options.scan_all is False
        assert options.lowercase_keys is False
        assert options.columns_only is True


class TestMain:
    """End-to-end runs of :func:`main`."""

    def test_file_to_stdout(self, records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(records_file)]) == 0
        assert capsys.readouterr().out == "extra,id,user.name\n,1,Ann\ntrue,2,\n"

    def test_file_to_file(self, records_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out.csv"
        assert main(["--in", str(records_file), "--out", str(output), "--no-to-lower"]) == 0
        assert output.read_text(encoding="utf-8") == "Extra,Id,User.Name\n,1,Ann\ntrue,2,\n"

    def test_explicit_columns(self, records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--in", str(records_file), "id", "missing"]) == 0
        assert capsys.readouterr().out == "id,missing\n1,\n2,\n"

    def test_cols_prints_columns(self, records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--cols", str(records_file)]) == 0
        assert capsys.readouterr().out == "extra\nid\nuser.name\n"

    def test_stdin_input(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        fake_stdin(monkeypatch, '[{"a": 0.5}, {"a": 2}]')
        assert main([]) == 0
        assert capsys.readouterr().out == "a\n0.5\n2\n"

    def test_empty_stdin_first_record_mode(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        fake_stdin(monkeypatch, "")
        assert main(["--no-scan-all"]) == 0
        assert capsys.readouterr().out == ""

    def test_delimiter(self, records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--delimiter", ";", "--in", str(records_file), "id", "user.name"]) == 0
        assert capsys.readouterr().out == "id;user.name\n1;Ann\n2;\n"

    def test_verbose_reports_on_stderr(self, records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-v", str(records_file)]) == 0
        captured = capsys.readouterr()
        assert "Resolved 3 column(s) (rescan)" in captured.err
        assert "Wrote 2 row(s)" in captured.err
        assert captured.out.startswith("extra,id,user.name\n")


class TestErrors:
    """Fatal conditions exit with a diagnostic."""

    def test_missing_input_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit, match="Could not open input file"):
            main(["--in", str(tmp_path / "missing.json")])

    def test_unwritable_output(self, records_file: Path, tmp_path: Path) -> None:
        with pytest.raises(SystemExit, match="Error creating output file"):
            main(["--in", str(records_file), "--out", str(tmp_path / "no" / "such" / "out.csv")])

    def test_malformed_input_keeps_partial_output(self, tmp_path: Path) -> None:
        source = tmp_path / "bad.json"
        source.write_text('{"a": 1}\n{"a": 2}\n{"a": ', encoding="utf-8")
        output = tmp_path / "out.csv"
        with pytest.raises(SystemExit, match="Error reading input") as exc_info:
            main(["--in", str(source), "--out", str(output), "a"])
        assert exc_info.value.code != 0
        assert output.read_text(encoding="utf-8") == "a\n1\n2\n"
