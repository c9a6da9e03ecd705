import json
import sys

import pytest

from data_compare import ComparisonConfig, main, run_comparison


def run_main(monkeypatch, *argv) -> int:
    monkeypatch.setattr(sys, "argv", ["data-compare", *argv])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


@pytest.fixture
def json_files(tmp_path):
    left = tmp_path / "left.json"
    right = tmp_path / "right.json"
    left.write_text('{"a": 1, "b": 2}', encoding="utf-8")
    right.write_text('{"b": 2, "c": 3}', encoding="utf-8")
    return left, right


class TestRunComparison:

    def test_compares_files(self, json_files, capsys):
        left, right = json_files
        result = run_comparison(ComparisonConfig(file_left=str(left), file_right=str(right)))

        assert result.summary() == {"total": 3, "added": 1, "modified": 0, "removed": 1, "unchanged": 1}
        assert "Loading" in capsys.readouterr().out

    def test_format_override(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text("[1]\n[2]", encoding="utf-8")
        config = ComparisonConfig(file_left=str(path), file_right=str(path),
                                  left_format="text", right_format="text")

        result = run_comparison(config)

        assert len(result.unchanged) == 2


class TestMain:

    def test_differences_exit_one(self, monkeypatch, tmp_path, json_files):
        left, right = json_files
        report = tmp_path / "report.md"
        out_dir = tmp_path / "out"

        code = run_main(monkeypatch, str(left), str(right), "-o", str(report), "--export-dir", str(out_dir))

        assert code == 1
        assert "# Data Comparison Report" in report.read_text(encoding="utf-8")
        exported = list(out_dir.glob("comparison_report_*.json"))
        assert len(exported) == 1
        assert json.loads(exported[0].read_text(encoding="utf-8"))["summary"]["added"] == 1

    def test_identical_exit_zero(self, monkeypatch, tmp_path, json_files):
        left, _ = json_files
        monkeypatch.chdir(tmp_path)

        assert run_main(monkeypatch, str(left), str(left)) == 0
        assert (tmp_path / "comparison_report.md").exists()

    def test_parse_error_exit_two(self, monkeypatch, tmp_path, json_files, capsys):
        left, _ = json_files
        bad = tmp_path / "bad.json"
        bad.write_text("{bad json", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert run_main(monkeypatch, str(left), str(bad)) == 2
        assert "Invalid JSON input" in capsys.readouterr().err

    def test_missing_file_exit_two(self, monkeypatch, tmp_path, json_files):
        left, _ = json_files
        monkeypatch.chdir(tmp_path)
        assert run_main(monkeypatch, str(left), str(tmp_path / "nope.json")) == 2

    def test_non_utf8_file_exit_two(self, monkeypatch, tmp_path, json_files, capsys):
        left, _ = json_files
        latin = tmp_path / "latin.txt"
        latin.write_bytes(b"caf\xe9\n")
        monkeypatch.chdir(tmp_path)

        assert run_main(monkeypatch, str(left), str(latin)) == 2
        assert "latin.txt is not valid UTF-8 text" in capsys.readouterr().err
