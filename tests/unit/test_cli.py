"""Unit tests for the command-line harness."""

import pytest

from monkeysim.cli import main


class TestCli:
    """Tests for main()."""

    def test_example_both_parts(self, capsys):
        assert main(["--example"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["short: 10605", "long: 2713310158"]

    def test_notes_file_short(self, tmp_path, example_notes, capsys):
        path = tmp_path / "notes.txt"
        path.write_text(example_notes)
        assert main([str(path), "--part", "short"]) == 0
        assert capsys.readouterr().out.strip() == "short: 10605"

    def test_counts(self, capsys):
        assert main(["--example", "--part", "short", "--counts"]) == 0
        out = capsys.readouterr().out
        assert "monkey 3: 105" in out
        assert "monkey 2: 7" in out

    def test_custom_rounds(self, capsys):
        assert main(["--example", "--rounds", "20", "--relief", "divide"]) == 0
        assert capsys.readouterr().out.strip() == "custom: 10605"

    def test_parse_error_exit_code(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("Monkey zero:\n")
        assert main([str(path)]) == 1
        assert "line 1" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.txt")]) == 1
        assert "cannot read notes" in capsys.readouterr().err

    def test_simulation_error_exit_code(self, tmp_path, capsys):
        notes = (
            "Monkey 0:\n"
            "  Starting items: 1\n"
            "  Operation: new = old + 1\n"
            "  Test: divisible by 2\n"
            "    If true: throw to monkey 5\n"
            "    If false: throw to monkey 5\n"
        )
        path = tmp_path / "notes.txt"
        path.write_text(notes)
        assert main([str(path), "--part", "short"]) == 1
        assert "unknown monkey 5" in capsys.readouterr().err

    def test_custom_rounds_default_relief(self, capsys):
        assert main(["--example", "--rounds", "10000"]) == 0
        assert capsys.readouterr().out.strip() == "custom: 2713310158"

    def test_relief_requires_rounds(self):
        with pytest.raises(SystemExit):
            main(["--example", "--relief", "divide"])

    def test_requires_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_rejects_file_and_example(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "notes.txt"), "--example"])

    def test_plot(self, tmp_path):
        out = tmp_path / "summary.png"
        assert main(["--example", "--part", "short", "--plot", str(out)]) == 0
        assert out.exists()
        assert out.stat().st_size > 0
