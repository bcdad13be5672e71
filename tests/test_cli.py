import pytest

from advent2024.cli import main

DAY_ONE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_solves_part_one_from_named_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY_ONE)
    assert main(["1", "1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "11"


def test_reads_default_file_in_working_directory(tmp_path, monkeypatch, capsys):
    (tmp_path / "day1.txt").write_text(DAY_ONE)
    monkeypatch.chdir(tmp_path)
    assert main(["1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "31"


def test_tuple_answers_are_comma_joined(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("029A\n")
    assert main(["21", "1", str(path)]) == 0
    output = capsys.readouterr().out.strip()
    assert int(output) % 29 == 0


def test_unknown_day_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["26", "1"])
    assert excinfo.value.code == 2


def test_missing_part_is_rejected(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("#####\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["25", "2", str(path)])
    assert excinfo.value.code == 2


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["1", "1", str(tmp_path / "absent.txt")])
    assert excinfo.value.code == 2


def test_bad_input_reports_error(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1 2 3\n")
    assert main(["1", "1", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "advent2024:" in captured.err