from philosophers.cli import main
from philosophers.config import ARGUMENT_COUNT_MESSAGE, INVALID_MESSAGE


def test_wrong_argument_count(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == ARGUMENT_COUNT_MESSAGE


def test_invalid_values(capsys):
    assert main(["5", "0", "200", "200"]) == 1
    assert capsys.readouterr().out == INVALID_MESSAGE


def test_invalid_meal_count(capsys):
    assert main(["5", "800", "200", "200", "-3"]) == 1
    assert capsys.readouterr().out == INVALID_MESSAGE


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("1 has taken a fork")
    assert lines[-1].endswith("1 died")
    assert len(lines) == 2


def test_fed_run_has_no_death(capsys):
    assert main(["3", "800", "30", "30", "1"]) == 0
    output = capsys.readouterr().out
    assert "died" not in output
    assert output.count("is eating") >= 3