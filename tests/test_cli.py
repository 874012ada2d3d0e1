import pytest

from philosim.cli import main
from philosim.config import usage_text


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1"],
        ["1", "2", "3"],
        ["0", "100", "10", "10"],
        ["2", "abc", "10", "10"],
        ["2", "100", "10", "10", "0"],
        ["2", "100", "10", "10", "1", "1"],
        ["-2", "100", "10", "10"],
    ],
)
def test_bad_arguments_print_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == usage_text() + "\n"


def test_lone_philosopher_dies(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_meal_limit_ends_run(capsys):
    assert main(["3", "1000", "20", "20", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Every philosopher ate 2 times"
    assert not any(line.endswith(" died") for line in lines)


def test_reads_sys_argv_when_no_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["philo", "1", "40", "10", "10"])
    assert main() == 0
    assert capsys.readouterr().out.splitlines()[-1].endswith(" 1 died")