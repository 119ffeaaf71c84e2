import pytest

from philo.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["4"],
        ["4", "800", "200"],
        ["4", "800", "200", "200", "5", "6"],
    ],
)
def test_wrong_argument_count_fails(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "nbr of arg not valid"


@pytest.mark.parametrize(
    "argv",
    [
        ["-4", "800", "200", "200"],
        ["4", "+800", "200", "200"],
        ["4", "800", "2x0", "200"],
        ["4", "800", "200", "200", "abc"],
    ],
)
def test_invalid_number_exits_quietly(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "invalid atoi\n"


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_single_philosopher_dies(capsys):
    assert main(["1", "200", "100", "100"]) == 0
    lines = _lines(capsys)
    assert lines[-1].endswith("Philosopher 1 died")
    assert not any("is eating" in line for line in lines)
    assert sum("died" in line for line in lines) == 1


def test_everyone_eats_enough(capsys):
    assert main(["4", "800", "100", "100", "2"]) == 0
    lines = _lines(capsys)
    assert lines[-1] == "All philosophers have eaten!"
    assert not any("died" in line for line in lines)
    eaters = {
        line.split()[2] for line in lines if line.endswith("is eating")
    }
    assert eaters == {"1", "2", "3", "4"}


def test_log_lines_are_ordered_in_time(capsys):
    assert main(["4", "800", "100", "100", "1"]) == 0
    lines = _lines(capsys)[:-1]
    stamps = [int(line.split()[0]) for line in lines]
    assert stamps == sorted(stamps)
    assert all(line.split()[1] == "Philosopher" for line in lines)
    assert all(1 <= int(line.split()[2]) <= 4 for line in lines)


def test_starvation_stops_the_log(capsys):
    assert main(["2", "150", "200", "100"]) == 0
    lines = _lines(capsys)
    died = [i for i, line in enumerate(lines) if line.endswith("died")]
    assert len(died) == 1
    assert died[0] == len(lines) - 1