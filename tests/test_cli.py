import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from pushswap.cli import main
from pushswap.stacks import Stacks


def _sorted_after(values, output):
    stacks = Stacks(values)
    for line in output.splitlines():
        stacks.apply(line)
    return stacks


def test_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_empty_single_argument(capsys):
    assert main([""]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_only_spaces(capsys):
    assert main(["    "]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "1"],
        ["1 2 1"],
        ["2147483648"],
        ["-2147483649"],
        ["+"],
        ["1", "a"],
        ["1", ""],
        ["1\t2"],
    ],
)
def test_bad_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_values(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_single_string_and_separate_args_agree(capsys):
    assert main(["4 -1 7 0 3"]) == 0
    joined = capsys.readouterr().out
    assert main(["4", "-1", "7", "0", "3"]) == 0
    separate = capsys.readouterr().out
    assert joined == separate
    assert _sorted_after([4, -1, 7, 0, 3], joined).values_a() == [-1, 0, 3, 4, 7]


def test_limits_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    assert capsys.readouterr().out == "sa\n"