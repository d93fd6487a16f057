from unittest import mock

import pytest

from polypanda.concurrency import number_of_threads


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["prog", "-t", "4"], 4),
        (["prog", "-t=7"], 7),
        (["prog", "--threads=12"], 12),
        (["prog", "file", "-t", " 3 "], 3),
        (["prog", "-t", "+2"], 2),
    ],
)
def test_explicit_thread_count(argv, expected):
    assert number_of_threads(argv) == expected


def test_first_option_wins():
    assert number_of_threads(["prog", "-t", "2", "--threads=9"]) == 2


def test_default_uses_processor_count():
    with mock.patch("os.cpu_count", return_value=6):
        assert number_of_threads(["prog", "data"]) == 6


def test_default_is_at_least_one():
    with mock.patch("os.cpu_count", return_value=None):
        assert number_of_threads(["prog"]) == 1


def test_missing_parameter():
    with pytest.raises(ValueError, match="integral parameter"):
        number_of_threads(["prog", "-t"])


@pytest.mark.parametrize("value", ["abc", "5x", "5 6", "", "99999999999"])
def test_non_integral_parameter(value):
    with pytest.raises(ValueError, match="integral parameter"):
        number_of_threads(["prog", "-t", value])


@pytest.mark.parametrize("value", ["0", "-3"])
def test_parameter_must_be_positive(value):
    with pytest.raises(ValueError, match="greater zero"):
        number_of_threads(["prog", f"--threads={value}"])


@pytest.mark.parametrize("argument", ["-threads", "--threads", "-t5", "--tt=3"])
def test_illegal_option(argument):
    with pytest.raises(ValueError, match="Illegal parameter"):
        number_of_threads(["prog", argument])