import dataclasses

import pytest

from philosim.config import (
    Config,
    UsageError,
    parse_args,
    parse_positive_int,
    usage_text,
)


def test_usage_text_first_line():
    assert usage_text().splitlines()[0] == "Usage: ./philo arg1 arg2 arg3 arg4 [arg5]"


def test_usage_text_mentions_every_argument():
    text = usage_text()
    for name in (
        "number_of_philosophers",
        "time_to_die (ms)",
        "time_to_eat (ms)",
        "time_to_sleep (ms)",
        "number_of_times_each_philosopher_must_eat",
    ):
        assert name in text


def test_usage_error_message_defaults_to_usage():
    assert str(UsageError()) == usage_text()


def test_usage_error_is_value_error():
    with pytest.raises(ValueError):
        parse_positive_int("0")


@pytest.mark.parametrize("text", ["1", "7", "200", "0042", "123456789"])
def test_parse_positive_int_round_trip(text):
    assert parse_positive_int(text) == int(text)
    assert str(parse_positive_int(text)) == text.lstrip("0")


@pytest.mark.parametrize(
    "text", ["", "0", "000", "-5", "+5", "12a", "a12", " 5", "5 ", "1.5", "٣"]
)
def test_parse_positive_int_rejects(text):
    with pytest.raises(UsageError) as excinfo:
        parse_positive_int(text)
    assert str(excinfo.value) == usage_text()


def test_parse_args_four_arguments():
    config = parse_args(["5", "800", "200", "200"])
    assert config == Config(
        philo_count=5,
        time_to_die_ms=800,
        time_to_eat_ms=200,
        time_to_sleep_ms=200,
        required_meals=0,
    )


def test_parse_args_five_arguments():
    config = parse_args(["4", "410", "200", "100", "7"])
    assert config.philo_count == 4
    assert config.time_to_die_ms == 410
    assert config.time_to_eat_ms == 200
    assert config.time_to_sleep_ms == 100
    assert config.required_meals == 7


def test_config_default_required_meals_matches_four_args():
    assert parse_args(["3", "10", "20", "30"]) == Config(3, 10, 20, 30)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["5"],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
    ],
)
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


@pytest.mark.parametrize("position", range(5))
def test_parse_args_rejects_zero_in_any_position(position):
    argv = ["5", "800", "200", "200", "7"]
    argv[position] = "0"
    with pytest.raises(UsageError):
        parse_args(argv)


@pytest.mark.parametrize("position", range(5))
def test_parse_args_rejects_non_numeric_in_any_position(position):
    argv = ["5", "800", "200", "200", "7"]
    argv[position] = "x"
    with pytest.raises(UsageError):
        parse_args(argv)


def test_config_is_frozen():
    config = parse_args(["2", "100", "50", "50"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.philo_count = 3  # type: ignore[misc]
    assert config.philo_count == 2
    assert config == Config(2, 100, 50, 50)