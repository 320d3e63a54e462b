import pytest

from philosophers.config import (
    ARGUMENT_COUNT_MESSAGE,
    INVALID_MESSAGE,
    Config,
    InvalidInput,
    parse_arguments,
)


def test_four_arguments():
    config = parse_arguments(["5", "800", "200", "200"])
    assert config == Config(
        philosophers=5, time_to_die=800, time_to_eat=200, time_to_sleep=200
    )
    assert config.meals is None


def test_five_arguments_set_meals():
    config = parse_arguments(["4", "410", "200", "100", "7"])
    assert config.meals == 7
    assert config.philosophers == 4
    assert config.time_to_die == 410


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(args):
    with pytest.raises(InvalidInput) as info:
        parse_arguments(args)
    assert str(info.value) == ARGUMENT_COUNT_MESSAGE


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "-1", "200"],
        ["5", "800", "200", "x"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "abc"],
        ["5", "2147483648", "200", "200"],
    ],
)
def test_invalid_values(args):
    with pytest.raises(InvalidInput) as info:
        parse_arguments(args)
    assert str(info.value) == INVALID_MESSAGE


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["a", "b", "c", "d"])