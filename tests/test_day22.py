import pytest

from advent2024.day22 import next_secret, part_one, part_two


def test_next_secret_example():
    assert next_secret(123) == 15887950


def test_example_part_one():
    assert part_one("1\n10\n100\n2024\n") == 37327623


def test_example_part_two():
    assert part_two("1\n2\n3\n2024\n") == 23


@pytest.mark.parametrize("seed", [1, 123, 2024, 16777215, 10**9])
def test_secrets_stay_below_modulus(seed):
    assert 0 <= next_secret(seed) < 16777216


def test_part_one_is_additive_over_buyers():
    assert part_one("1\n10\n") == part_one("1\n") + part_one("10\n")


def test_single_buyer_earns_at_most_one_price():
    assert 0 <= part_two("123\n") <= 9


def test_bananas_bounded_by_number_of_buyers():
    text = "1\n2\n3\n2024\n"
    assert part_two(text) <= 9 * len(text.split())


def test_blank_lines_are_ignored():
    assert part_one("1\n\n10\n") == part_one("1\n10")


def test_non_numeric_input_raises():
    with pytest.raises(ValueError):
        part_one("abc\n")