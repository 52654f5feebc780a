import random

import pytest

from vallheru.common import NickGender, pick, rand_max, title_case


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_pick_over_genders_returns_first_member_on_lowest_draw():
    genders = tuple(NickGender)
    assert pick(genders, _FixedRng(0.0)) is genders[0]
    assert pick(genders, _FixedRng(0.999)) is genders[-1]


@pytest.mark.parametrize(
    "value, limit, expected",
    [(0.0, 10, 0), (0.5, 10, 5), (0.99, 10, 9), (0.25, 4, 1), (0.3, 1, 0)],
)
def test_rand_max_floors_scaled_value(value, limit, expected):
    assert rand_max(limit, _FixedRng(value)) == expected


def test_rand_max_never_reaches_limit():
    assert rand_max(1313, _FixedRng(0.9999999999999999)) == 1312


def test_rand_max_zero_limit():
    assert rand_max(0, _FixedRng(0.7)) == 0


def test_rand_max_negative_limit_raises():
    with pytest.raises(ValueError):
        rand_max(-1)


def test_rand_max_stays_in_range_with_real_rng():
    rng = random.Random(1234)
    values = {rand_max(7, rng) for _ in range(2000)}
    assert values == set(range(7))


def test_rand_max_uses_module_random_by_default():
    random.seed(99)
    results = [rand_max(100) for _ in range(50)]
    assert all(0 <= r < 100 for r in results)


def test_pick_first_and_last():
    table = ("a", "b", "c")
    assert pick(table, _FixedRng(0.0)) == "a"
    assert pick(table, _FixedRng(0.999)) == "c"


def test_pick_empty_raises():
    with pytest.raises(IndexError):
        pick((), _FixedRng(0.0))


def test_pick_is_deterministic_with_seed():
    table = list(range(50))
    first = [pick(table, random.Random(5)) for _ in range(3)]
    assert first[0] == first[1] == first[2]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc", "Abc"),
        ("Abc", "Abc"),
        ("", ""),
        ("the Bandit", "The Bandit"),
        ("a", "A"),
        ("élan", "élan"),
        ("1st", "1st"),
    ],
)
def test_title_case(text, expected):
    assert title_case(text) == expected