import random

import pytest

from vallheru.common import NickGender
from vallheru.dwarf import dwarf


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class _SequenceRng:
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.mark.parametrize("gender", list(NickGender))
def test_returns_non_empty_name(gender):
    assert dwarf(gender) != ""
    assert len(dwarf(gender)) > 3


@pytest.mark.parametrize("gender", list(NickGender))
def test_names_start_from_upper_letters(gender):
    rng = random.Random(42)
    for _ in range(300):
        first, last = dwarf(gender, rng).split(" ")
        assert first[0].isascii() and first[0].isupper()
        assert last[0].isascii() and last[0].isupper()


@pytest.mark.parametrize("gender", list(NickGender))
def test_name_has_first_name_and_surname(gender):
    rng = random.Random(7)
    for _ in range(300):
        parts = dwarf(gender, rng).split(" ")
        assert len(parts) == 2
        assert all(part.isalpha() for part in parts)


def test_lowest_draws_male():
    assert dwarf(NickGender.MALE, _FixedRng(0.0)) == "Abac Alearm"


def test_lowest_draws_female():
    assert dwarf(NickGender.FEMALE, _FixedRng(0.0)) == "Ababelle Alearm"


def test_highest_draws_male():
    assert dwarf(NickGender.MALE, _FixedRng(0.9999999)) == "Yazzuth Wyvernview"


def test_highest_draws_female():
    assert dwarf(NickGender.FEMALE, _FixedRng(0.9999999)) == "Yazztryd Wyvernview"


def test_surname_is_drawn_before_first_name():
    rng = _SequenceRng([0.0, 0.0, 0.9999999, 0.0, 0.0])
    assert dwarf(NickGender.MALE, rng) == "Yabac Alearm"
    assert rng.values == []


def test_seeded_generation_is_reproducible():
    first = [dwarf(NickGender.FEMALE, random.Random(11)) for _ in range(2)]
    assert first[0] == first[1]