import random

import pytest

from vallheru.common import NickGender
from vallheru.elf import elf


class FixedRandom:
    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


class ConstantRandom:
    def __init__(self, value):
        self._value = value

    def random(self):
        return self._value


def test_male_all_first_entries():
    assert elf(NickGender.MALE, ConstantRandom(0.0)) == "Mnementh Adbalar"


def test_female_all_first_entries():
    assert elf(NickGender.FEMALE, ConstantRandom(0.0)) == "Sataleeti Adbalar"


def test_male_all_last_entries():
    assert elf(NickGender.MALE, ConstantRandom(0.999999)) == "Zhoron Zylzumin"


def test_female_all_last_entries():
    assert elf(NickGender.FEMALE, ConstantRandom(0.999999)) == "Vaeri Zylzumin"


def test_surname_is_drawn_before_given_name():
    assert elf(NickGender.MALE, FixedRandom(0.0, 0.0, 0.999999)) == "Zhoron Adbalar"
    assert elf(NickGender.FEMALE, FixedRandom(0.999999, 0.999999, 0.0)) == "Sataleeti Zylzumin"


@pytest.mark.parametrize("gender", list(NickGender))
def test_non_empty(gender):
    assert len(elf(gender)) > 0


@pytest.mark.parametrize("gender", list(NickGender))
def test_first_and_last_name_start_upper(gender):
    rng = random.Random(42)
    for _ in range(300):
        parts = elf(gender, rng).split()
        assert len(parts) == 2
        assert all(part[0].isupper() for part in parts)