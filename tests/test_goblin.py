import itertools
import random

import pytest

from vallheru.common import NickGender
from vallheru.goblin import goblin


class _SequenceRandom:
    def __init__(self, values):
        self._values = itertools.cycle(values)

    def random(self):
        return next(self._values)


@pytest.mark.parametrize("gender", list(NickGender))
def test_name_is_not_empty(gender):
    assert len(goblin(gender)) > 0


@pytest.mark.parametrize("gender", list(NickGender))
def test_name_starts_with_upper_letter(gender):
    name = goblin(gender)
    assert name[:1].isascii()
    assert name[:1].isupper()


@pytest.mark.parametrize("gender", list(NickGender))
def test_many_names_are_single_capitalised_words(gender):
    rng = random.Random(99)
    for _ in range(1000):
        name = goblin(gender, rng)
        assert name
        assert " " not in name
        assert name[0].isupper()
        assert name[1:] == name[1:].lower()


def test_female_short_form_with_lowest_draws():
    assert goblin(NickGender.FEMALE, _SequenceRandom([0.0])) == "Ahe"


def test_male_short_form_with_lowest_draws():
    assert goblin(NickGender.MALE, _SequenceRandom([0.0])) == "Ac"


def test_female_long_form_with_highest_draws():
    assert goblin(NickGender.FEMALE, _SequenceRandom([0.99])) == "Wroivroinq"


def test_male_long_form_with_highest_draws():
    assert goblin(NickGender.MALE, _SequenceRandom([0.99])) == "Zroiznoirx"


def test_same_seed_gives_same_name():
    first = goblin(NickGender.MALE, random.Random(3))
    second = goblin(NickGender.MALE, random.Random(3))
    assert first == second