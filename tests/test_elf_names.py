import random

import pytest

from vallheru.elf_names import female_elf_name, male_elf_name


class FixedRandom:
    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_male_first_entry():
    assert male_elf_name(FixedRandom(0.0)) == "Mnementh"


def test_male_last_entry():
    assert male_elf_name(FixedRandom(0.999999)) == "Zhoron"


def test_female_first_entry():
    assert female_elf_name(FixedRandom(0.0)) == "Sataleeti"


def test_female_last_entry():
    assert female_elf_name(FixedRandom(0.999999)) == "Vaeri"


@pytest.mark.parametrize("generate", [male_elf_name, female_elf_name])
def test_names_start_with_upper_letter(generate):
    rng = random.Random(1234)
    for _ in range(300):
        name = generate(rng)
        assert name
        assert name[0].isascii() and name[0].isupper()


def test_male_and_female_tables_differ():
    rng = random.Random(7)
    males = {male_elf_name(rng) for _ in range(500)}
    assert "Vaeri" not in males
    assert len(males) > 100