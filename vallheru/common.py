"""Shared helpers for the name generators."""

from __future__ import annotations

import enum
import math
import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


class NickGender(enum.Enum):
    """Gender used to choose which syllable tables a generator draws from."""

    MALE = "male"
    FEMALE = "female"


def _source(rng: RandomSource | None) -> RandomSource:
    return random if rng is None else rng  # type: ignore[return-value]


def rand_max(limit: int, rng: RandomSource | None = None) -> int:
    """Return a random integer in ``[0, limit)``; ``0`` when ``limit`` is zero."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if limit == 0:
        return 0
    value = math.floor(_source(rng).random() * limit)
    return min(value, limit - 1)


def pick(table: Sequence[T], rng: RandomSource | None = None) -> T:
    """Return a random element of ``table``."""
    if not table:
        raise IndexError("cannot pick from an empty table")
    return table[rand_max(len(table), rng)]


def title_case(text: str) -> str:
    """Upper-case the first character if it is ASCII; leave the rest unchanged."""
    if text and text[0].isascii():
        return text[0].upper() + text[1:]
    return text