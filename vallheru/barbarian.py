"""Barbarian name generator."""

from __future__ import annotations

from vallheru.common import NickGender, RandomSource, rand_max, title_case


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


# Leading entries of the start tables are empty; the vowel tables' leading
# entries are diphthongs.  These bounds keep generated names pronounceable.
_FIRST_SIMPLE_FEMALE_VOWEL = 5
_FIRST_FEMALE_CONSONANT_START = 5
_FIRST_SIMPLE_MALE_VOWEL = 3
_EMPTY_MALE_STARTS = 3

_MALE_VOWELS = _words("ae au ei") + _words("a e i o u") * 3

_MALE_STARTS = ("",) * _EMPTY_MALE_STARTS + _words(
    """
    b bl br bh d dr dh f fr g gh gr gl h hy hr j k kh kr l ll m n p pr r rh s sk
    sg sm sn st t th thr ty v y
    """
)

_MALE_MIDDLES = _words(
    """
    bl br d db dbr dd ddg dg dl dm dr dv f fd fgr fk fl fn fr fst fv g gb gd gf
    gg ggv gl gn gr gss gv k kk l lb lc ld ldr lf lfr lg lgr lk ll llg llk llv
    lm ln lp lr ls lsk lsn lst lsv lt lv m md mk ml mm ms n nb nd ndr ng nl nn
    nng nr nsk nt nv nw p pl pp pr r rb rd rdg rf rg rgr rk rkm rl rls rm rn rng
    rngr rnh rnk rns rnv rr rst rt rth rtm rv s sb sbr sg sgr sk sl sm sn sr ssk
    st stm str sv t tg th thg thn thr thv tm tr tt ttf tv v yv z zg zl zn
    """
)

_MALE_ENDINGS = _words(
    "d dr f g kr k l ld lf lk ll lr m mm n nd nn r rd rn rr s th t"
)

_FEMALE_STARTS = ("",) * 3 + _words(
    """
    b br bh ch d dh f fr g gh gr gw gl h j k kh m n r rh s sh st sv t th thr tr
    v w
    """
)

_FEMALE_VOWELS = _words("ae ea ie ei io") + _words("a e i o u") * 5

_FEMALE_MIDDLES = _words(
    """
    bj c d dd df dl dr f ff fl fn fr fth g gd gm gn gnh gr h hh k l ld lf lfh lg
    lgr lh lk ll lm lr ls lv m mm n nd ndr ng ngr ngv nh nl nn nnh nr ns nt nv r
    rd rf rg rgh rgr rh rk rl rm rn rnd rng rr rst rt rth rtr rv s sb sd sg sh sl
    st stn str sv t thr tk tr tt tth v y yj ym yn
    """
)

_FEMALE_ENDINGS = ("",) * 4 + _words("f g h l n nn s sh th y")


def _female(rng: RandomSource | None) -> str:
    shape = rand_max(10, rng)
    start = rand_max(len(_FEMALE_STARTS), rng)
    vowel = rand_max(len(_FEMALE_VOWELS), rng)
    ending = _FEMALE_ENDINGS[rand_max(len(_FEMALE_ENDINGS), rng)]

    if shape < 3:
        start = max(start, _FIRST_FEMALE_CONSONANT_START)
        return title_case(_FEMALE_STARTS[start] + _FEMALE_VOWELS[vowel] + ending)

    if shape < 8:
        second_vowel = max(rand_max(len(_FEMALE_VOWELS), rng), _FIRST_SIMPLE_FEMALE_VOWEL)
        middle = _FEMALE_MIDDLES[rand_max(len(_FEMALE_MIDDLES), rng)]
        return title_case(
            _FEMALE_STARTS[start]
            + _FEMALE_VOWELS[vowel]
            + middle
            + _FEMALE_VOWELS[second_vowel]
            + ending
        )

    second_vowel = rand_max(len(_FEMALE_VOWELS), rng)
    if vowel < _FIRST_SIMPLE_FEMALE_VOWEL:
        second_vowel = max(second_vowel, _FIRST_SIMPLE_FEMALE_VOWEL)
    middle = _FEMALE_MIDDLES[rand_max(len(_FEMALE_MIDDLES), rng)]
    second_middle = _FEMALE_MIDDLES[rand_max(len(_FEMALE_MIDDLES), rng)]
    third_vowel = rand_max(len(_FEMALE_VOWELS), rng)
    return title_case(
        _FEMALE_STARTS[start]
        + _FEMALE_VOWELS[vowel]
        + middle
        + _FEMALE_VOWELS[second_vowel]
        + second_middle
        + _FEMALE_VOWELS[third_vowel]
    )


def _male(rng: RandomSource | None) -> str:
    shape = rand_max(10, rng)
    vowel = _MALE_VOWELS[rand_max(len(_MALE_VOWELS), rng)]
    start_index = rand_max(len(_MALE_STARTS), rng)
    start = _MALE_STARTS[start_index]
    ending = _MALE_ENDINGS[rand_max(len(_MALE_ENDINGS), rng)]

    if shape < 3:
        return title_case(start + vowel + ending)

    second_vowel_index = rand_max(len(_MALE_VOWELS), rng)
    if start_index < _EMPTY_MALE_STARTS:
        second_vowel_index = max(second_vowel_index, _FIRST_SIMPLE_MALE_VOWEL)
    second_vowel = _MALE_VOWELS[second_vowel_index]
    middle = _MALE_MIDDLES[rand_max(len(_MALE_MIDDLES), rng)]

    if shape < 8:
        return title_case(start + vowel + middle + second_vowel + ending)

    third_vowel = _MALE_VOWELS[rand_max(len(_MALE_VOWELS), rng)]
    second_middle = _MALE_MIDDLES[rand_max(len(_MALE_MIDDLES), rng)]
    return title_case(
        start + vowel + middle + second_vowel + second_middle + third_vowel + ending
    )


def barbarian(gender: NickGender, rng: RandomSource | None = None) -> str:
    """Return a random single-word barbarian name."""
    if gender is NickGender.FEMALE:
        return _female(rng)
    return _male(rng)