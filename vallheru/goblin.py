"""Goblin name generator."""

from __future__ import annotations

from vallheru.common import NickGender, RandomSource, pick, rand_max, title_case


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


_MALE_STARTS = ("",) * 7 + _words(
    """
    b c d f g h j k l p r t v w x z br bl cr cl ch dr fr gr gl gn kr kl pr pl str
    st sr sl tr vr wr zr
    """
)

_VOWELS = _words("a e i o u") * 3 + _words("y ia io ee aa ui ie ea oi")

_MALE_MIDDLES = (
    _words("b d g h k l m n r s t v z") * 4
    + _words("bb bd bh bl bk bn br bs bt bz db dd df dh dl dn dr ds dv dz")
    + ("",)
    + _words(
        """
        gg gb gd gh gk gl gm gn gr gs gt gz hd hb hk hn hz kl kn kz kv kk lb ld
        lg lk ll lr ls lt lv lz mr mv mz mt nr nv nz nt rb rd rg rk rl rm rn rr
        rs rt rv rz sb sd sh sk sm sn sr str st sv sz ss tb tl tm tn tr tv tz tt
        vl vn vr vz zb zd zg zl zm zn zt
        """
    )
)

_MALE_ENDINGS = _words(
    """
    c g k l q r t x z nk ld rd s sz zz ng kz lb rm sb bs ts cs ct gs gz kt kx lk
    lx rk rt rd rx
    """
)

_FEMALE_STARTS = ("",) * 7 + _words(
    """
    b c d f g h j k l m n p q r s t v w bh br bl cr cl ch fr fl gr gl gn kh kl
    ph pr sh st sr sl sw th thr tr vr wr
    """
)

_FEMALE_MIDDLES = _words("b f g h k l m n p r s t v") * 4 + _words(
    """
    bb bd bh bl bk bn br bs bt bz fb fl fm fn fs ft gg gb gd gh gk gl gm gn gr
    gs gt gz hd hb hk hn hz kl kn kz kv kk lb ld lg lk ll lr ls lt lv lz mr mv
    mz mt nr nv nz nt ph pf pl pn pm pr ps pt pv rb rd rg rk rl rm rn rr rs rt
    rv rz sb sd sh sk sm sn sr str st sv sz ss tb tl tm tn tr tv tz tt vl vn vr
    vz
    """
)

_FEMALE_CODAS = _words(
    """
    h f g l n q s x z ls nk zz ld sh sz ss gs sx lx hx th rx rt ft fs fz lm lk
    lt ng nx ns nq
    """
)

_FEMALE_ENDINGS = _words("e i ee ia ea a ai") + ("",) * 13


def goblin(gender: NickGender, rng: RandomSource | None = None) -> str:
    """Return a random single-word goblin name."""
    shape = rand_max(10, rng)
    vowel = pick(_VOWELS, rng)
    second_vowel = pick(_VOWELS, rng)
    short = shape < 5

    if gender is NickGender.FEMALE:
        start = pick(_FEMALE_STARTS, rng)
        coda = pick(_FEMALE_CODAS, rng)
        ending = pick(_FEMALE_ENDINGS, rng)
        if short:
            return title_case(start + vowel + coda + ending)
        middle = pick(_FEMALE_MIDDLES, rng)
        return title_case(start + vowel + middle + second_vowel + coda + ending)

    start = pick(_MALE_STARTS, rng)
    ending = pick(_MALE_ENDINGS, rng)
    if short:
        return title_case(start + vowel + ending)
    middle = pick(_MALE_MIDDLES, rng)
    return title_case(start + vowel + middle + second_vowel + ending)