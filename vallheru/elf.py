"""Elf name generator."""

from __future__ import annotations

from vallheru.common import NickGender, RandomSource, pick
from vallheru.elf_names import female_elf_name, male_elf_name


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


_SURNAME_PREFIXES = _words(
    """
    Ad Ae Ara Bal Bei Bi Bry Cai Car Chae Cra Da Dae Dor Eil El Ela En Er Fa Fae
    Far Fen Gen Gil Glyn Gre Hei Hele Her Hola Ian Iar Ili Ina Jo Kea Kel Key
    Kris Leo Lia Lora Lu Mag Mia Mira Mor Nae Neri Nor Ola Olo Oma Ori Pa Per Pet
    Phi Pres Qi Qin Qui Ralo Rava Rey Ro Sar Sha Syl The Tor Tra Tris Ula Ume Uri
    Va Val Ven Vir Waes Wran Wyn Wysa Xil Xyr Yel Yes Yin Ylla Zin Zum Zyl
    """
)

_SURNAME_SUFFIXES = _words(
    """
    balar banise bella beros can caryn ceran cyne dan di dithas dove faren fiel
    fina fir geiros gella golor gwyn hana harice hice horn jeon jor jyre kalyn
    kas kian krana lamin lana lar lee len leth lynn maer maris menor moira myar
    mys na nala nan neiros nelis norin peiros petor phine phyra qen qirelle
    quinal ra ralei ran rel ren ric rie rieth ris ro rona rora roris salor
    sandoral satra stina sys thana thyra toris tris tumal valur varis ven vyre
    warin wenys wraek wynn xalim xidor xina xisys yarus ydark ynore yra zana
    zeiros zorwyn zumin
    """
)


def elf(gender: NickGender, rng: RandomSource | None = None) -> str:
    """Return a random elf name: a given name and a two-part surname."""
    surname = pick(_SURNAME_PREFIXES, rng) + pick(_SURNAME_SUFFIXES, rng)
    if gender is NickGender.FEMALE:
        first = female_elf_name(rng)
    else:
        first = male_elf_name(rng)
    return f"{first} {surname}"