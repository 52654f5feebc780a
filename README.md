# vallheru

Random fantasy names for player characters, plus small helpers for hashing
and checking passwords with bcrypt.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Generating names

Each generator takes a `NickGender` and an optional random source: any
object with a `random()` method returning a float in `[0, 1)`, such as a
seeded `random.Random`. Without one, the `random` module is used.

```python
import random

from vallheru.common import NickGender
from vallheru.dwarf import dwarf
from vallheru.elf import elf
from vallheru.barbarian import barbarian
from vallheru.goblin import goblin

rng = random.Random(42)

print(dwarf(NickGender.MALE, rng))       # first name and compound surname
print(elf(NickGender.FEMALE, rng))       # given name and two-part surname
print(barbarian(NickGender.FEMALE, rng)) # a single word
print(goblin(NickGender.MALE, rng))      # a single word
```

Dwarf and elf names have two parts, each beginning with a capital letter;
barbarian and goblin names are one word with a capitalised first letter.

`vallheru.elf_names` offers `male_elf_name(rng)` and `female_elf_name(rng)`,
which return an elf given name on its own.

### Helpers

`vallheru.common` holds the building blocks the generators share:

- `rand_max(limit, rng=None)` returns an integer in `[0, limit)`, or `0`
  when `limit` is zero; a negative limit raises `ValueError`.
- `pick(table, rng=None)` returns a random element of a sequence; an empty
  sequence raises `IndexError`.
- `title_case(text)` upper-cases the first character when it is ASCII and
  leaves the rest as it is.

## Passwords

```python
from vallheru.passwords import hash_password, is_valid_password

password = "password"
hashed = hash_password(password)
assert is_valid_password(password, hashed)
assert not is_valid_password("secret", hashed)
```

`hash_password` uses bcrypt with cost 12. Passwords longer than 72 bytes in
UTF-8 are cut to their first 72 bytes, as bcrypt only reads that many.
`is_valid_password` returns `False` for a malformed hash instead of raising.

## What this package does not do

It has no bandit or demon name styles, no function that picks a random
style and gender for you, and no command-line tool; call one of the
generators above directly.