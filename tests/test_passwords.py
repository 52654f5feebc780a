from vallheru.passwords import INVALID_HASH, hash_password, is_valid_password


def test_round_trip():
    password = "password"
    hashed = hash_password(password)
    assert is_valid_password(password, hashed) is True


def test_wrong_password_rejected():
    hashed = hash_password("password")
    assert is_valid_password("secret", hashed) is False


def test_hash_uses_default_cost_and_format():
    hashed = hash_password("secret")
    assert hashed.startswith("$2b$12$")
    assert len(hashed) == 60


def test_hashes_are_salted():
    first = hash_password("token")
    second = hash_password("token")
    assert first != second
    assert is_valid_password("token", first)
    assert is_valid_password("token", second)


def test_invalid_hash_returns_false():
    assert is_valid_password("password", "not a hash") is False


def test_invalid_marker_is_not_a_valid_hash():
    assert is_valid_password("password", INVALID_HASH) is False


def test_empty_password_round_trip():
    hashed = hash_password("")
    assert is_valid_password("", hashed) is True
    assert is_valid_password("password", hashed) is False