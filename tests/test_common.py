import pytest

from kriptocalc.classical.common import (
    COPRIME_26,
    gcd,
    norm_key_alpha,
    mod_inverse,
    parse_int_list,
    parse_two_ints,
)
from kriptocalc.core.errors import InvalidKeyError, InvalidTextError, NoInverseError
from kriptocalc.core.utils import normalize_az, require_text


def test_normalize_strips_and_uppercases():
    assert normalize_az("Hello, World! 123") == "HELLOWORLD"
    assert normalize_az("") == ""
    assert normalize_az("1234 !?") == ""
    assert normalize_az(None) == ""


def test_normalize_drops_non_ascii_letters():
    assert normalize_az("Vigenère") == "VIGENRE"


def test_require_text_rejects_empty():
    with pytest.raises(InvalidTextError):
        require_text("  42 ")
    assert require_text("a-b") == "AB"


def test_gcd():
    assert gcd(26, 4) == 2
    assert gcd(-26, 5) == 1
    assert gcd(0, 7) == 7
    assert gcd(0, 0) == 0


def test_mod_inverse():
    assert mod_inverse(5, 26) == 21
    assert mod_inverse(9) == 3
    assert mod_inverse(-1, 26) == 25
    for a in COPRIME_26:
        assert (a * mod_inverse(a)) % 26 == 1


@pytest.mark.parametrize("a", [0, 2, 13, 26])
def test_mod_inverse_missing(a):
    with pytest.raises(NoInverseError):
        mod_inverse(a, 26)


def test_coprime_set_matches_gcd():
    assert COPRIME_26 == tuple(a for a in range(26) if gcd(a, 26) == 1)


def test_parse_int_list():
    assert parse_int_list("3, 3,2  5") == [3, 3, 2, 5]
    assert parse_int_list("") == []
    with pytest.raises(InvalidKeyError, match="'x'"):
        parse_int_list("1,x,3")


def test_parse_two_ints():
    assert parse_two_ints("5,8") == (5, 8)
    assert parse_two_ints("5:8") == (5, 8)
    assert parse_two_ints("5 8") == (5, 8)
    with pytest.raises(InvalidKeyError):
        parse_two_ints("5")


@pytest.mark.parametrize("raw,expected", [("straße", "STRAE"), ("ﬁne", "NE"), ("ıx", "X")])
def test_normalize_strips_before_uppercasing(raw, expected):
    # upper() would turn these into ASCII letters (ß -> SS, ﬁ -> FI, ı -> I)
    assert normalize_az(raw) == expected


def test_norm_key_alpha_drops_non_ascii_letters():
    assert norm_key_alpha("ß") == ""
    assert norm_key_alpha("Schlüßel") == "SCHLEL"
