import pytest

from kriptocalc.classical.common import COPRIME_26
from kriptocalc.classical.monoalphabetic import affine
from kriptocalc.core.errors import InvalidKeyError, InvalidTextError


def test_known_vector():
    assert affine.encrypt("HELLO", 5, 8) == "RCLLA"
    assert affine.decrypt("RCLLA", 5, 8) == "HELLO"


def test_non_coprime_a_rejected():
    with pytest.raises(InvalidKeyError, match="coprime"):
        affine.validate_keys(4, 8)


@pytest.mark.parametrize("a,b", [(-1, 0), (26, 0), (5, 26), (5, -3)])
def test_out_of_range(a, b):
    with pytest.raises(InvalidKeyError):
        affine.validate_keys(a, b)


@pytest.mark.parametrize("a,b", [(5.0, 8), (5, "8"), (True, 3)])
def test_non_integer_keys(a, b):
    with pytest.raises(InvalidKeyError):
        affine.validate_keys(a, b)


def test_bijection_for_all_valid_keys():
    for a in COPRIME_26:
        for b in (0, 7, 25):
            ct = affine.encrypt("ABCDEFGHIJKLMNOPQRSTUVWXYZ", a, b)
            assert len(set(ct)) == 26
            assert affine.decrypt(ct, a, b) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_empty_text():
    with pytest.raises(InvalidTextError):
        affine.encrypt("", 5, 8)


def test_plugin_parses_string_key():
    plugin = affine.AffineCipher()
    assert plugin.encrypt("hello", "5,8") == "RCLLA"
    assert plugin.decrypt("RCLLA", "5 8") == "HELLO"
    with pytest.raises(InvalidKeyError):
        plugin.encrypt("hello", "13,2")
