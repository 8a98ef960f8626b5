import pytest

from kriptocalc.classical.polyalphabetic import vigenere
from kriptocalc.core.errors import InvalidKeyError, InvalidTextError


def test_known_vector():
    assert vigenere.encrypt("HELLO", "KEY") == "RIJVS"
    assert vigenere.decrypt("RIJVS", "KEY") == "HELLO"


def test_normalizes_text_and_key():
    assert vigenere.encrypt("Attack at dawn!", "lemon") == "LXFOPVEFRNHR"
    assert vigenere.decrypt("lxfo pvef rnhr", "LE-MON") == "ATTACKATDAWN"


def test_roundtrip():
    text = "The quick brown fox jumps over the lazy dog"
    ct = vigenere.encrypt(text, "CRYPTO")
    assert len(ct) == len("THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG")
    assert vigenere.decrypt(ct, "CRYPTO") == "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"


def test_key_a_is_identity():
    assert vigenere.encrypt("hello", "aaa") == "HELLO"


@pytest.mark.parametrize("key", ["", "123", "!!"])
def test_bad_key(key):
    with pytest.raises(InvalidKeyError):
        vigenere.encrypt("HELLO", key)


def test_empty_text():
    with pytest.raises(InvalidTextError):
        vigenere.decrypt("12 34", "KEY")


def test_non_ascii_key_rejected():
    with pytest.raises(InvalidKeyError):
        vigenere.encrypt("HELLO", "ß")


def test_non_ascii_text_letters_dropped():
    assert vigenere.encrypt("Maß", "KEY") == vigenere.encrypt("MA", "KEY")
    assert len(vigenere.encrypt("Maß", "KEY")) == 2
