from __future__ import annotations

from kriptocalc.core.errors import InvalidKeyError
from kriptocalc.core.registry import register_plugin
from kriptocalc.core.utils import require_text
from kriptocalc.classical.common import letter_value, norm_key_alpha, value_letter


def _validate_key(key: str) -> list[int]:
    k = norm_key_alpha(key)
    if not k:
        raise InvalidKeyError("Vigenère key must contain at least one A-Z letter.")
    return [letter_value(ch) for ch in k]


def _apply(text: str, shifts: list[int], sign: int) -> str:
    out = []
    for i, ch in enumerate(text):
        shift = shifts[i % len(shifts)]
        out.append(value_letter(letter_value(ch) + sign * shift + 26))
    return "".join(out)


def encrypt(plaintext: str, key: str) -> str:
    shifts = _validate_key(key)
    text = require_text(plaintext, "Plaintext")
    return _apply(text, shifts, +1)


def decrypt(ciphertext: str, key: str) -> str:
    shifts = _validate_key(key)
    text = require_text(ciphertext, "Ciphertext")
    return _apply(text, shifts, -1)


class VigenereCipher:
    name = "vigenere"

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, key)

    def fingerprint(self) -> dict:
        return {"family": "polyalphabetic"}


register_plugin(VigenereCipher())
