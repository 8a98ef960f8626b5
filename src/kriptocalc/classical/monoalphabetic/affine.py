from __future__ import annotations

from kriptocalc.core.errors import InvalidKeyError
from kriptocalc.core.registry import register_plugin
from kriptocalc.core.utils import require_text
from kriptocalc.classical.common import (
    COPRIME_26,
    gcd,
    is_int,
    letter_value,
    mod_inverse,
    parse_two_ints,
    value_letter,
)


def validate_keys(a: int, b: int) -> None:
    if not is_int(a) or not is_int(b):
        raise InvalidKeyError("Keys a and b must be integers.")
    if not 0 <= a <= 25:
        raise InvalidKeyError(f"Key 'a' ({a}) must be between 0 and 25.")
    if not 0 <= b <= 25:
        raise InvalidKeyError(f"Key 'b' ({b}) must be between 0 and 25.")
    if gcd(a, 26) != 1:
        valid = ", ".join(str(v) for v in COPRIME_26)
        raise InvalidKeyError(f"Key 'a' ({a}) must be coprime with 26. Valid values: {valid}.")


def encrypt(plaintext: str, a: int, b: int) -> str:
    validate_keys(a, b)
    text = require_text(plaintext, "Plaintext")
    return "".join(value_letter(a * letter_value(ch) + b) for ch in text)


def decrypt(ciphertext: str, a: int, b: int) -> str:
    validate_keys(a, b)
    text = require_text(ciphertext, "Ciphertext")

    inv = mod_inverse(a, 26)
    out = []
    for ch in text:
        y = letter_value(ch)
        out.append(value_letter(inv * ((y - b + 26) % 26)))
    return "".join(out)


class AffineCipher:
    name = "affine"

    def encrypt(self, plaintext: str, key: str) -> str:
        a, b = parse_two_ints(key)
        return encrypt(plaintext, a, b)

    def decrypt(self, ciphertext: str, key: str) -> str:
        a, b = parse_two_ints(key)
        return decrypt(ciphertext, a, b)

    def fingerprint(self) -> dict:
        return {"family": "monoalphabetic"}


register_plugin(AffineCipher())
