from __future__ import annotations

import re
from typing import List

from kriptocalc.core.errors import InvalidKeyError, NoInverseError
from kriptocalc.core.utils import normalize_az

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")

# Residues mod 26 that have a multiplicative inverse
COPRIME_26 = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)

_INT_SPLIT_RE = re.compile(r"[\s,]+")


def letter_value(ch: str) -> int:
    """'A' -> 0 ... 'Z' -> 25. Expects an uppercase A-Z character."""
    return ord(ch) - A_ORD


def value_letter(v: int) -> str:
    return chr(A_ORD + (v % 26))


def norm_key_alpha(key: str) -> str:
    """Uppercase and keep only A-Z."""
    return normalize_az(key)


def is_int(v) -> bool:
    # bool is an int subclass but never a meaningful key value
    return isinstance(v, int) and not isinstance(v, bool)


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def mod_inverse(a: int, m: int = 26) -> int:
    """Modular inverse of a under mod m; raises NoInverseError if none."""
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    raise NoInverseError(f"No modular inverse exists for a={a} mod {m}.")


def parse_int_list(raw: str, what: str = "Key") -> List[int]:
    """
    Parse integers separated by commas and/or whitespace: "3,3,2,5" or "3 3 2 5".
    Raises InvalidKeyError naming the first token that is not an integer.
    """
    parts = [p for p in _INT_SPLIT_RE.split((raw or "").strip()) if p]
    out: List[int] = []
    for p in parts:
        try:
            out.append(int(p))
        except ValueError as e:
            raise InvalidKeyError(f"{what} value '{p}' is not an integer.") from e
    return out


def parse_two_ints(key: str) -> tuple[int, int]:
    """
    Parse keys like: "5,8" or "5:8" or "5 8"
    Returns (a, b).
    """
    nums = parse_int_list((key or "").replace(":", ","))
    if len(nums) != 2:
        raise InvalidKeyError("Expected key format like 'a,b' (e.g., '5,8').")
    return nums[0], nums[1]
