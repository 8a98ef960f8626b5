from __future__ import annotations

from typing import List, Sequence, Union

from kriptocalc.core.errors import (
    InvalidKeyError,
    InvalidLengthError,
    NoInverseError,
    SingularMatrixError,
)
from kriptocalc.core.registry import register_plugin
from kriptocalc.core.utils import chunked, require_text
from kriptocalc.classical.common import (
    COPRIME_26,
    is_int,
    letter_value,
    mod_inverse,
    parse_int_list,
    value_letter,
)

HillMatrix = List[List[int]]

SIZES = (2, 3)
FILLER = "X"


# ----------------------------
# Matrix math (mod 26 where noted)
# ----------------------------

def minor(matrix: HillMatrix, row: int, col: int) -> HillMatrix:
    return [
        [v for c, v in enumerate(r) if c != col]
        for i, r in enumerate(matrix)
        if i != row
    ]


def determinant(matrix: HillMatrix) -> int:
    """Integer determinant (not reduced mod 26)."""
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        (a, b), (c, d) = matrix
        return a * d - b * c
    if n == 3:
        (a, b, c), (d, e, f), (g, h, i) = matrix
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    # first-row cofactor expansion for anything larger
    return sum(
        (-1) ** col * matrix[0][col] * determinant(minor(matrix, 0, col))
        for col in range(n)
    )


def determinant_mod26(matrix: HillMatrix) -> int:
    return determinant(matrix) % 26


def adjugate(matrix: HillMatrix) -> HillMatrix:
    """Transpose of the cofactor matrix."""
    n = len(matrix)
    if n == 1:
        return [[1]]
    adj = [[0] * n for _ in range(n)]
    for r in range(n):
        for c in range(n):
            adj[c][r] = (-1) ** (r + c) * determinant(minor(matrix, r, c))
    return adj


def is_invertible(matrix: HillMatrix) -> bool:
    return determinant_mod26(matrix) in COPRIME_26


def invert(matrix: HillMatrix) -> HillMatrix:
    det = determinant_mod26(matrix)
    if det == 0:
        raise SingularMatrixError("Matrix determinant is 0. Matrix is not invertible.", determinant=det)
    try:
        det_inv = mod_inverse(det, 26)
    except NoInverseError as e:
        raise SingularMatrixError(
            f"Matrix determinant ({det}) has no modular inverse mod 26. Matrix is not invertible.",
            determinant=det,
        ) from e

    adj = adjugate(matrix)
    return [[(det_inv * v) % 26 for v in row] for row in adj]


def multiply_block(matrix: HillMatrix, block: Sequence[int]) -> list[int]:
    return [sum(m * v for m, v in zip(row, block)) % 26 for row in matrix]


# ----------------------------
# Key handling
# ----------------------------

def validate_matrix(matrix: HillMatrix) -> None:
    n = len(matrix)
    if n not in SIZES:
        raise InvalidKeyError("Matrix must be 2x2 or 3x3.")
    for r, row in enumerate(matrix):
        if not isinstance(row, (list, tuple)):
            raise InvalidKeyError(f"Row {r} must be a list of integers (got {row!r}).")
        if len(row) != n:
            raise InvalidKeyError(f"Row {r} has {len(row)} elements, expected {n}.")
        for v in row:
            if not is_int(v):
                raise InvalidKeyError(f"All matrix values must be integers (got {v!r}).")

    det = determinant_mod26(matrix)
    if det == 0:
        raise SingularMatrixError("Matrix determinant is 0. Matrix is not invertible mod 26.", determinant=det)
    if det not in COPRIME_26:
        raise SingularMatrixError(
            f"Matrix determinant ({det}) is not coprime with 26. Matrix is not invertible.",
            determinant=det,
        )


def parse_matrix_key(raw: Union[str, Sequence[int]], size: int = 2) -> HillMatrix:
    """
    Build a size x size matrix from a flat row-major list of integers
    ("3,3,2,5" or [3, 3, 2, 5]). Entries are reduced mod 26.
    """
    if size not in SIZES:
        raise InvalidKeyError(f"Matrix size must be 2 or 3 (got {size}).")
    if isinstance(raw, str):
        nums = parse_int_list(raw, "Matrix")
    else:
        nums = list(raw)
        for v in nums:
            if not is_int(v):
                raise InvalidKeyError(f"Matrix value {v!r} is not an integer.")

    total = size * size
    if len(nums) != total:
        raise InvalidKeyError(
            f"Matrix key must contain exactly {total} integers for a {size}x{size} matrix (got {len(nums)})."
        )
    return [[nums[r * size + c] % 26 for c in range(size)] for r in range(size)]


def _infer_size(raw: str) -> int:
    count = len(parse_int_list(raw, "Matrix"))
    for n in SIZES:
        if count == n * n:
            return n
    raise InvalidKeyError(f"Hill key must have 4 (2x2) or 9 (3x3) integers, got {count}.")


# ----------------------------
# Encrypt / decrypt
# ----------------------------

def _transform(text: str, matrix: HillMatrix) -> str:
    n = len(matrix)
    out = []
    for block in chunked((letter_value(ch) for ch in text), n):
        out.extend(value_letter(v) for v in multiply_block(matrix, block))
    return "".join(out)


def encrypt(plaintext: str, matrix: HillMatrix) -> str:
    validate_matrix(matrix)
    n = len(matrix)
    text = require_text(plaintext, "Plaintext")

    if len(text) % n:
        text += FILLER * (n - len(text) % n)
    return _transform(text, matrix)


def decrypt(ciphertext: str, matrix: HillMatrix) -> str:
    validate_matrix(matrix)
    n = len(matrix)
    text = require_text(ciphertext, "Ciphertext")

    if len(text) % n:
        raise InvalidLengthError(
            f"Ciphertext length must be divisible by {n} for Hill {n}x{n} decryption (got {len(text)})."
        )
    return _transform(text, invert(matrix))


class HillCipher:
    name = "hill"

    def _matrix(self, key: str) -> HillMatrix:
        return parse_matrix_key(key, _infer_size(key))

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, self._matrix(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, self._matrix(key))

    def fingerprint(self) -> dict:
        return {"family": "polygraphic"}


register_plugin(HillCipher())
