from __future__ import annotations

from kriptocalc.core.errors import InvalidKeyError, InvalidLengthError
from kriptocalc.core.registry import register_plugin
from kriptocalc.core.utils import normalize_az, require_text
from kriptocalc.classical.common import ALPHABET

SIZE = 5
FILLER = "X"

PlayfairMatrix = tuple[str, ...]


def _merge_ij(text: str) -> str:
    return normalize_az(text).replace("J", "I")


def _validate_key(key: str) -> str:
    k = _merge_ij(key)
    if not k:
        raise InvalidKeyError("Playfair key must contain at least one A-Z letter.")
    return k


def generate_matrix(key: str) -> PlayfairMatrix:
    """
    Build the 5x5 key square: key letters in first-occurrence order,
    then the rest of A-Z (J is folded into I and never placed).
    """
    seen: list[str] = []
    for ch in _validate_key(key) + ALPHABET:
        if ch == "J" or ch in seen:
            continue
        seen.append(ch)
    letters = "".join(seen)
    return tuple(letters[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))


def find_position(matrix: PlayfairMatrix, ch: str) -> tuple[int, int]:
    for r, row in enumerate(matrix):
        c = row.find(ch)
        if c >= 0:
            return r, c
    raise ValueError(f"Character '{ch}' not found in matrix.")


def create_digraphs(text: str) -> list[str]:
    """
    Split I/J-merged text into digraphs. A doubled letter is broken with X,
    and a lone trailing letter is padded with X.
    """
    digraphs = []
    i = 0
    while i < len(text):
        first = text[i]
        if i + 1 >= len(text) or text[i + 1] == first:
            digraphs.append(first + FILLER)
            i += 1
        else:
            digraphs.append(first + text[i + 1])
            i += 2
    return digraphs


def _substitute(matrix: PlayfairMatrix, pair: str, step: int) -> str:
    r1, c1 = find_position(matrix, pair[0])
    r2, c2 = find_position(matrix, pair[1])

    if r1 == r2:
        return matrix[r1][(c1 + step) % SIZE] + matrix[r2][(c2 + step) % SIZE]
    if c1 == c2:
        return matrix[(r1 + step) % SIZE][c1] + matrix[(r2 + step) % SIZE][c2]
    # rectangle: swap columns
    return matrix[r1][c2] + matrix[r2][c1]


def encrypt(plaintext: str, key: str) -> str:
    matrix = generate_matrix(key)
    text = require_text(plaintext, "Plaintext").replace("J", "I")
    return "".join(_substitute(matrix, pair, +1) for pair in create_digraphs(text))


def decrypt(ciphertext: str, key: str) -> str:
    """Filler X letters inserted on encryption are left in place."""
    matrix = generate_matrix(key)
    text = require_text(ciphertext, "Ciphertext").replace("J", "I")
    if len(text) % 2 != 0:
        raise InvalidLengthError(
            f"Ciphertext length must be even for Playfair decryption (got {len(text)})."
        )
    pairs = [text[i:i + 2] for i in range(0, len(text), 2)]
    return "".join(_substitute(matrix, pair, -1) for pair in pairs)


class PlayfairCipher:
    name = "playfair"

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, key)

    def fingerprint(self) -> dict:
        return {"family": "polygraphic"}


register_plugin(PlayfairCipher())
