from __future__ import annotations


class CipherError(ValueError):
    """Base class for every validation failure raised by a cipher."""


class InvalidKeyError(CipherError):
    """Key material fails a structural constraint."""


class SingularMatrixError(InvalidKeyError):
    """Hill matrix determinant is 0 or not coprime with 26 (mod 26)."""

    def __init__(self, message: str, determinant: int | None = None) -> None:
        super().__init__(message)
        self.determinant = determinant


class InvalidConfigError(InvalidKeyError):
    """Enigma rotor position or ring setting is not an integer in 0..25."""


class InvalidTextError(CipherError):
    """Input text has no A-Z letters once normalized."""


class InvalidLengthError(CipherError):
    """Ciphertext length does not fit the cipher's block size."""


class NoInverseError(CipherError):
    """Requested modular inverse does not exist."""
