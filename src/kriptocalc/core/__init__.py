from .errors import (
    CipherError,
    InvalidConfigError,
    InvalidKeyError,
    InvalidLengthError,
    InvalidTextError,
    NoInverseError,
    SingularMatrixError,
)
from .history import RunHistory
from .registry import register_plugin, encrypt_known, decrypt_known
from .results import CipherRun
from .utils import normalize_az

__all__ = [
    "CipherError",
    "InvalidConfigError",
    "InvalidKeyError",
    "InvalidLengthError",
    "InvalidTextError",
    "NoInverseError",
    "SingularMatrixError",
    "RunHistory",
    "CipherRun",
    "normalize_az",
    "register_plugin",
    "encrypt_known",
    "decrypt_known",
]
