from __future__ import annotations

def register_all() -> None:
    from .monoalphabetic import affine  # noqa: F401
    from .polyalphabetic import vigenere  # noqa: F401
    from .polygraphic import playfair, hill  # noqa: F401
    from .machine import enigma  # noqa: F401
