"""kriptocalc: classical cipher engines (Vigenere, Affine, Playfair, Hill, Enigma)."""

__version__ = "0.1.0"
