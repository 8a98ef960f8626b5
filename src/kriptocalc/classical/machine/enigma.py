from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from kriptocalc.core.errors import InvalidConfigError
from kriptocalc.core.registry import register_plugin
from kriptocalc.core.utils import require_text
from kriptocalc.classical.common import is_int, letter_value, value_letter

# Historical Enigma I wirings, left (slow) to right (fast)
ROTORS = (
    "EKMFLGDQVZNTOWYHXUSPAIBRCJ",  # I
    "AJDKSIRUXBLHWTMCQGZNPYFVOE",  # II
    "BDFHJLCPRTXVZNYEIWGAKMUSQO",  # III
)
NOTCHES = ("Q", "E", "V")
REFLECTOR_B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"

LEFT, MIDDLE, RIGHT = 0, 1, 2

Triple = Tuple[int, int, int]

_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class EnigmaConfig:
    rotor_positions: Triple = (0, 0, 0)
    ring_settings: Triple = (0, 0, 0)

    def __str__(self) -> str:
        pos = ",".join(str(v) for v in self.rotor_positions)
        ring = ",".join(str(v) for v in self.ring_settings)
        return f"{pos};{ring}"


def validate_config(config: EnigmaConfig) -> None:
    for label, values in (("Rotor position", config.rotor_positions), ("Ring setting", config.ring_settings)):
        if len(values) != 3:
            raise InvalidConfigError(f"{label}s must have exactly 3 values.")
        for i, v in enumerate(values):
            if not is_int(v) or not 0 <= v <= 25:
                raise InvalidConfigError(f"{label} {i + 1} must be an integer between 0 and 25 (got {v!r}).")


def _parse_triple(raw: str, what: str) -> Triple:
    parts = [p for p in _SPLIT_RE.split(raw.strip()) if p]
    try:
        nums = [int(p) for p in parts]
    except ValueError as e:
        raise InvalidConfigError(f"{what} must be integers (got '{raw.strip()}').") from e
    if len(nums) != 3:
        raise InvalidConfigError(f"{what} must have 3 values (e.g., '0,0,0').")
    return nums[0], nums[1], nums[2]


def parse_enigma_key(key: str) -> EnigmaConfig:
    """
    Parse "p1,p2,p3;r1,r2,r3". The ring part is optional and defaults to 0,0,0.
    """
    parts = [s.strip() for s in (key or "").split(";")]
    if len(parts) > 2:
        raise InvalidConfigError("Enigma key must look like 'p1,p2,p3;r1,r2,r3'.")
    positions = _parse_triple(parts[0], "Rotor positions")
    rings = _parse_triple(parts[1], "Ring settings") if len(parts) > 1 else (0, 0, 0)
    config = EnigmaConfig(rotor_positions=positions, ring_settings=rings)
    validate_config(config)
    return config


class EnigmaMachine:
    """
    Three-rotor machine with Reflector B and no plugboard.

    Rotor positions are private to one instance and advance once per
    character, so build a fresh machine for every message.
    """

    def __init__(self, config: EnigmaConfig) -> None:
        validate_config(config)
        self._positions = list(config.rotor_positions)
        self._rings = tuple(config.ring_settings)

    @property
    def positions(self) -> Triple:
        p = self._positions
        return p[0], p[1], p[2]

    def step_rotors(self) -> None:
        p = self._positions
        middle_at_notch = value_letter(p[MIDDLE]) == NOTCHES[MIDDLE]
        right_at_notch = value_letter(p[RIGHT]) == NOTCHES[RIGHT]

        # double step: the middle rotor drags the left one and itself along
        if middle_at_notch:
            p[LEFT] = (p[LEFT] + 1) % 26
            p[MIDDLE] = (p[MIDDLE] + 1) % 26
        elif right_at_notch:
            p[MIDDLE] = (p[MIDDLE] + 1) % 26

        p[RIGHT] = (p[RIGHT] + 1) % 26

    def _pass(self, ch: int, rotor: int, forward: bool) -> int:
        wiring = ROTORS[rotor]
        pos = self._positions[rotor]
        ring = self._rings[rotor]

        contact = (ch + pos - ring + 26) % 26
        if forward:
            out = letter_value(wiring[contact])
        else:
            out = wiring.index(value_letter(contact))
        return (out - pos + ring + 26) % 26

    def encode_value(self, ch: int) -> int:
        self.step_rotors()

        signal = ch
        for rotor in (RIGHT, MIDDLE, LEFT):
            signal = self._pass(signal, rotor, forward=True)
        signal = letter_value(REFLECTOR_B[signal])
        for rotor in (LEFT, MIDDLE, RIGHT):
            signal = self._pass(signal, rotor, forward=False)
        return signal

    def process(self, text: str) -> str:
        """Encode normalized A-Z text; the same call decrypts from the same start state."""
        return "".join(value_letter(self.encode_value(letter_value(ch))) for ch in text)


def _as_config(config) -> EnigmaConfig:
    if isinstance(config, str):
        return parse_enigma_key(config)
    return config


def encrypt(plaintext: str, config: EnigmaConfig) -> str:
    text = require_text(plaintext, "Plaintext")
    return EnigmaMachine(_as_config(config)).process(text)


def decrypt(ciphertext: str, config: EnigmaConfig) -> str:
    # self-reciprocal: a fresh machine with the same settings undoes encrypt()
    text = require_text(ciphertext, "Ciphertext")
    return EnigmaMachine(_as_config(config)).process(text)


class EnigmaCipher:
    name = "enigma"

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, parse_enigma_key(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, parse_enigma_key(key))

    def fingerprint(self) -> dict:
        return {"family": "machine"}


register_plugin(EnigmaCipher())
