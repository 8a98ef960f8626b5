from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CipherRun:
    """One successful encrypt/decrypt call, as kept in the run history."""

    cipher: str
    mode: str  # "encrypt" or "decrypt"
    input: str
    output: str
    key: str = ""

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def create(cls, cipher: str, mode: str, input: str, output: str, key: str = "") -> "CipherRun":
        return cls(cipher=cipher, mode=mode, input=input, output=output, key=key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "cipher": self.cipher,
            "mode": self.mode,
            "input": self.input,
            "output": self.output,
            "key": self.key,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CipherRun":
        try:
            return cls(
                id=str(data["id"]),
                cipher=str(data["cipher"]),
                mode=str(data["mode"]),
                input=str(data["input"]),
                output=str(data["output"]),
                key=str(data.get("key", "")),
                timestamp=float(data["timestamp"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed history entry: {data!r}") from e
