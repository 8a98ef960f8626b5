from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from .results import CipherRun

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


class HistoryError(ValueError):
    """History file exists but cannot be read back."""


class RunHistory:
    """
    Bounded log of successful cipher runs, newest first.

    push() prepends and drops the oldest entries beyond `capacity`.
    When a path is set, save() writes the entries as a JSON list.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, path: Optional[Path] = None) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self.path = Path(path) if path is not None else None
        self._entries: list[CipherRun] = []

    @classmethod
    def load(cls, path: Path, capacity: int = DEFAULT_CAPACITY) -> "RunHistory":
        hist = cls(capacity=capacity, path=path)
        p = Path(path)
        if not p.exists():
            logger.debug("No history file at %s; starting empty", p)
            return hist

        try:
            raw = json.loads(p.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError as e:
            raise HistoryError(f"History file {p} is not valid JSON: {e}") from e
        if not isinstance(raw, list):
            raise HistoryError(f"History file {p} must contain a JSON list.")

        try:
            hist._entries = [CipherRun.from_dict(item) for item in raw][:capacity]
        except ValueError as e:
            raise HistoryError(f"History file {p}: {e}") from e
        logger.debug("Loaded %d history entries from %s", len(hist._entries), p)
        return hist

    def save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [r.to_dict() for r in self._entries]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug("Saved %d history entries to %s", len(payload), self.path)

    def push(self, run: CipherRun) -> CipherRun:
        self._entries.insert(0, run)
        dropped = len(self._entries) - self.capacity
        if dropped > 0:
            del self._entries[self.capacity:]
            logger.debug("History over capacity; dropped %d oldest entries", dropped)
        return run

    def remove(self, run_id: str) -> bool:
        before = len(self._entries)
        self._entries = [r for r in self._entries if r.id != run_id]
        return len(self._entries) < before

    def clear(self) -> None:
        self._entries = []

    def entries(self) -> list[CipherRun]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CipherRun]:
        return iter(list(self._entries))
