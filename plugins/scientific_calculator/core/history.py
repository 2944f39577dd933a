"""Bounded in-memory record of recent calculations."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import asdict, dataclass

DEFAULT_HISTORY_SIZE = 20


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    expression: str
    display: str
    angle_mode: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.expression} = {self.display}"


class CalculationHistory:
    """Keep the ``limit`` most recent calculations, oldest first."""

    def __init__(self, limit: int = DEFAULT_HISTORY_SIZE):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._entries: deque[HistoryEntry] = deque(maxlen=limit)
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._entries.maxlen or DEFAULT_HISTORY_SIZE

    def record(self, expression: str, display: str, angle_mode: str) -> HistoryEntry:
        entry = HistoryEntry(expression=expression, display=display, angle_mode=angle_mode)
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["DEFAULT_HISTORY_SIZE", "CalculationHistory", "HistoryEntry"]
