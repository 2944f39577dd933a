"""Single-value memory register (MC / MR / M+ / M-)."""

from __future__ import annotations

import math
import threading


class CalculatorMemory:
    """Accumulator shared by the requests of one application instance."""

    def __init__(self) -> None:
        self._value = 0.0
        self._lock = threading.Lock()

    def recall(self) -> float:
        with self._lock:
            return self._value

    def add(self, value: float) -> float:
        # An unusable display value counts as zero.
        if math.isnan(value):
            value = 0.0
        with self._lock:
            self._value += value
            return self._value

    def subtract(self, value: float) -> float:
        if math.isnan(value):
            value = 0.0
        with self._lock:
            self._value -= value
            return self._value

    def clear(self) -> None:
        with self._lock:
            self._value = 0.0

    @property
    def active(self) -> bool:
        return self.recall() != 0


__all__ = ["CalculatorMemory"]
