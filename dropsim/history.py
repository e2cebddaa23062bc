"""Bounded (t, y, v) history feeding chart widgets."""
from collections import deque
from typing import Iterator

import numpy as np

from .config import PhysicsConstants
from .types import HistorySample


class HistoryBuffer:
    """FIFO ring of samples; the oldest sample is evicted once full."""

    def __init__(self, capacity: int = PhysicsConstants.HISTORY_CAPACITY):
        if capacity <= 0:
            raise ValueError("History capacity must be positive")
        self.capacity = capacity
        self._samples: deque[HistorySample] = deque(maxlen=capacity)

    def append(self, sample: HistorySample) -> None:
        self._samples.append(sample)

    def record(self, t: float, y: float, v: float) -> None:
        self.append(HistorySample(t, y, v))

    def clear(self) -> None:
        self._samples.clear()

    @property
    def latest(self) -> HistorySample | None:
        return self._samples[-1] if self._samples else None

    def samples(self) -> tuple[HistorySample, ...]:
        """Ordered, read-only view of the buffer (oldest first)."""
        return tuple(self._samples)

    def as_array(self) -> np.ndarray:
        """(n, 3) array of [t, y, v] rows, oldest first."""
        if not self._samples:
            return np.empty((0, 3), dtype=np.float64)
        return np.array(self._samples, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[HistorySample]:
        return iter(self._samples)
