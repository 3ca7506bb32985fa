from __future__ import annotations
import threading
from typing import List
import numpy as np # type: ignore

from hllcount.lib.hashing import HashFunction, xxhash64
from hllcount.lib.hyperloglog import DEFAULT_PRECISION, HyperLogLog


class ThreadSafeHyperLogLog(HyperLogLog):
    """HyperLogLog that can be fed from several producer threads.

    Hashing happens outside the lock; only the register update is
    serialised. Readers work on a copy of the registers taken under the
    same lock, so an estimate always reflects one consistent state.
    """

    def __init__(self,
                 precision: int = DEFAULT_PRECISION,
                 hash_func: HashFunction = xxhash64):
        super().__init__(precision, hash_func)
        self._lock = threading.Lock()

    def _update(self, index: int, rank: int) -> None:
        with self._lock:
            super()._update(index, rank)

    def _apply(self, indices: List[int], ranks: List[int]) -> None:
        with self._lock:
            super()._apply(indices, ranks)

    def snapshot(self) -> np.ndarray:
        """Return a consistent copy of the current registers."""
        with self._lock:
            return self.registers.copy()

    def is_empty(self) -> bool:
        return not self.snapshot().any()

    def register_counts(self) -> np.ndarray:
        return np.bincount(self.snapshot(), minlength=self.max_rank + 1)

    def raw_estimate(self) -> float:
        return self._raw_estimate_from(self.snapshot())

    def estimate(self) -> int:
        return self._estimate_from(self.snapshot())
