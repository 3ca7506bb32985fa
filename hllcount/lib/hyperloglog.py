from __future__ import annotations
import math
from typing import Iterable, List, Tuple, Union
import numpy as np # type: ignore

from hllcount.lib.abstractsketch import AbstractSketch
from hllcount.lib.errors import ConfigurationError
from hllcount.lib.hashing import HashFunction, MASK64, xxhash64

HASH_BITS = 64

DEFAULT_PRECISION = 12
MIN_PRECISION = 1
MAX_PRECISION = 32

# Linear counting is used while the raw estimate is at most this many times m
SMALL_RANGE_FACTOR = 2.5

# Large-range correction keeps the 2^32 hash-space constant of the classic formula
TWO_POW_32 = float(1 << 32)
LARGE_RANGE_THRESHOLD = TWO_POW_32 / 30.0


def _count_leading_zeros64(x: int) -> int:
    """Count leading zeros of x as a 64-bit unsigned word."""
    return HASH_BITS - x.bit_length()


def validate_precision(precision: int) -> int:
    """Check that precision is an integer in [MIN_PRECISION, MAX_PRECISION].

    Returns:
        The precision as a plain int

    Raises:
        ConfigurationError: If precision has the wrong type or is out of range
    """
    if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)):
        raise ConfigurationError(
            f"Precision must be an integer, got {type(precision).__name__}")
    if precision < MIN_PRECISION or precision > MAX_PRECISION:
        raise ConfigurationError(
            f"Precision must be between {MIN_PRECISION} and {MAX_PRECISION}, got {precision}")
    return int(precision)


def _as_bytes(item: Union[bytes, bytearray, memoryview]) -> bytes:
    if not isinstance(item, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like element, got {type(item).__name__}")
    return bytes(item)


class HyperLogLog(AbstractSketch):
    """HyperLogLog distinct-count estimator over 64-bit hashes.

    Keeps 2^precision one-byte registers. The top `precision` bits of each
    hash pick a register; the register keeps the largest rank (position of
    the leftmost 1-bit in the remaining bits) seen so far.
    """

    def __init__(self,
                 precision: int = DEFAULT_PRECISION,
                 hash_func: HashFunction = xxhash64):
        """Initialize HyperLogLog sketch.

        Args:
            precision: Number of hash bits used for register indexing
                      (1-32). Standard error is
                      roughly 1.04/sqrt(2^precision); 12 gives ~1.6%.
            hash_func: Function mapping bytes to a 64-bit unsigned integer.
                      It is fixed for the lifetime of the sketch.

        Raises:
            ConfigurationError: If precision is not an integer in range or
                hash_func is not callable
        """
        super().__init__()

        precision = validate_precision(precision)
        if not callable(hash_func):
            raise ConfigurationError("hash_func must be callable")

        self.precision = precision
        self.num_registers = 1 << self.precision
        self.registers = np.zeros(self.num_registers, dtype=np.uint8)
        self.hash_func = hash_func
        self.item_count = 0

        self.alpha = 0.7213 / (1 + 1.079 / self.num_registers)
        self._index_shift = HASH_BITS - self.precision
        # Sentinel bit keeps the remainder non-zero, capping rank at 64 - p + 1
        self._sentinel = 1 << (self.precision - 1)

    @property
    def max_rank(self) -> int:
        """Largest value a register can hold at this precision."""
        return HASH_BITS - self.precision + 1

    @property
    def standard_error(self) -> float:
        """Relative standard error of the estimate, 1.04/sqrt(m)."""
        return 1.04 / math.sqrt(self.num_registers)

    def _bucket_and_rank(self, hash_val: int) -> Tuple[int, int]:
        """Split a 64-bit hash into its register index and rank.

        Args:
            hash_val: Hash value (bits above 64 are ignored)

        Returns:
            (index, rank) with rank in [1, max_rank]
        """
        hash_val &= MASK64
        index = hash_val >> self._index_shift
        remainder = ((hash_val << self.precision) & MASK64) | self._sentinel
        return index, _count_leading_zeros64(remainder) + 1

    def _locate(self, data: bytes) -> Tuple[int, int]:
        return self._bucket_and_rank(self.hash_func(data))

    def _update(self, index: int, rank: int) -> None:
        self.item_count += 1
        if rank > self.registers[index]:
            self.registers[index] = rank

    def _apply(self, indices: List[int], ranks: List[int]) -> None:
        self.item_count += len(indices)
        np.maximum.at(self.registers,
                      np.asarray(indices, dtype=np.intp),
                      np.asarray(ranks, dtype=np.uint8))

    def add(self, data: bytes) -> None:
        """Add one element to the sketch.

        Args:
            data: Element bytes; empty input is a valid element

        Raises:
            TypeError: If data is not bytes-like
        """
        index, rank = self._locate(_as_bytes(data))
        self._update(index, rank)

    def add_batch(self, items: Iterable[Union[bytes, str]]) -> None:
        """Add multiple elements to the sketch.

        Registers end up exactly as if add()/add_string() were called for
        each item; the bucket maxima are applied in one vectorised step.
        Nothing is applied if any item has an unsupported type.

        Args:
            items: Bytes-like elements or strings (encoded as UTF-8)
        """
        indices: List[int] = []
        ranks: List[int] = []
        for item in items:
            data = item.encode('utf-8') if isinstance(item, str) else _as_bytes(item)
            index, rank = self._locate(data)
            indices.append(index)
            ranks.append(rank)
        if indices:
            self._apply(indices, ranks)

    def snapshot(self) -> np.ndarray:
        """Return a copy of the current registers."""
        return self.registers.copy()

    def is_empty(self) -> bool:
        """Check if sketch is empty."""
        return not self.registers.any()

    def register_counts(self) -> np.ndarray:
        """Get counts of registers by value, indexed 0..max_rank."""
        return np.bincount(self.registers, minlength=self.max_rank + 1)

    def raw_estimate(self) -> float:
        """Calculate the raw cardinality estimate before range corrections.

        Returns:
            alpha_m * m^2 / sum(2^-register)
        """
        return self._raw_estimate_from(self.registers)

    def estimate(self) -> int:
        """Estimate the number of distinct elements added.

        Does not modify the sketch; repeated calls return the same value.

        Returns:
            Corrected estimate, truncated toward zero
        """
        return self._estimate_from(self.registers)

    def _raw_estimate_from(self, registers: np.ndarray) -> float:
        m = float(self.num_registers)
        # Convert before negating: uint8 negation wraps
        harmonic_sum = float(np.sum(np.exp2(-registers.astype(np.float64))))
        return self.alpha * (m * m) / harmonic_sum

    def _estimate_from(self, registers: np.ndarray) -> int:
        raw = self._raw_estimate_from(registers)
        zeros = int(np.count_nonzero(registers == 0))
        return int(self._corrected_estimate(raw, zeros))

    def _corrected_estimate(self, raw_estimate: float, zeros: int) -> float:
        """Apply the small- and large-range corrections to a raw estimate.

        Args:
            raw_estimate: Output of the harmonic-mean formula
            zeros: Number of registers still at zero

        Returns:
            Corrected (untruncated) estimate
        """
        m = float(self.num_registers)
        estimate = raw_estimate

        if estimate <= SMALL_RANGE_FACTOR * m:
            # Linear counting; with no empty registers the raw value stands
            if zeros > 0:
                estimate = m * math.log(m / zeros)
        elif estimate > LARGE_RANGE_THRESHOLD:
            ratio = estimate / TWO_POW_32
            # ln(1 - ratio) is undefined once the estimate reaches 2^32
            if ratio < 1.0:
                estimate = -TWO_POW_32 * math.log(1.0 - ratio)

        return estimate
