from __future__ import annotations
from functools import partial
from typing import Callable, Dict
import xxhash # type: ignore

from hllcount.lib.errors import ConfigurationError

HashFunction = Callable[[bytes], int]

MASK64 = 0xFFFFFFFFFFFFFFFF

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3


def xxhash64(data: bytes, seed: int = 0) -> int:
    """Hash bytes with xxHash64.

    Args:
        data: Bytes to hash
        seed: Seed for the hasher

    Returns:
        64-bit hash value as integer
    """
    hasher = xxhash.xxh64(seed=seed)
    hasher.update(data)
    return hasher.intdigest()


def fnv1a_64(data: bytes) -> int:
    """Hash bytes with 64-bit FNV-1a.

    Args:
        data: Bytes to hash

    Returns:
        64-bit hash value as integer
    """
    h = FNV64_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV64_PRIME) & MASK64
    return h


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    'xxhash64': xxhash64,
    'fnv1a64': fnv1a_64,
}

# Hash functions that accept a seed keyword
SEEDED_HASHES = {'xxhash64'}


def get_hash_function(name: str, seed: int = 0) -> HashFunction:
    """Look up a hash function by name, binding the seed if one is given.

    Args:
        name: Registered hash name (see HASH_FUNCTIONS)
        seed: Seed for hashes that support one

    Returns:
        Callable mapping bytes to a 64-bit integer

    Raises:
        ConfigurationError: If the name is unknown, or a seed is given
            for a hash that does not take one
    """
    if name not in HASH_FUNCTIONS:
        choices = ', '.join(sorted(HASH_FUNCTIONS))
        raise ConfigurationError(f"Unknown hash function '{name}' (choices: {choices})")
    func = HASH_FUNCTIONS[name]
    if seed:
        if name not in SEEDED_HASHES:
            raise ConfigurationError(f"Hash function '{name}' does not take a seed")
        return partial(func, seed=seed)
    return func
