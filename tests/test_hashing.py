from __future__ import annotations
import pytest # type: ignore
from hllcount.lib.errors import ConfigurationError
from hllcount.lib.hashing import (
    HASH_FUNCTIONS,
    fnv1a_64,
    get_hash_function,
    xxhash64,
)


@pytest.mark.quick
class TestHashingQuick:
    """Quick tests for the 64-bit hash functions."""

    @pytest.mark.parametrize("data,expected", [
        (b"", 0xCBF29CE484222325),
        (b"a", 0xAF63DC4C8601EC8C),
        (b"foobar", 0x85944171F73967E8),
    ])
    def test_fnv1a_64_vectors(self, data, expected):
        assert fnv1a_64(data) == expected

    def test_xxhash64_empty(self):
        assert xxhash64(b"") == 0xEF46DB3751D8E999

    def test_xxhash64_seed(self):
        assert xxhash64(b"10.0.0.1", seed=0) != xxhash64(b"10.0.0.1", seed=1)
        assert xxhash64(b"10.0.0.1", seed=1) == xxhash64(b"10.0.0.1", seed=1)

    @pytest.mark.parametrize("func", [fnv1a_64, xxhash64])
    def test_range(self, func):
        for i in range(200):
            value = func(f"192.168.{i}.1".encode())
            assert 0 <= value < 2 ** 64

    def test_registry(self):
        assert HASH_FUNCTIONS["xxhash64"] is xxhash64
        assert HASH_FUNCTIONS["fnv1a64"] is fnv1a_64

    def test_get_hash_function(self):
        assert get_hash_function("fnv1a64") is fnv1a_64
        assert get_hash_function("xxhash64") is xxhash64

    def test_get_seeded_hash_function(self):
        hasher = get_hash_function("xxhash64", seed=5)
        assert hasher(b"abc") == xxhash64(b"abc", seed=5)

    def test_unknown_hash_function(self):
        with pytest.raises(ConfigurationError):
            get_hash_function("md5")

    def test_seed_for_unseeded_hash(self):
        with pytest.raises(ConfigurationError):
            get_hash_function("fnv1a64", seed=3)
