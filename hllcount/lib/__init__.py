from .hyperloglog import HyperLogLog, DEFAULT_PRECISION, MIN_PRECISION, MAX_PRECISION
from .concurrent import ThreadSafeHyperLogLog
from .errors import ConfigurationError
from .hashing import HASH_FUNCTIONS, fnv1a_64, get_hash_function, xxhash64
from .utils import read_lines

__all__ = [
    'HyperLogLog',
    'ThreadSafeHyperLogLog',
    'ConfigurationError',
    'DEFAULT_PRECISION',
    'MIN_PRECISION',
    'MAX_PRECISION',
    'HASH_FUNCTIONS',
    'fnv1a_64',
    'xxhash64',
    'get_hash_function',
    'read_lines',
]
