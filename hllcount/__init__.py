"""
hllcount - Bounded-memory distinct counting with HyperLogLog
"""
import logging

from hllcount.lib.hyperloglog import HyperLogLog
from hllcount.lib.concurrent import ThreadSafeHyperLogLog
from hllcount.lib.errors import ConfigurationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'HyperLogLog',
    'ThreadSafeHyperLogLog',
    'ConfigurationError',
]
