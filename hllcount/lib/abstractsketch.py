from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Union


class AbstractSketch(ABC):
    """Base class for distinct-count sketches."""

    @abstractmethod
    def add(self, data: bytes) -> None:
        """Add one element, given as bytes, to the sketch."""
        pass

    @abstractmethod
    def add_batch(self, items: Iterable[Union[bytes, str]]) -> None:
        """Add multiple elements to the sketch.

        Args:
            items: Bytes or strings to add to the sketch
        """
        pass

    @abstractmethod
    def estimate(self) -> int:
        """Return the estimated number of distinct elements added so far."""
        pass

    def add_string(self, s: str) -> None:
        """Add a string to the sketch.

        The string is encoded as UTF-8 before hashing, so add_string(s)
        and add(s.encode()) have the same effect.

        Args:
            s: String to add to the sketch
        """
        self.add(s.encode('utf-8'))
