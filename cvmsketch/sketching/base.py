"""Base protocols for streaming/sketching algorithms.

Sketching algorithms provide approximate statistics over data streams using
bounded memory. They trade exact accuracy for space efficiency, making them
useful wherever storing every item of a stream is impractical.

This module defines the protocols sketch implementations follow:
- Sketch: Base protocol with the operations every sketch supports
- CardinalitySketch: For cardinality (distinct count) estimation

Sketches here are single-stream accumulators: they are neither mergeable nor
resettable. A fresh stream needs a fresh sketch.
"""

from abc import ABC, abstractmethod
from typing import TypeVar

T = TypeVar("T")


class Sketch(ABC):
    """Base protocol for all streaming/sketching algorithms.

    Sketches process a stream of items and provide approximate answers to
    queries about the stream. They support:
    - Adding items (with optional counts)
    - Estimating memory usage
    - Reporting how many items were fed in

    Randomized sketches accept a `seed` parameter for reproducibility.
    """

    @abstractmethod
    def add(self, item: T, count: int = 1) -> None:
        """Add an item to the sketch.

        Args:
            item: The item to add.
            count: Number of occurrences to add (default 1).
        """

    @property
    @abstractmethod
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes.

        Returns:
            Approximate memory footprint of the sketch data structures.
        """

    @property
    @abstractmethod
    def item_count(self) -> int:
        """Total count of items added to the sketch.

        Returns:
            Sum of all counts added via add().
        """


class CardinalitySketch(Sketch):
    """Protocol for sketches that estimate cardinality (distinct count).

    Used for estimating the number of unique items in a stream without
    storing all items.

    Implementations: CVMSketch
    """

    @abstractmethod
    def cardinality(self) -> int:
        """Estimate the number of distinct items.

        Returns:
            Estimated count of unique items added.
        """
