"""CVM sketch for distinct count estimation.

The CVM algorithm (Chakraborty, Meel, Vinodchandran) estimates the number of
distinct elements in a stream by keeping a bounded random sample of the
distinct items seen so far. Every item is retained with probability
``1 / 2**round``; when the sample fills up, each retained item survives a
fair coin flip and the round advances. The estimate is the sample size
scaled back up by ``2**round``.

Key properties:
- Space: O(capacity) items, never more than capacity retained
- Update: O(1) expected, O(capacity) on the (rare) compaction
- Query: O(1)
- Error: relative error shrinks roughly as 1/sqrt(capacity)

Unlike HyperLogLog, CVM needs no hash function of its own: the items are
stored as-is (or under a caller-chosen key) and equality is Python's.

Reference:
    Chakraborty, Meel, Vinodchandran. "Distinct Elements in Streams: An
    Algorithm for the (Text) Book" (2022), https://arxiv.org/abs/2301.10191
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from cvmsketch.sketching.base import CardinalitySketch
from cvmsketch.sketching.errors import InvalidCapacityError
from cvmsketch.sketching.randomness import RandomSource, SeededRandomSource

if TYPE_CHECKING:
    from cvmsketch.config import SketchConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class CVMSketch(CardinalitySketch, Generic[T]):
    """CVM sketch for streaming distinct count estimation.

    Args:
        capacity: Maximum number of items retained in the sample. Larger
            capacities give more accurate estimates.
        seed: Random seed for the default random source.
        source: Random source to draw coin flips from. Mutually exclusive
            with seed.
        key: Function mapping an item to the value used for equality and
            hashing inside the sample. Defaults to the item itself.

    Example:
        # Count distinct words in a corpus
        cvm = CVMSketch[str](capacity=1000, seed=42)

        for word in text.split():
            cvm.insert(word)

        print(f"~{cvm.count()} distinct words")
    """

    def __init__(
        self,
        capacity: int,
        seed: int | None = None,
        source: RandomSource | None = None,
        key: Callable[[T], Hashable] | None = None,
    ):
        """Initialize CVMSketch.

        Raises:
            InvalidCapacityError: If capacity is not an integer >= 1.
            ValueError: If both seed and source are given.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(capacity)
        if seed is not None and source is not None:
            raise ValueError("pass either seed or source, not both")

        self._capacity = capacity
        self._round = 0
        # Insertion-ordered; compaction flips coins in this order
        self._sample: dict[Hashable, T] = {}
        self._source = source if source is not None else SeededRandomSource(seed)
        self._key = key
        self._total_count = 0

    @classmethod
    def from_config(cls, config: SketchConfig, key: Callable[[T], Hashable] | None = None) -> CVMSketch[T]:
        """Create a sketch from a `SketchConfig`."""
        return cls(capacity=config.capacity, seed=config.seed, key=key)

    @classmethod
    def from_error_rate(
        cls,
        epsilon: float,
        delta: float,
        stream_length: int,
        seed: int | None = None,
        key: Callable[[T], Hashable] | None = None,
    ) -> CVMSketch[T]:
        """Create a sketch sized for an (epsilon, delta) guarantee.

        Uses the capacity bound from the paper,
        ``ceil(12 / epsilon**2 * log2(8 * stream_length / delta))``, under
        which the estimate is within a factor ``1 +- epsilon`` of the true
        distinct count with probability at least ``1 - delta``.

        Args:
            epsilon: Relative error (e.g., 0.1 for 10%).
            delta: Failure probability (e.g., 0.01 for 99% confidence).
            stream_length: Upper bound on the number of items in the stream.
            seed: Random seed for reproducibility.
            key: Optional uniqueness key for the sample.

        Returns:
            A CVMSketch with the computed capacity.

        Raises:
            ValueError: If epsilon or delta are not in (0, 1), or
                stream_length < 1.
        """
        if not 0 < epsilon < 1:
            raise ValueError(f"epsilon must be in (0, 1), got {epsilon}")
        if not 0 < delta < 1:
            raise ValueError(f"delta must be in (0, 1), got {delta}")
        if stream_length < 1:
            raise ValueError(f"stream_length must be positive, got {stream_length}")

        capacity = math.ceil(12 / (epsilon * epsilon) * math.log2(8 * stream_length / delta))
        return cls(capacity=capacity, seed=seed, key=key)

    @property
    def capacity(self) -> int:
        """Maximum number of items retained in the sample."""
        return self._capacity

    @property
    def round(self) -> int:
        """Number of compactions performed so far."""
        return self._round

    @property
    def sample_size(self) -> int:
        """Number of items currently retained.

        This is not the distinct count once a compaction has happened; see
        count() for the estimate.
        """
        return len(self._sample)

    @property
    def source(self) -> RandomSource:
        """The random source coin flips are drawn from."""
        return self._source

    def insert(self, item: T) -> None:
        """Feed one stream element to the sketch.

        The item is kept with probability ``1 / 2**round`` and evicted
        otherwise, even if an earlier occurrence had been kept. If that
        fills the sample, it is halved and the round advances.

        A halving in which every item survives leaves the sample full. That
        sample is halved again at the start of the next insert, as a round
        of its own, so the round advances at most once per insert. If the
        sample is still full after that, a kept item that is not already
        retained is not added.

        Args:
            item: The item to insert. Must be hashable, or mappable to a
                hashable value by the sketch's key function.
        """
        self._total_count += 1
        key = item if self._key is None else self._key(item)

        compacted = False
        if len(self._sample) == self._capacity:
            self._compact()
            compacted = True

        if self._source.keep(self._round):
            if key not in self._sample and len(self._sample) < self._capacity:
                self._sample[key] = item
        else:
            self._sample.pop(key, None)

        if not compacted and len(self._sample) == self._capacity:
            self._compact()

    def _compact(self) -> None:
        """Keep each retained item with probability 1/2 and advance the round.

        One fair coin per retained item, in sample order.
        """
        survivors = {k: v for k, v in self._sample.items() if self._source.keep(1)}

        logger.debug(
            "Compaction: round %d -> %d, retained %d of %d",
            self._round,
            self._round + 1,
            len(survivors),
            self._capacity,
        )
        self._sample = survivors
        self._round += 1

    def add(self, item: T, count: int = 1) -> None:
        """Add an item to the sketch.

        Each occurrence is an independent insert and draws its own coin.

        Args:
            item: The item to add.
            count: Number of times to insert this item.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        for _ in range(count):
            self.insert(item)

    def count(self) -> int:
        """Estimate the number of distinct items seen so far.

        Returns:
            ``sample_size * 2**round``. Python integers do not overflow, so
            this is exact for any round.
        """
        return len(self._sample) << self._round

    def cardinality(self) -> int:
        """Estimate the number of distinct items (same as count())."""
        return self.count()

    def __len__(self) -> int:
        """Number of items currently in the sample."""
        return len(self._sample)

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        # Dict table + item references; items themselves are the caller's
        return sys.getsizeof(self._sample) + sys.getsizeof(self)

    @property
    def item_count(self) -> int:
        """Total count of items inserted (not distinct count)."""
        return self._total_count

    def __repr__(self) -> str:
        return (
            f"CVMSketch(capacity={self._capacity}, "
            f"round={self._round}, "
            f"sampled={len(self._sample)}, "
            f"count≈{self.count()})"
        )
