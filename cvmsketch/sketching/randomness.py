"""Random sources for randomized sketches.

A sketch that flips coins takes its coins from an injected `RandomSource`
rather than the global `random` module, so a run can be replayed exactly
from a seed and tests can substitute scripted sources.

The only primitive a source has to offer is `keep(exponent)`: a Bernoulli
trial that succeeds with probability ``1 / 2**exponent``. The sources in this
module implement it by drawing ``exponent`` uniform random bits and reporting
whether they are all zero. That is integer-only arithmetic, so the
probability is exact at every exponent; no float ratio is ever formed.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the coin flips a randomized sketch consumes."""

    def keep(self, exponent: int) -> bool:
        """Bernoulli trial with success probability ``1 / 2**exponent``.

        Args:
            exponent: Non-negative power of two in the denominator. An
                exponent of 0 always succeeds.

        Returns:
            True if the trial succeeded.
        """
        ...


class SeededRandomSource:
    """`RandomSource` backed by a `random.Random` instance.

    Args:
        seed: Seed for a private `random.Random`. None draws the seed from
            OS entropy.
        rng: An existing generator to draw bits from instead. Anything with a
            ``getrandbits`` method works, e.g. `random.SystemRandom`.

    Example:
        source = SeededRandomSource(seed=42)
        source.keep(0)  # always True
        source.keep(3)  # True one time in eight
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def seed(self) -> int | None:
        """Seed the private generator was created with, if any."""
        return self._seed

    def keep(self, exponent: int) -> bool:
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        if exponent == 0:
            return True
        return self._rng.getrandbits(exponent) == 0

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed!r})"


class SystemRandomSource(SeededRandomSource):
    """`RandomSource` drawing from the operating system's entropy pool.

    Not reproducible; intended for production estimators where nobody needs
    to replay a run.
    """

    def __init__(self):
        super().__init__(rng=random.SystemRandom())

    def __repr__(self) -> str:
        return "SystemRandomSource()"
