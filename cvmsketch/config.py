"""Sketch configuration.

`SketchConfig` bundles the construction parameters of a CVM sketch so they
can be loaded once (typically from the environment) and handed to
`CVMSketch.from_config`.

Environment variables (with the default ``CVM_`` prefix):
    CVM_CAPACITY: Sample capacity (required, integer >= 1)
    CVM_SEED: Random seed (optional integer)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from cvmsketch.sketching.errors import InvalidCapacityError

__all__ = ["SketchConfig"]

DEFAULT_ENV_PREFIX = "CVM_"


@dataclass(frozen=True, slots=True)
class SketchConfig:
    """Construction parameters for a CVM sketch.

    Attributes:
        capacity: Maximum number of items the sketch retains.
        seed: Seed for the sketch's random source; None for OS entropy.
    """

    capacity: int
    seed: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            raise InvalidCapacityError(self.capacity)

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> SketchConfig:
        """Load a config from environment variables.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read instead of os.environ.

        Raises:
            ValueError: If the capacity variable is missing or a value is
                not an integer.
            InvalidCapacityError: If the capacity is below 1.
        """
        env = os.environ if environ is None else environ

        capacity_var = f"{prefix}CAPACITY"
        seed_var = f"{prefix}SEED"

        raw_capacity = env.get(capacity_var, "").strip()
        if not raw_capacity:
            raise ValueError(f"{capacity_var} is not set")

        raw_seed = env.get(seed_var, "").strip()
        return cls(
            capacity=_parse_int(capacity_var, raw_capacity),
            seed=_parse_int(seed_var, raw_seed) if raw_seed else None,
        )


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
