"""cvmsketch: bounded-memory distinct counting with the CVM algorithm.

Example:
    from cvmsketch import CVMSketch

    cvm = CVMSketch[str](capacity=1000, seed=42)
    for word in words:
        cvm.insert(word)
    print(cvm.count())
"""

import logging

from cvmsketch.config import SketchConfig
from cvmsketch.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from cvmsketch.sketching import (
    CardinalitySketch,
    CVMSketch,
    InvalidCapacityError,
    RandomSource,
    SeededRandomSource,
    Sketch,
    SketchError,
    SystemRandomSource,
)

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CVMSketch",
    "CardinalitySketch",
    "InvalidCapacityError",
    "RandomSource",
    "SeededRandomSource",
    "Sketch",
    "SketchConfig",
    "SketchError",
    "SystemRandomSource",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
