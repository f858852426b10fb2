"""Streaming/sketching algorithms for approximate statistics.

This module provides space-efficient algorithms for computing approximate
statistics over data streams. All of them share common properties:
- Bounded memory usage (configurable)
- Single-pass processing (add items one at a time)
- Reproducible (optional seed or injected random source)

Quick Reference:
    CVMSketch: Cardinality (distinct count) estimation by bounded sampling
    SeededRandomSource: Reproducible coin flips for randomized sketches

Example:
    from cvmsketch.sketching import CVMSketch

    # Count unique visitors with at most 1000 ids in memory
    cvm = CVMSketch[str](capacity=1000, seed=42)
    for visitor_id in visitors:
        cvm.insert(visitor_id)
    print(f"~{cvm.count()} unique visitors")
"""

# Base protocols
from cvmsketch.sketching.base import CardinalitySketch, Sketch

# Cardinality estimation
from cvmsketch.sketching.cvm import CVMSketch

# Errors
from cvmsketch.sketching.errors import InvalidCapacityError, SketchError

# Randomness
from cvmsketch.sketching.randomness import RandomSource, SeededRandomSource, SystemRandomSource

__all__ = [
    # Cardinality estimation
    "CVMSketch",
    "CardinalitySketch",
    # Errors
    "InvalidCapacityError",
    # Randomness
    "RandomSource",
    "SeededRandomSource",
    # Protocols
    "Sketch",
    "SketchError",
    "SystemRandomSource",
]
