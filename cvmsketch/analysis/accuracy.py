"""Accuracy studies for the CVM sketch.

Runs seeded estimators over a stream and compares their estimates with the
exact distinct count, collecting the results in pandas DataFrames for
summary and plotting.

Example:
    from cvmsketch.analysis import accuracy_study, plot_accuracy, summarize

    words = corpus.split()
    frame = accuracy_study(words, capacities=[100, 1000, 8000], seeds=range(20))
    summary = summarize(frame)
    plot_accuracy(summary, "accuracy.png")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

import pandas as pd
from matplotlib.figure import Figure

from cvmsketch.sketching.cvm import CVMSketch

logger = logging.getLogger(__name__)

COLUMNS = ["capacity", "seed", "exact", "estimate", "round", "sample_size", "relative_error"]


@dataclass(frozen=True, slots=True)
class AccuracyTrial:
    """Outcome of one seeded estimator run over a stream.

    Attributes:
        capacity: Sketch capacity used.
        seed: Random seed used.
        exact: True number of distinct items in the stream.
        estimate: The sketch's count() at the end of the stream.
        round: The sketch's final round.
        sample_size: Items retained at the end of the stream.
    """

    capacity: int
    seed: int
    exact: int
    estimate: int
    round: int
    sample_size: int

    @property
    def relative_error(self) -> float:
        """``|estimate - exact| / exact``; 0.0 for an empty stream."""
        if self.exact == 0:
            return 0.0
        return abs(self.estimate - self.exact) / self.exact


def run_trial(
    items: Iterable[Hashable],
    capacity: int,
    seed: int,
    key: Callable[[Hashable], Hashable] | None = None,
) -> AccuracyTrial:
    """Feed a stream through one seeded sketch and record how it did.

    Args:
        items: The stream. Iterated once.
        capacity: Sketch capacity.
        seed: Seed for the sketch's random source.
        key: Optional uniqueness key, applied to both the sketch and the
            exact count.
    """
    cvm = CVMSketch(capacity=capacity, seed=seed, key=key)
    distinct: set[Hashable] = set()

    for item in items:
        cvm.insert(item)
        distinct.add(item if key is None else key(item))

    trial = AccuracyTrial(
        capacity=capacity,
        seed=seed,
        exact=len(distinct),
        estimate=cvm.count(),
        round=cvm.round,
        sample_size=cvm.sample_size,
    )
    logger.debug(
        "Trial capacity=%d seed=%d: exact=%d estimate=%d error=%.2f%%",
        capacity,
        seed,
        trial.exact,
        trial.estimate,
        trial.relative_error * 100,
    )
    return trial


def accuracy_study(
    items: Sequence[Hashable],
    capacities: Iterable[int],
    seeds: Iterable[int],
    key: Callable[[Hashable], Hashable] | None = None,
) -> pd.DataFrame:
    """Run one trial per (capacity, seed) pair over the same stream.

    Args:
        items: The stream. Iterated once per trial.
        capacities: Sketch capacities to try.
        seeds: Seeds to try for each capacity.
        key: Optional uniqueness key, passed to every trial.

    Returns:
        DataFrame with one row per trial and columns
        capacity, seed, exact, estimate, round, sample_size, relative_error.
    """
    seeds = list(seeds)
    rows = []
    for capacity in capacities:
        for seed in seeds:
            trial = run_trial(items, capacity, seed, key=key)
            rows.append({**asdict(trial), "relative_error": trial.relative_error})

    logger.info("Accuracy study finished: %d trials over %d items", len(rows), len(items))
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(frame: pd.DataFrame) -> pd.DataFrame:
    """Aggregate an accuracy study per capacity.

    Returns:
        DataFrame indexed by capacity with columns
        mean_error, max_error, mean_estimate, exact, trials.
    """
    grouped = frame.groupby("capacity")
    return pd.DataFrame(
        {
            "mean_error": grouped["relative_error"].mean(),
            "max_error": grouped["relative_error"].max(),
            "mean_estimate": grouped["estimate"].mean(),
            "exact": grouped["exact"].first(),
            "trials": grouped.size(),
        }
    )


def plot_accuracy(summary: pd.DataFrame, path: str | Path) -> Path:
    """Plot mean and max relative error against capacity.

    Args:
        summary: Output of summarize().
        path: Where to save the figure. Parent directories are created.

    Returns:
        The path the figure was written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Never touches pyplot or the global backend
    fig = Figure(figsize=(8, 5))
    ax = fig.subplots()
    ax.plot(summary.index, summary["mean_error"] * 100, marker="o", label="Mean error")
    ax.plot(summary.index, summary["max_error"] * 100, marker="x", linestyle="--", label="Max error")
    ax.set_xscale("log")
    ax.set_xlabel("Capacity")
    ax.set_ylabel("Relative error (%)")
    ax.set_title("CVM estimate error vs capacity")
    ax.legend()

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    return path
