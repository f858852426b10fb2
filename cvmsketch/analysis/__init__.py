"""Accuracy analysis for distinct count sketches."""

from cvmsketch.analysis.accuracy import (
    AccuracyTrial,
    accuracy_study,
    plot_accuracy,
    run_trial,
    summarize,
)

__all__ = [
    "AccuracyTrial",
    "accuracy_study",
    "plot_accuracy",
    "run_trial",
    "summarize",
]
