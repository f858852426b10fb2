"""Integration tests comparing CVM estimates to exact distinct counts.

These tests run accuracy studies over a word corpus and an integer stream,
check the estimates against exact counts, and save the study tables and
plots to test_output/ for inspection.
"""

from pathlib import Path

from cvmsketch.analysis import accuracy_study, plot_accuracy, summarize


class TestWordCorpusAccuracy:
    """Accuracy over a text-like stream with a 7800 word vocabulary."""

    def test_error_by_capacity(self, word_corpus, test_output_dir: Path):
        """Error stays within per-capacity bounds and falls as capacity grows."""
        frame = accuracy_study(word_corpus, capacities=[100, 1000, 8000], seeds=range(10))
        summary = summarize(frame)

        frame.to_csv(test_output_dir / "trials.csv", index=False)
        summary.to_csv(test_output_dir / "summary.csv")
        plot_accuracy(summary, test_output_dir / "accuracy.png")

        assert summary.loc[100, "mean_error"] < 0.2
        assert summary.loc[1000, "mean_error"] < 0.08
        # Whole vocabulary fits in one round
        assert summary.loc[8000, "max_error"] == 0.0
        assert summary.loc[1000, "mean_error"] < summary.loc[100, "mean_error"]


class TestIntegerStreamAccuracy:
    """Accuracy over uniformly drawn integers."""

    def test_int_100k_capacity_1k(self, int_stream_100k, test_output_dir: Path):
        """Capacity 1000 tracks ~43k distinct integers within 15%."""
        frame = accuracy_study(int_stream_100k, capacities=[1000], seeds=range(3))
        frame.to_csv(test_output_dir / "trials.csv", index=False)

        assert frame["relative_error"].mean() < 0.15
        assert (frame["round"] > 0).all()
        assert (frame["sample_size"] <= 1000).all()
