"""
Shared pytest fixtures for cvmsketch tests.
"""

import logging
import random
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(scope="session")
def word_corpus() -> list[str]:
    """
    A text-like stream of 40,000 words over a vocabulary of 7,800 words.

    Word frequencies are skewed (a few words are very common) and every
    vocabulary word occurs at least once, so the exact distinct count is 7800.
    """
    rng = random.Random(0x123456789)
    vocabulary = [f"word{i}" for i in range(7800)]
    weights = [1.0 / (rank + 1) for rank in range(len(vocabulary))]

    words = list(vocabulary)
    words.extend(rng.choices(vocabulary, weights=weights, k=32_200))
    rng.shuffle(words)
    return words


def gen_ints(n: int, seed: int = 0x1234) -> list[int]:
    """n integers drawn uniformly from [0, n // 2)."""
    rng = random.Random(seed)
    return [rng.randrange(n // 2) for _ in range(n)]


@pytest.fixture(scope="session")
def int_stream_10k() -> list[int]:
    return gen_ints(10_000)


@pytest.fixture(scope="session")
def int_stream_100k() -> list[int]:
    return gen_ints(100_000)


@pytest.fixture(autouse=True)
def reset_cvmsketch_logging():
    """Reset logging state before each test.

    Ensures tests start with a clean logging configuration:
    - Removes all handlers except NullHandler
    - Resets level to NOTSET (inherit from parent)
    """
    logger = logging.getLogger("cvmsketch")

    def reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    reset()
    yield
    reset()
