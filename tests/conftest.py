"""Shared fixtures."""

import matplotlib
import pytest

matplotlib.use("Agg")

from rank_auc_py import generate_scored_dataset  # noqa: E402


@pytest.fixture
def drifting_dataset():
    """A dataset whose score polarity flips halfway through time."""

    return generate_scored_dataset(4000, alpha=0.4, separation=3.0, drift=1.0, seed=7)
