from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(slots=True)
class ScoredDataset:
    """Labels, classifier scores and an ordering column for slicing."""

    labels: np.ndarray
    scores: np.ndarray
    time: np.ndarray


def generate_scored_dataset(
    n_samples: int,
    *,
    alpha: float = 0.3,
    separation: float = 1.5,
    drift: float = 0.0,
    decimals: int | None = None,
    missing_rate: float = 0.0,
    seed: int | None = 42,
) -> ScoredDataset:
    """Draw a binary dataset with Gaussian scores shifted for positives.

    The shift is ``separation * (1 - 2 * drift * time)``, so ``drift=1``
    makes the scores flip polarity halfway through time. ``decimals`` rounds
    the scores to create ties and ``missing_rate`` blanks scores out with NaN.
    """

    if n_samples <= 0:
        raise ValueError("n_samples must be positive.")
    if not (0.0 < alpha < 1.0):
        raise ValueError("alpha must lie in (0, 1).")
    if not (0.0 <= missing_rate < 1.0):
        raise ValueError("missing_rate must lie in [0, 1).")

    rng = np.random.default_rng(seed)

    time = rng.random(n_samples)
    labels = (rng.random(n_samples) < alpha).astype(np.float64)

    lift = separation * (1.0 - 2.0 * drift * time)
    scores = rng.standard_normal(n_samples) + lift * labels
    if decimals is not None:
        scores = np.round(scores, decimals)
    if missing_rate > 0.0:
        scores[rng.random(n_samples) < missing_rate] = np.nan

    return ScoredDataset(
        labels=np.ascontiguousarray(labels, dtype=np.float64),
        scores=np.ascontiguousarray(scores, dtype=np.float64),
        time=np.ascontiguousarray(time, dtype=np.float64),
    )


__all__ = ["ScoredDataset", "generate_scored_dataset"]
