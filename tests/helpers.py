"""Test helper utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def _manual_auc(labels: Iterable[float], scores: Iterable[float]) -> float | None:
    """Compute AUC via exhaustive pair counting."""
    pairs_in = list(zip(labels, scores))
    true_list = [s for y, s in pairs_in if y == 1]
    false_list = [s for y, s in pairs_in if y != 1]
    if not true_list or not false_list:
        return None
    pairs = len(true_list) * len(false_list)
    score = 0.0
    for t in true_list:
        for f in false_list:
            if t > f:
                score += 1.0
            elif t == f:
                score += 0.5
    return score / pairs
