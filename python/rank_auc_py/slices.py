from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidInput
from .metrics import compute_auc
from .options import AucOptions
from .ranking import as_float_vector

SliceAuc = List[Tuple[Tuple[float, float], float]]


def _resolve_edges(time: np.ndarray, bins: int, edges: Sequence[float] | np.ndarray | None) -> np.ndarray:
    if edges is None:
        if bins < 1:
            raise InvalidInput("bins must be a positive integer.")
        finite = time[np.isfinite(time)]
        if finite.size == 0:
            raise InvalidInput("time has no finite values to bin.")
        return np.linspace(finite.min(), finite.max(), bins + 1)

    edges = np.asarray(edges, dtype=np.float64)
    if edges.ndim != 1 or edges.size < 2:
        raise InvalidInput("edges must provide at least two sorted values.")
    if not np.all(np.diff(edges) > 0):
        raise InvalidInput("edges must be strictly increasing.")
    return edges


def sliced_auc(
    labels: Sequence[float] | np.ndarray,
    predictions: Sequence[float] | np.ndarray,
    time: Sequence[float] | np.ndarray,
    *,
    bins: int = 10,
    edges: Sequence[float] | np.ndarray | None = None,
    min_count: int = 1,
    options: AucOptions | None = None,
) -> SliceAuc:
    """AUC computed separately within bins of ``time``.

    Bins are ``[left, right)`` except the last one, which also holds its
    right edge. Bins with fewer than ``min_count`` samples or a single class
    report NaN.
    """

    y_true = as_float_vector(labels, "labels")
    y_score = as_float_vector(predictions, "predictions")
    t = as_float_vector(time, "time")
    if not (y_true.shape[0] == y_score.shape[0] == t.shape[0]):
        raise InvalidInput(
            "labels, predictions and time must have equal length, "
            f"got {y_true.shape[0]}, {y_score.shape[0]} and {t.shape[0]}."
        )

    opts = replace(options or AucOptions(), on_empty="nan", on_degenerate="nan")
    bin_edges = _resolve_edges(t, bins, edges)
    last = len(bin_edges) - 2
    results: SliceAuc = []

    for idx, (left, right) in enumerate(zip(bin_edges[:-1], bin_edges[1:])):
        upper = (t <= right) if idx == last else (t < right)
        mask = (t >= left) & upper
        if mask.sum() < min_count:
            auc = float("nan")
        else:
            auc = compute_auc(y_true[mask], y_score[mask], opts)
        results.append(((float(left), float(right)), auc))
    return results


__all__ = ["SliceAuc", "sliced_auc"]
