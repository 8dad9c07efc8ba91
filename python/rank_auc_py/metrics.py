from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import DegenerateLabels, InvalidInput
from .options import AucOptions
from .ranking import as_float_vector, assign_average_ranks


def compute_auc(
    labels: Sequence[float] | np.ndarray,
    predictions: Sequence[float] | np.ndarray,
    options: AucOptions | None = None,
) -> float:
    """ROC AUC from the rank sum of the positive samples.

    Ties between a positive and a negative prediction count one half.
    Missing predictions rank above every real score.

    >>> compute_auc([0, 0, 1, 1], [0.1, 0.2, 0.8, 0.9])
    1.0
    >>> compute_auc([0, 1], [0.5, 0.5])
    0.5
    """

    opts = options or AucOptions()
    y_true = as_float_vector(labels, "labels")
    y_score = as_float_vector(predictions, "predictions")
    if y_true.shape[0] != y_score.shape[0]:
        raise InvalidInput(
            f"labels and predictions must have equal length, got {y_true.shape[0]} and {y_score.shape[0]}."
        )
    if np.isnan(y_true).any():
        raise InvalidInput("labels must not contain missing values.")

    n = y_true.shape[0]
    if n == 0:
        if opts.on_empty == "nan":
            return float("nan")
        raise InvalidInput("Cannot compute AUC of empty input.")

    positive = y_true == opts.positive_label
    n_pos = float(positive.sum())
    n_neg = float(n - n_pos)
    if n_pos == 0.0 or n_neg == 0.0:
        if opts.on_degenerate == "nan":
            return float("nan")
        raise DegenerateLabels(
            f"AUC needs both classes, got {int(n_pos)} positive and {int(n_neg)} negative labels."
        )

    ranks = assign_average_ranks(y_score)
    rank_sum_pos = ranks[positive].sum()
    auc = (rank_sum_pos - n_pos * (n_pos + 1.0) / 2.0) / (n_pos * n_neg)
    return float(auc)


__all__ = ["compute_auc"]
