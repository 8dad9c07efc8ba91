from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import InvalidInput


def as_float_vector(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    """Convert ``values`` to a 1D float64 array; ``None`` entries become NaN."""

    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidInput(f"{name} must be a sequence of numbers.") from err
    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be one-dimensional, got shape {arr.shape}.")
    return arr


def assign_average_ranks(scores: Sequence[float] | np.ndarray) -> np.ndarray:
    """Average (1-based) ranks of ``scores`` with NaN treated as missing.

    Tied values share the mean of the ranks they jointly occupy. Missing
    values sort after every real value; since NaN never compares equal,
    each of them gets its own rank, in input order.

    Parameters
    ----------
    scores:
        One-dimensional sequence of numbers. ``None`` and NaN are missing.

    Returns
    -------
    numpy.ndarray
        float64 array parallel to ``scores``.

    Examples
    --------
    >>> assign_average_ranks([5, 5, 5]).tolist()
    [2.0, 2.0, 2.0]
    >>> assign_average_ranks([3, None, 1]).tolist()
    [2.0, 3.0, 1.0]
    >>> assign_average_ranks([0.4, 0.1, 0.4, 0.9]).tolist()
    [2.5, 1.0, 2.5, 4.0]
    """

    values = as_float_vector(scores, "scores")
    n = values.shape[0]
    ranks = np.zeros(n, dtype=np.float64)
    if n == 0:
        return ranks

    # numpy places NaN last; the stable kind keeps missing values in input order
    order = np.argsort(values, kind="stable")
    ordered = values[order]

    starts = np.concatenate(([0], np.flatnonzero(ordered[1:] != ordered[:-1]) + 1))
    lengths = np.diff(np.append(starts, n))
    ranks[order] = np.repeat(starts + 0.5 * (lengths + 1), lengths)
    return ranks


__all__ = ["assign_average_ranks", "as_float_vector"]
