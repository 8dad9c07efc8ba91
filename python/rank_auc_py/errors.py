from __future__ import annotations


class RankAucError(ValueError):
    """Base class for input errors raised by rank_auc_py."""


class InvalidInput(RankAucError):
    """Inputs have the wrong shape, length, type or contain missing labels."""


class DegenerateLabels(RankAucError):
    """Labels contain only one class, so AUC is undefined."""


__all__ = ["RankAucError", "InvalidInput", "DegenerateLabels"]
