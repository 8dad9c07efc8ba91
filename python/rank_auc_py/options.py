from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Dict

_POLICIES = ("raise", "nan")

_ENV_VARS = {
    "on_empty": "RANK_AUC_ON_EMPTY",
    "on_degenerate": "RANK_AUC_ON_DEGENERATE",
    "positive_label": "RANK_AUC_POSITIVE_LABEL",
}


@dataclass(frozen=True, slots=True)
class AucOptions:
    """How compute_auc treats empty and single-class inputs."""

    on_empty: str = "raise"
    on_degenerate: str = "raise"
    positive_label: float = 1.0

    def __post_init__(self) -> None:
        for name in ("on_empty", "on_degenerate"):
            value = getattr(self, name)
            if value not in _POLICIES:
                raise ValueError(f"Unsupported {name} policy '{value}', expected one of {_POLICIES}.")
        object.__setattr__(self, "positive_label", float(self.positive_label))

    @classmethod
    def from_env(cls, **overrides: Any) -> "AucOptions":
        """Build options from keyword overrides, then RANK_AUC_* variables, then defaults."""

        values: Dict[str, Any] = {}
        for field in fields(cls):
            if overrides.get(field.name) is not None:
                values[field.name] = overrides[field.name]
                continue
            env_value = os.environ.get(_ENV_VARS[field.name])
            if env_value:
                values[field.name] = env_value.strip().lower() if field.type == "str" else env_value
        unknown = set(overrides) - {field.name for field in fields(cls)}
        if unknown:
            raise TypeError(f"Unknown option(s): {', '.join(sorted(unknown))}.")
        return cls(**values)


__all__ = ["AucOptions"]
