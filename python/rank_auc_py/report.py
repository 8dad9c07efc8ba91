from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
from matplotlib import pyplot as plt

from .metrics import compute_auc
from .options import AucOptions
from .ranking import as_float_vector
from .slices import SliceAuc, sliced_auc


@dataclass
class AucReport:
    options: AucOptions
    summary: Dict[str, Any]
    overall_auc: float
    slice_auc: SliceAuc = field(default_factory=list)


def _nan_to_none(value: float) -> float | None:
    return None if math.isnan(value) else value


def format_interval(interval: Tuple[float, float], *, closed: bool = False) -> str:
    """Render a slice as ``[start, end)``, or ``[start, end]`` for the closed last bin."""

    start, end = interval
    return f"[{start:.3f}, {end:.3f}" + ("]" if closed else ")")


def build_report(
    labels: Sequence[float] | np.ndarray,
    predictions: Sequence[float] | np.ndarray,
    time: Sequence[float] | np.ndarray | None = None,
    *,
    bins: int = 10,
    edges: Sequence[float] | np.ndarray | None = None,
    min_count: int = 1,
    options: AucOptions | None = None,
) -> AucReport:
    """Overall AUC plus, when ``time`` is given, AUC per time slice."""

    opts = options or AucOptions()
    y_true = as_float_vector(labels, "labels")
    y_score = as_float_vector(predictions, "predictions")

    overall_auc = compute_auc(y_true, y_score, opts)

    slice_auc: SliceAuc = []
    if time is not None:
        slice_auc = sliced_auc(
            y_true, y_score, time, bins=bins, edges=edges, min_count=min_count, options=opts
        )

    finite = y_score[~np.isnan(y_score)]
    _, counts = np.unique(finite, return_counts=True)
    n_pos = int((y_true == opts.positive_label).sum())
    summary = {
        "n_samples": int(y_true.shape[0]),
        "n_positive": n_pos,
        "n_negative": int(y_true.shape[0]) - n_pos,
        "n_missing_scores": int(y_score.shape[0] - finite.shape[0]),
        "n_tied_scores": int(counts[counts > 1].sum()),
    }
    return AucReport(options=opts, summary=summary, overall_auc=overall_auc, slice_auc=slice_auc)


def report_payload(report: AucReport) -> Dict[str, Any]:
    return {
        "options": asdict(report.options),
        "summary": report.summary,
        "results": {
            "overall_auc": _nan_to_none(report.overall_auc),
            "slice_auc": [[list(interval), _nan_to_none(value)] for interval, value in report.slice_auc],
        },
    }


def write_summary_json(report: AucReport, output_path: Path) -> None:
    output_path = Path(output_path)
    output_path.write_text(json.dumps(report_payload(report), indent=2), encoding="utf-8")


def write_markdown_report(report: AucReport, output_path: Path) -> None:
    output_path = Path(output_path)
    with output_path.open("w", encoding="utf-8") as f:
        f.write("# ROC AUC Report\n\n")
        f.write("## Input Summary\n")
        f.write("```json\n")
        json.dump(report.summary, f, indent=2)
        f.write("\n```\n\n")

        f.write("## Options\n")
        f.write("```json\n")
        json.dump(asdict(report.options), f, indent=2)
        f.write("\n```\n\n")

        overall = "NaN" if math.isnan(report.overall_auc) else f"{report.overall_auc:.4f}"
        f.write(f"**Overall ROC AUC**: {overall}\n\n")

        if report.slice_auc:
            f.write("### ROC AUC by time interval\n")
            f.write("| Time interval | Value |\n")
            f.write("| --- | --- |\n")
            last = len(report.slice_auc) - 1
            for idx, (interval, value) in enumerate(report.slice_auc):
                disp = "NaN" if math.isnan(value) else f"{value:.4f}"
                f.write(f"| {format_interval(interval, closed=idx == last)} | {disp} |\n")
            f.write("\n")


def plot_slice_auc(ax: plt.Axes, slice_auc: List[Tuple[Tuple[float, float], float]]) -> None:
    """Draw each slice's AUC as a segment spanning its time interval.

    Slices without an AUC are marked along the bottom axis.
    """

    lefts = np.array([interval[0] for interval, _ in slice_auc], dtype=float)
    rights = np.array([interval[1] for interval, _ in slice_auc], dtype=float)
    values = np.array([val for _, val in slice_auc], dtype=float)
    defined = ~np.isnan(values)

    ax.hlines(values[defined], lefts[defined], rights[defined], linewidth=2)
    ax.plot(0.5 * (lefts + rights)[defined], values[defined], "o", color="C0")
    if (~defined).any():
        ax.plot(0.5 * (lefts + rights)[~defined], np.zeros(int((~defined).sum())), "x", color="C3",
                label="undefined AUC")
        ax.legend(loc="upper right")
    ax.axhline(0.5, color="gray", linestyle="--", linewidth=1)
    ax.set_xlim(lefts.min(), rights.max())
    ax.set_xlabel("time")
    ax.set_ylabel("ROC AUC")
    ax.set_ylim(0.0, 1.0)
    ax.set_title(f"ROC AUC across {len(slice_auc)} time bins")
    ax.grid(True, alpha=0.3)


def save_slice_figure(report: AucReport, output_path: Path) -> None:
    if not report.slice_auc:
        raise ValueError("Report has no time slices to plot.")
    fig, ax = plt.subplots(figsize=(10, 5))
    plot_slice_auc(ax, report.slice_auc)
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def write_report(report: AucReport, base_path: Path) -> List[Path]:
    """Write report.md, summary.json and, with slices, roc_auc_time.png."""

    base_path = Path(base_path)
    base_path.mkdir(parents=True, exist_ok=True)

    written = [base_path / "report.md", base_path / "summary.json"]
    write_markdown_report(report, written[0])
    write_summary_json(report, written[1])
    if report.slice_auc:
        written.append(base_path / "roc_auc_time.png")
        save_slice_figure(report, written[-1])
    return written


__all__ = [
    "AucReport",
    "format_interval",
    "build_report",
    "report_payload",
    "write_summary_json",
    "write_markdown_report",
    "plot_slice_auc",
    "save_slice_figure",
    "write_report",
]
