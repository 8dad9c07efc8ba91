from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from .errors import InvalidInput, RankAucError
from .options import AucOptions
from .ranking import assign_average_ranks
from .report import build_report, format_interval, write_report


def _read_columns(path: Path, columns: Sequence[str]) -> pd.DataFrame:
    try:
        frame = pd.read_csv(path)
    except (OSError, pd.errors.EmptyDataError) as err:
        raise InvalidInput(f"Cannot read {path}: {err}") from err
    missing = [col for col in columns if col not in frame.columns]
    if missing:
        raise InvalidInput(f"Column(s) not found in {path}: {', '.join(missing)}.")
    return frame


def _run_rank(args: argparse.Namespace) -> int:
    frame = _read_columns(args.input, [args.scores])
    frame[args.rank_column] = assign_average_ranks(frame[args.scores].to_numpy())
    if args.output is None:
        frame.to_csv(sys.stdout, index=False)
    else:
        frame.to_csv(args.output, index=False)
        print(f"Wrote {len(frame)} ranks to {args.output}")
    return 0


def _run_auc(args: argparse.Namespace) -> int:
    columns = [args.labels, args.scores] + ([args.time] if args.time else [])
    frame = _read_columns(args.input, columns)
    try:
        options = AucOptions.from_env(
            on_empty=args.on_empty,
            on_degenerate=args.on_degenerate,
            positive_label=args.positive_label,
        )
    except ValueError as err:
        raise InvalidInput(f"Invalid options: {err}") from err

    report = build_report(
        frame[args.labels].to_numpy(),
        frame[args.scores].to_numpy(),
        frame[args.time].to_numpy() if args.time else None,
        bins=args.bins,
        min_count=args.min_count,
        options=options,
    )

    print(f"ROC AUC: {report.overall_auc:.6f}")
    last = len(report.slice_auc) - 1
    for idx, (interval, value) in enumerate(report.slice_auc):
        print(f"  t in {format_interval(interval, closed=idx == last)}: AUC = {value:.4f}")

    if args.report_dir is not None:
        for path in write_report(report, args.report_dir):
            print(f"Wrote {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rank-auc", description="Average ranks and rank-sum ROC AUC for CSV data.")
    sub = p.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Append average ranks of a score column.")
    rank.add_argument("input", type=Path, help="Input CSV file.")
    rank.add_argument("--scores", required=True, help="Score column to rank.")
    rank.add_argument("--rank-column", default="rank", help="Name of the appended column.")
    rank.add_argument("--output", type=Path, default=None, help="Output CSV (default: stdout).")
    rank.set_defaults(func=_run_rank)

    auc = sub.add_parser("auc", help="Compute ROC AUC of a score column against a label column.")
    auc.add_argument("input", type=Path, help="Input CSV file.")
    auc.add_argument("--labels", required=True, help="Label column (positive label counts as positive).")
    auc.add_argument("--scores", required=True, help="Score column; empty cells are missing.")
    auc.add_argument("--time", default=None, help="Optional column to slice AUC by.")
    auc.add_argument("--bins", type=int, default=10, help="Number of equal-width time bins.")
    auc.add_argument("--min-count", type=int, default=1, help="Minimum samples per time bin.")
    auc.add_argument("--positive-label", type=float, default=None, help="Label value treated as positive.")
    auc.add_argument("--on-empty", choices=("raise", "nan"), default=None, help="Empty input policy.")
    auc.add_argument("--on-degenerate", choices=("raise", "nan"), default=None, help="Single-class policy.")
    auc.add_argument("--report-dir", type=Path, default=None, help="Write report.md/summary.json/figure here.")
    auc.set_defaults(func=_run_auc)
    return p


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except RankAucError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
