import json
import math

import numpy as np
import pytest

from rank_auc_py import DegenerateLabels, build_report, write_report
from rank_auc_py.report import format_interval, report_payload, save_slice_figure, write_markdown_report


def test_build_report_without_time():
    report = build_report([0, 0, 1, 1], [0.1, 0.5, 0.5, np.nan])
    assert report.overall_auc == 0.875
    assert report.slice_auc == []
    assert report.summary == {
        "n_samples": 4,
        "n_positive": 2,
        "n_negative": 2,
        "n_missing_scores": 1,
        "n_tied_scores": 2,
    }


def test_build_report_propagates_degenerate_labels():
    with pytest.raises(DegenerateLabels):
        build_report([1, 1], [0.1, 0.2])


def test_payload_encodes_nan_as_null():
    report = build_report([0, 1, 1, 0], [0.1, 0.9, 0.8, 0.2], [0.1, 0.2, 0.9, 0.9], edges=[0.0, 0.5, 1.0])
    payload = report_payload(report)
    assert payload["results"]["overall_auc"] == 1.0
    assert payload["results"]["slice_auc"][0] == [[0.0, 0.5], 1.0]
    assert payload["results"]["slice_auc"][1] == [[0.5, 1.0], 1.0]
    assert payload["options"]["on_degenerate"] == "raise"

    single_class = build_report([0, 1, 1, 1], [0.1, 0.9, 0.8, 0.2], [0.1, 0.2, 0.9, 0.9], edges=[0.0, 0.5, 1.0])
    assert math.isnan(single_class.slice_auc[1][1])
    assert report_payload(single_class)["results"]["slice_auc"][1][1] is None


def test_markdown_report(tmp_path):
    report = build_report([0, 1, 1, 0], [0.1, 0.9, 0.8, 0.2], [0.1, 0.2, 0.9, 0.9], edges=[0.0, 0.5, 1.0], min_count=3)
    path = tmp_path / "report.md"
    write_markdown_report(report, path)
    text = path.read_text(encoding="utf-8")
    assert "**Overall ROC AUC**: 1.0000" in text
    assert "| [0.000, 0.500) | NaN |" in text
    assert "| [0.500, 1.000] | NaN |" in text


def test_format_interval_closes_only_the_last_bin():
    assert format_interval((0.0, 0.5)) == "[0.000, 0.500)"
    assert format_interval((0.5, 1.0), closed=True) == "[0.500, 1.000]"


def test_slice_figure_with_undefined_bins(tmp_path):
    report = build_report([0, 1, 1, 0], [0.1, 0.9, 0.8, 0.2], [0.1, 0.2, 0.9, 0.9], edges=[0.0, 0.5, 1.0], min_count=3)
    path = tmp_path / "slices.png"
    save_slice_figure(report, path)
    assert path.stat().st_size > 0


def test_write_report_creates_all_artifacts(tmp_path, drifting_dataset):
    ds = drifting_dataset
    report = build_report(ds.labels, ds.scores, ds.time, bins=5, min_count=20)
    written = write_report(report, tmp_path / "out")
    assert [p.name for p in written] == ["report.md", "summary.json", "roc_auc_time.png"]
    for path in written:
        assert path.exists() and path.stat().st_size > 0

    summary = json.loads((tmp_path / "out" / "summary.json").read_text(encoding="utf-8"))
    assert summary["summary"]["n_samples"] == 4000
    assert len(summary["results"]["slice_auc"]) == 5


def test_write_report_without_slices_skips_figure(tmp_path):
    report = build_report([0, 1], [0.2, 0.1])
    written = write_report(report, tmp_path)
    assert [p.name for p in written] == ["report.md", "summary.json"]
