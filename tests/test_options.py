import pytest

from rank_auc_py import AucOptions


def test_defaults():
    opts = AucOptions()
    assert opts.on_empty == "raise"
    assert opts.on_degenerate == "raise"
    assert opts.positive_label == 1.0


def test_rejects_unknown_policy():
    with pytest.raises(ValueError, match="on_degenerate"):
        AucOptions(on_degenerate="zero")


def test_positive_label_is_coerced_to_float():
    assert AucOptions(positive_label="2").positive_label == 2.0


def test_options_are_frozen():
    with pytest.raises(AttributeError):
        AucOptions().on_empty = "nan"


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv("RANK_AUC_ON_EMPTY", "NaN")
    monkeypatch.setenv("RANK_AUC_ON_DEGENERATE", "nan")
    monkeypatch.setenv("RANK_AUC_POSITIVE_LABEL", "0")
    opts = AucOptions.from_env()
    assert opts == AucOptions(on_empty="nan", on_degenerate="nan", positive_label=0.0)


def test_from_env_overrides_win(monkeypatch):
    monkeypatch.setenv("RANK_AUC_ON_DEGENERATE", "nan")
    opts = AucOptions.from_env(on_degenerate="raise", on_empty=None)
    assert opts.on_degenerate == "raise"
    assert opts.on_empty == "raise"


def test_from_env_defaults_without_environment(monkeypatch):
    for name in ("RANK_AUC_ON_EMPTY", "RANK_AUC_ON_DEGENERATE", "RANK_AUC_POSITIVE_LABEL"):
        monkeypatch.delenv(name, raising=False)
    assert AucOptions.from_env() == AucOptions()


def test_from_env_rejects_unknown_override():
    with pytest.raises(TypeError):
        AucOptions.from_env(weights=[1.0])
