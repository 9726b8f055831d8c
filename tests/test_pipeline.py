import pandas as pd
import pytest

from quick_union.pipeline import ConnectivityAnalyzer, ConnectivityConfig


def _analyzer(**overrides):
    return ConnectivityAnalyzer(ConnectivityConfig(verbose=False, use_tqdm=False, **overrides))


def _reference_pairs():
    return pd.DataFrame({"p": [4, 3, 6, 9, 2, 8], "q": [3, 8, 5, 4, 1, 9]})


def test_analyze_reports_components():
    result = _analyzer(size=10).analyze(_reference_pairs())

    stats = result.stats
    assert stats.total_elements == 10
    assert stats.pairs_processed == 6
    assert stats.merges == 5
    assert stats.redundant_pairs == 1
    assert stats.component_count == 5
    assert stats.largest_component == 4
    assert stats.singleton_count == 2

    groups = sorted(result.component_map.values())
    assert groups == [[0], [1, 2], [3, 4, 8, 9], [5, 6], [7]]
    assert result.structure.connected(8, 9)


def test_analyze_builds_one_row_per_element():
    df = _analyzer(size=10).analyze(_reference_pairs()).dataframe

    assert list(df.columns) == ["element", "component_id", "component_size"]
    assert df["element"].tolist() == list(range(10))
    by_element = df.set_index("element")
    assert by_element.loc[9, "component_id"] == by_element.loc[3, "component_id"]
    assert by_element.loc[9, "component_size"] == 4
    assert by_element.loc[7, "component_size"] == 1


def test_analyze_infers_size_from_pairs():
    result = _analyzer().analyze(pd.DataFrame({"p": ["0", "5"], "q": ["1", "2"]}))
    assert result.stats.total_elements == 6
    assert result.stats.component_count == 4


def test_analyze_rejects_size_smaller_than_data():
    with pytest.raises(ValueError, match="too small"):
        _analyzer(size=3).analyze(pd.DataFrame({"p": [0], "q": [7]}))


def test_analyze_handles_empty_input():
    result = _analyzer().analyze(pd.DataFrame({"p": [], "q": []}))
    assert result.stats.total_elements == 0
    assert result.stats.component_count == 0
    assert result.stats.largest_component == 0
    assert result.dataframe.empty


def test_analyze_uses_configured_columns():
    df = pd.DataFrame({"src": [0, 1], "dst": [1, 2]})
    result = _analyzer(left_column="src", right_column="dst").analyze(df)
    assert result.stats.component_count == 1


def test_analyze_saves_csv(tmp_path):
    output = tmp_path / "components.csv"
    _analyzer(size=10).analyze(_reference_pairs(), output)
    saved = pd.read_csv(output)
    assert len(saved) == 10
    assert saved["component_size"].sum() == 4 * 4 + 2 * (2 * 2) + 2 * 1


def test_analyze_rejects_unknown_output_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        _analyzer().analyze(pd.DataFrame({"p": [0], "q": [1]}), tmp_path / "out.json")


def test_verbose_run_prints_summary(capsys):
    ConnectivityAnalyzer(ConnectivityConfig(use_tqdm=False)).analyze(_reference_pairs())
    out = capsys.readouterr().out
    assert "Connected components: 5" in out
    assert "Root:" in out
