import pandas as pd

from union_find.__main__ import main
from union_find.pipeline import ComponentLabelerConfig
from union_find.runner import label_file


def _write_edges(path, **columns):
    pd.DataFrame(columns).to_csv(path, index=False)
    return path


def test_label_file_round_trip(tmp_path):
    source = _write_edges(tmp_path / "edges.csv", source=[0, 2], target=[1, 3])
    output = tmp_path / "labels.csv"
    result = label_file(source, output, ComponentLabelerConfig(verbose=False, use_tqdm=False))
    assert result is not None
    assert result.stats.component_count == 2
    assert len(pd.read_csv(output)) == 4


def test_label_file_missing_input(tmp_path, capsys):
    assert label_file(tmp_path / "missing.csv", tmp_path / "out.csv") is None
    assert "Input file not found" in capsys.readouterr().out


def test_label_file_unsupported_format(tmp_path, capsys):
    path = tmp_path / "edges.json"
    path.write_text("{}")
    assert label_file(path, tmp_path / "out.csv") is None
    assert "Unsupported file format" in capsys.readouterr().out


def test_label_file_empty_input(tmp_path, capsys):
    path = tmp_path / "edges.csv"
    path.write_text("")
    assert label_file(path, tmp_path / "out.csv") is None
    assert "is empty" in capsys.readouterr().out


def test_label_file_missing_column(tmp_path, capsys):
    source = _write_edges(tmp_path / "edges.csv", src=[0], dst=[1])
    assert label_file(source, tmp_path / "out.csv") is None
    assert "Column 'source' not found" in capsys.readouterr().out


def test_label_file_bad_ids(tmp_path, capsys):
    source = _write_edges(tmp_path / "edges.csv", source=["a"], target=[1])
    assert label_file(source, tmp_path / "out.csv", ComponentLabelerConfig(verbose=False)) is None
    assert "ERROR: Column 'source' must contain integer node ids" in capsys.readouterr().out


def test_main_with_custom_columns(tmp_path):
    source = _write_edges(tmp_path / "edges.csv", u=[0, 1], v=[1, 2], w=[1.0, 2.0])
    output = tmp_path / "labels.csv"
    exit_code = main(
        [
            str(source),
            str(output),
            "--source-column",
            "u",
            "--target-column",
            "v",
            "--weight-column",
            "w",
            "--node-count",
            "5",
            "--disable-tqdm",
            "--quiet",
        ]
    )
    assert exit_code == 0
    written = pd.read_csv(output)
    assert written["component_size"].tolist() == [3, 3, 3, 1, 1]


def test_main_reads_columns_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("UNION_FIND_SOURCE_COLUMN", "from")
    monkeypatch.setenv("UNION_FIND_TARGET_COLUMN", "to")
    source = tmp_path / "edges.csv"
    pd.DataFrame({"from": [0], "to": [1]}).to_csv(source, index=False)
    assert main([str(source), str(tmp_path / "labels.csv"), "--quiet"]) == 0


def test_main_reports_failure(tmp_path):
    assert main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv"), "--quiet"]) == 1
