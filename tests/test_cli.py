import pandas as pd
import plotly.graph_objects as go

from fars.cli import main, parse_args


def test_parse_args_summarize():
    args = parse_args(["summarize", "2013", "2014", "--data-dir", "data"])
    assert args.command == "summarize"
    assert args.years == [2013, 2014]
    assert str(args.data_dir) == "data"
    assert args.output is None


def test_summarize_prints_and_saves(data_dir, tmp_path, capsys):
    out = tmp_path / "out" / "summary.csv"

    code = main(["summarize", "2013", "1800", "--data-dir", str(data_dir), "--output", str(out)])

    assert code == 0
    assert "MONTH" in capsys.readouterr().out
    saved = pd.read_csv(out)
    assert list(saved.columns) == ["MONTH", "2013"]
    assert saved["2013"].tolist() == [30, 25]


def test_map_invalid_state_exit_code(data_dir):
    assert main(["map", "99", "2013", "--data-dir", str(data_dir)]) == 1


def test_map_missing_year_exit_code(data_dir):
    assert main(["-q", "map", "1", "1800", "--data-dir", str(data_dir)]) == 1


def test_map_writes_html(data_dir, tmp_path, monkeypatch):
    shown = []
    monkeypatch.setattr(go.Figure, "show", lambda self, *a, **k: shown.append(self))
    html = tmp_path / "map.html"

    assert main(["map", "1", "2014", "--data-dir", str(data_dir), "--html", str(html)]) == 0
    assert html.exists()
    assert shown == []
