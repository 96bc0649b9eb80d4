import logging

import plotly.graph_objects as go
import pytest

from fars.analysis.geography import InvalidStateError
from fars.reports import generators
from fars.reports.generators import NO_DATA_MESSAGE, map_state


def test_map_state_returns_figure(data_dir):
    fig = map_state(6, 2013, data_dir=data_dir)

    assert isinstance(fig, go.Figure)
    assert len(fig.data[0].lon) == 7
    assert min(fig.data[0].lon) == pytest.approx(-118.25)
    assert max(fig.data[0].lon) == pytest.approx(-118.22)
    # 0.03 degree spread is widened to a 0.5 degree window around its centre
    lon_min, lon_max = fig.layout.geo.lonaxis.range
    assert lon_min == pytest.approx(-118.485)
    assert lon_max == pytest.approx(-117.985)


def test_map_state_accepts_numeric_string_state(data_dir):
    fig = map_state("6.0", "2013.0", data_dir=data_dir)
    assert len(fig.data[0].lon) == 7


def test_map_state_header_only_file_is_invalid_state(write_year, tmp_path):
    write_year(2018, [], columns=["STATE", "MONTH", "LONGITUD", "LATITUDE"])
    with pytest.raises(InvalidStateError, match="invalid STATE number: 6"):
        map_state(6, 2018, data_dir=tmp_path)


def test_map_state_writes_html(data_dir, tmp_path):
    out_path = tmp_path / "maps" / "state_1_2013.html"

    fig = map_state("1", "2013", data_dir=data_dir, output_path=out_path)

    assert fig is not None
    assert out_path.exists()
    assert "<html>" in out_path.read_text(encoding="utf-8")


def test_map_state_invalid_state(data_dir):
    with pytest.raises(InvalidStateError, match="invalid STATE number: 48"):
        map_state(48, 2013, data_dir=data_dir)


def test_map_state_missing_year_propagates(data_dir):
    with pytest.raises(FileNotFoundError, match="accident_2001.csv.bz2"):
        map_state(6, 2001, data_dir=data_dir)


def test_map_state_empty_selection_is_noop(data_dir, monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="fars")
    monkeypatch.setattr(generators, "select_state", lambda df, state_num: df.iloc[0:0])

    assert map_state(6, 2013, data_dir=data_dir) is None
    assert NO_DATA_MESSAGE in caplog.messages


def test_map_state_all_sentinel_coordinates_is_noop(write_year, tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="fars")
    write_year(2015, [
        {"STATE": 2, "MONTH": 1, "LONGITUD": 999.9999, "LATITUDE": 61.2},
        {"STATE": 2, "MONTH": 2, "LONGITUD": -149.9, "LATITUDE": 99.9999},
        {"STATE": 4, "MONTH": 2, "LONGITUD": -112.1, "LATITUDE": 33.4},
    ])
    out_path = tmp_path / "ak.html"

    assert map_state(2, 2015, data_dir=tmp_path, output_path=out_path) is None
    assert NO_DATA_MESSAGE in caplog.messages
    assert not out_path.exists()
