import logging

import pandas as pd
import pytest


def _rows(state, month, n, lon=-118.25, lat=34.05):
    return [
        {
            "ST_CASE": state * 10000 + month * 100 + i,
            "STATE": state,
            "MONTH": month,
            "DAY": i + 1,
            "LONGITUD": lon + i * 0.01,
            "LATITUDE": lat + i * 0.01,
        }
        for i in range(n)
    ]


@pytest.fixture
def write_year(tmp_path):
    """Write ``accident_<year>.csv.bz2`` into ``tmp_path`` from row dicts.

    Pass *columns* with no rows for a header-only file.
    """

    def _write(year, rows, columns=None):
        path = tmp_path / f"accident_{year}.csv.bz2"
        pd.DataFrame(rows, columns=columns).to_csv(path, index=False)
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path, write_year):
    """Two census years.

    2013: STATE 6 -> Jan x3, Feb x5; STATE 1 -> Feb x1
    2014: STATE 6 -> Feb x2, Mar x4
    """
    write_year(2013, _rows(6, 1, 3) + _rows(6, 2, 4) + _rows(1, 2, 1, lon=-86.8, lat=33.5))
    write_year(2014, _rows(6, 2, 2) + _rows(6, 3, 4))
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
