from pathlib import Path
from typing import List

import pandas as pd
import pytest


def _rows(n: int, *, month: int, state: int, lat: float, lon: float) -> List[dict]:
    return [
        {
            "STATE": state,
            "MONTH": month,
            "LATITUDE": lat + i * 0.01,
            "LONGITUD": lon - i * 0.01,
            "FATALS": 1,
        }
        for i in range(n)
    ]


def write_accidents(data_dir: Path, year: int, rows: List[dict]) -> Path:
    """Write rows as a bz2-compressed accident file for ``year``."""
    path = data_dir / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Two census years of synthetic accidents.

    2013: 30 January rows in Alabama (1); 25 February rows, of which 22 are
    in California (6) with valid coordinates, 2 in California with one
    sentinel coordinate each and 1 in Alaska (2) with both coordinates
    missing.
    2014: 5 January and 10 March rows in Alabama.
    """
    rows_2013 = (
        _rows(30, month=1, state=1, lat=32.0, lon=-86.0)
        + _rows(22, month=2, state=6, lat=34.0, lon=-118.0)
        + [
            {"STATE": 6, "MONTH": 2, "LATITUDE": 35.5, "LONGITUD": 999.9999, "FATALS": 2},
            {"STATE": 6, "MONTH": 2, "LATITUDE": 95.0, "LONGITUD": -119.5, "FATALS": 1},
            {"STATE": 2, "MONTH": 2, "LATITUDE": 99.9999, "LONGITUD": 999.9999, "FATALS": 1},
        ]
    )
    rows_2014 = _rows(5, month=1, state=1, lat=33.0, lon=-87.0) + _rows(
        10, month=3, state=1, lat=31.0, lon=-85.0
    )
    write_accidents(tmp_path, 2013, rows_2013)
    write_accidents(tmp_path, 2014, rows_2014)
    return tmp_path
