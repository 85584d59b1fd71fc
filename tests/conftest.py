import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from fars import FarsConfig

COLUMNS = ["ST_CASE", "STATE", "MONTH", "LONGITUD", "LATITUDE"]

# (STATE, MONTH, LONGITUD, LATITUDE)
YEAR_ROWS = {
    2013: [
        (1, 1, -86.5, 32.4),
        (1, 1, -87.0, 33.1),
        (1, 2, 901.0, 95.0),
        (6, 3, -118.2, 34.0),
        (6, 3, -119.0, 35.5),
    ],
    2014: [
        (1, 1, -86.9, 32.8),
        (1, 2, -85.6, 34.7),
        (1, 2, -88.1, 30.7),
        (6, 12, -121.5, 38.6),
    ],
    # every state-2 position is unrecorded
    2015: [
        (1, 7, -86.2, 32.3),
        (2, 5, 999.9999, 99.9999),
        (2, 6, 901.0, 95.0),
    ],
}


def write_year(data_dir, year, rows, columns=COLUMNS):
    frame = pd.DataFrame(
        [(year * 10000 + i, *row) for i, row in enumerate(rows)],
        columns=columns,
    )
    path = data_dir / f"accident_{year}.csv.bz2"
    frame.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path):
    for year, rows in YEAR_ROWS.items():
        write_year(tmp_path, year, rows)
    return tmp_path


@pytest.fixture
def config(data_dir):
    return FarsConfig(data_dir=data_dir, boundaries="unused-in-tests")


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
