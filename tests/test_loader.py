import pytest

from fars import CoercionWarning, NotFoundError, available_years, make_filename, read_table
from fars.config import PACKAGE_DATA_DIR

from conftest import YEAR_ROWS, write_year


def test_make_filename_int(config):
    path = make_filename(2013, config=config)
    assert path.endswith("accident_2013.csv.bz2")
    assert path.startswith(str(config.data_dir))


def test_make_filename_numeric_string(config):
    assert make_filename("2015", config=config).endswith("accident_2015.csv.bz2")
    assert make_filename(" 2014 ", config=config).endswith("accident_2014.csv.bz2")


def test_make_filename_float_year(config):
    assert make_filename(2013.0, config=config).endswith("accident_2013.csv.bz2")


def test_make_filename_bad_year_warns_and_uses_na(config):
    with pytest.warns(CoercionWarning):
        path = make_filename("abc", config=config)
    assert path.endswith("accident_NA.csv.bz2")


def test_make_filename_defaults_to_package_data(monkeypatch):
    monkeypatch.delenv("FARS_DATA_DIR", raising=False)
    path = make_filename(2013)
    assert path.startswith(str(PACKAGE_DATA_DIR))


def test_make_filename_does_not_check_existence(config):
    path = make_filename(1900, config=config)
    assert path.endswith("accident_1900.csv.bz2")


def test_read_table_rows_and_columns(config):
    for year, rows in YEAR_ROWS.items():
        table = read_table(make_filename(year, config=config))
        assert len(table) == len(rows)
        assert {"STATE", "MONTH", "LONGITUD", "LATITUDE"} <= set(table.columns)


def test_read_table_keeps_other_columns(config):
    table = read_table(make_filename(2013, config=config))
    assert list(table.columns) == ["ST_CASE", "STATE", "MONTH", "LONGITUD", "LATITUDE"]


def test_read_table_missing_file(tmp_path):
    missing = str(tmp_path / "accident_9999.csv.bz2")
    with pytest.raises(NotFoundError) as exc:
        read_table(missing)
    assert str(exc.value) == f"file '{missing}' does not exist"
    assert exc.value.path == missing
    # still a FileNotFoundError for callers that only know the builtin
    assert isinstance(exc.value, FileNotFoundError)


def test_available_years(config, data_dir):
    (data_dir / "notes.txt").write_text("not a data file")
    assert available_years(config=config) == sorted(YEAR_ROWS)


def test_available_years_picks_up_new_file(config, data_dir):
    write_year(data_dir, 2016, [(1, 1, -86.0, 32.0)])
    assert 2016 in available_years(config=config)


def test_available_years_missing_dir(tmp_path):
    from fars import FarsConfig

    cfg = FarsConfig(data_dir=tmp_path / "nope")
    assert available_years(config=cfg) == []
