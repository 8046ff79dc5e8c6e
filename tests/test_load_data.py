import pandas as pd
import pytest

from src.load_data import FLIGHT_COLUMNS, load_airlines, load_flights, resolve_flights_path


def test_load_airlines_defaults_to_bundled_lookup():
    airlines = load_airlines()

    assert list(airlines.columns) == ["carrier", "name"]
    assert airlines["carrier"].is_unique
    lookup = dict(zip(airlines["carrier"], airlines["name"]))
    assert lookup["UA"] == "United Air Lines Inc."
    assert len(airlines) == 16


def test_load_airlines_normalizes_codes(tmp_path):
    path = tmp_path / "airlines.csv"
    path.write_text('carrier,name\n" aa ", American Airlines Inc. \n,Nameless\n', encoding="utf-8")

    airlines = load_airlines(path)

    assert airlines.to_dict("records") == [{"carrier": "AA", "name": "American Airlines Inc."}]


def test_load_airlines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_airlines(tmp_path / "nope.csv")


def test_load_airlines_requires_schema(tmp_path):
    path = tmp_path / "airlines.csv"
    path.write_text("code,label\nAA,American\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Missing required columns"):
        load_airlines(path)


def test_load_flights_from_csv(tmp_path, flights):
    path = tmp_path / "flights.csv"
    flights.assign(carrier=flights["carrier"].str.lower()).to_csv(path, index=False)

    loaded = load_flights(path)

    assert len(loaded) == len(flights)
    assert set(loaded["carrier"]) == {"AA", "DL", "HA", "ZZ"}
    assert loaded["arr_delay"].isna().sum() == 1
    assert set(FLIGHT_COLUMNS).issubset(loaded.columns)


def test_load_flights_drops_rows_without_calendar_date(tmp_path, flights):
    path = tmp_path / "flights.csv"
    broken = flights.copy()
    broken.loc[0, "day"] = None
    broken.to_csv(path, index=False)

    loaded = load_flights(path)

    assert len(loaded) == len(flights) - 1


def test_load_flights_requires_columns(tmp_path):
    path = tmp_path / "flights.csv"
    pd.DataFrame({"carrier": ["AA"], "dep_delay": [1.0]}).to_csv(path, index=False)

    with pytest.raises(ValueError, match="arr_delay"):
        load_flights(path)


def test_load_flights_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_flights(tmp_path / "missing.csv")


def test_resolve_flights_path_prefers_cli_value(tmp_path):
    configured = tmp_path / "configured.csv"

    assert resolve_flights_path("cli.csv", configured).name == "cli.csv"
    assert resolve_flights_path(None, configured) == configured
    assert resolve_flights_path(None, None) is None
