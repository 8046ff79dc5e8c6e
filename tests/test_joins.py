import logging

import pandas as pd
import pytest

from src.joins import left_join_lookup, unmatched_keys


def test_left_join_preserves_fact_row_count(flights, airlines):
    assert len(airlines) == 3

    joined = left_join_lookup(flights, airlines, "carrier")

    assert len(joined) == len(flights)
    assert list(joined["carrier"]) == list(flights["carrier"])


def test_left_join_unmatched_rows_carry_missing_name(flights, airlines):
    joined = left_join_lookup(flights, airlines, "carrier")

    zz = joined[joined["carrier"] == "ZZ"]
    assert len(zz) == 2
    assert zz["name"].isna().all()
    assert joined.loc[joined["carrier"] == "AA", "name"].eq("American Airlines Inc.").all()


def test_left_join_logs_unmatched_keys(flights, airlines, caplog):
    with caplog.at_level(logging.WARNING, logger="src.joins"):
        left_join_lookup(flights, airlines, "carrier")

    assert any("ZZ" in record.getMessage() for record in caplog.records)


def test_unmatched_keys_sorted_and_distinct(flights, airlines):
    extra = pd.concat([flights, pd.DataFrame([{"carrier": "AB"}])], ignore_index=True)

    assert unmatched_keys(extra, airlines, "carrier") == ["AB", "ZZ"]


def test_left_join_rejects_duplicated_lookup_keys(flights, airlines):
    duplicated = pd.concat([airlines, airlines.iloc[[0]]], ignore_index=True)

    with pytest.raises(pd.errors.MergeError):
        left_join_lookup(flights, duplicated, "carrier")


def test_left_join_rejects_column_clash(flights, airlines):
    fact = flights.assign(name="already here")

    with pytest.raises(ValueError, match="already present"):
        left_join_lookup(fact, airlines, "carrier")


def test_left_join_selected_columns_only():
    fact = pd.DataFrame({"code": ["x", "y"]})
    lookup = pd.DataFrame({"code": ["x"], "label": ["X"], "extra": [1]})

    joined = left_join_lookup(fact, lookup, "code", columns=["label"])

    assert list(joined.columns) == ["code", "label"]
    assert joined["label"].tolist()[0] == "X"
    assert pd.isna(joined["label"].tolist()[1])
