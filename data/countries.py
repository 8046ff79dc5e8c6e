"""Literal wide table used by the reshape walkthrough: one row per country, one column per year."""

import pandas as pd

YEARS = ["2011", "2012", "2013"]


def country_year_table() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Country": "FR", "2011": 7000, "2012": 6900, "2013": 7000},
            {"Country": "DE", "2011": 5800, "2012": 6000, "2013": 6200},
            {"Country": "US", "2011": 15000, "2012": 14000, "2013": 13000},
        ],
        columns=["Country", *YEARS],
    )
