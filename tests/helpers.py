import numpy as np
import pandas as pd


def sample_airlines():
    return pd.DataFrame(
        [
            {"carrier": "AA", "name": "American Airlines Inc."},
            {"carrier": "DL", "name": "Delta Air Lines Inc."},
            {"carrier": "HA", "name": "Hawaiian Airlines Inc."},
        ]
    )


def sample_flights(days=14, per_day=3, seed=0):
    """Flights for January 2013: AA and DL fly daily, HA twice, ZZ has no airline entry."""
    rng = np.random.RandomState(seed)
    rows = []
    for day in range(1, days + 1):
        weekday = pd.Timestamp(2013, 1, day).dayofweek
        for carrier, effect in (("AA", 5.0), ("DL", 1.0)):
            for _ in range(per_day):
                delay = effect * weekday + rng.normal(0.0, 4.0)
                rows.append(
                    {
                        "year": 2013,
                        "month": 1,
                        "day": day,
                        "carrier": carrier,
                        "dep_delay": delay - 2.0,
                        "arr_delay": delay,
                    }
                )
    rows.append({"year": 2013, "month": 1, "day": 1, "carrier": "HA", "dep_delay": 3.0, "arr_delay": 7.0})
    rows.append({"year": 2013, "month": 1, "day": 2, "carrier": "HA", "dep_delay": -1.0, "arr_delay": 2.0})
    rows.append({"year": 2013, "month": 1, "day": 3, "carrier": "ZZ", "dep_delay": 12.0, "arr_delay": 10.0})
    rows.append({"year": 2013, "month": 1, "day": 4, "carrier": "ZZ", "dep_delay": 20.0, "arr_delay": np.nan})
    return pd.DataFrame(rows)
