import argparse
from pathlib import Path

from data.airlines import short_name
from data.countries import country_year_table
from src.aggregation import filter_positive, grouped_mean, summarise_delays
from src.joins import left_join_lookup
from src.load_data import load_airlines, load_flights, resolve_flights_path
from src.logging_setup import setup_logging
from src.models import add_weekday, fit_group_models
from src.plotting import plot_bars, plot_diagnostics, plot_lines
from src.settings import Settings
from src.tidy import coerce_labels, gather_wide


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Tidy-data walkthrough: reshape, aggregate, join and per-airline models."
    )
    parser.add_argument(
        "--flights",
        type=str,
        help="Flights CSV/parquet export. Defaults to TIDY_FLIGHTS_PATH or the nycflights13 package."
    )
    parser.add_argument(
        "--airlines",
        type=str,
        help="Carrier code -> airline name CSV. Defaults to data/airlines.csv."
    )
    parser.add_argument(
        "--out-dir",
        type=str,
        help="Directory for rendered charts. Defaults to TIDY_OUTPUT_DIR or reports/."
    )
    parser.add_argument(
        "--min-obs",
        type=int,
        help="Smallest number of flights an airline needs before its model is fitted."
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip chart rendering and only print table previews."
    )
    return parser.parse_args(argv)


def print_preview(title, df, rows=10):
    print(f"\n{title}")
    if df.empty:
        print("(no rows)")
        return
    print(df.head(rows).to_string(index=False))


def reshape_step(out_dir, make_plots):
    wide = country_year_table()
    print_preview("Wide table:", wide)
    tidy = coerce_labels(gather_wide(wide, "Country", var_name="year", value_name="cases"), "year")
    print_preview("Tidy table:", tidy)
    if make_plots:
        plot_lines(tidy, "year", "cases", "Country", out_dir / "cases_by_year.png", title="Cases by year")
    return tidy


def delay_step(flights, airlines, out_dir, make_plots):
    by_carrier = summarise_delays(flights, "carrier")
    print_preview("Mean departure delay of late flights by carrier:", by_carrier)

    by_month = grouped_mean(filter_positive(flights, "dep_delay"), "month", "dep_delay")
    print_preview("Mean departure delay of late flights by month:", by_month, rows=12)

    if make_plots:
        named = left_join_lookup(by_carrier, airlines, "carrier")
        named["label"] = named["name"].map(short_name).where(named["name"].notna(), named["carrier"])
        plot_bars(named, "label", "mean_dep_delay", out_dir / "delay_by_carrier.png", title="Mean delay of late flights")
        plot_bars(by_month, "month", "mean_dep_delay", out_dir / "delay_by_month.png", title="Mean delay by month")
    return by_carrier


def model_step(flights, airlines, out_dir, make_plots, min_obs):
    joined = left_join_lookup(flights, airlines, "carrier")
    joined = add_weekday(joined)
    print_preview("Flights with airline names:", joined[["year", "month", "day", "wday", "carrier", "name", "arr_delay"]])

    result = fit_group_models(joined, "name", "arr_delay", "wday", min_obs=min_obs)
    ranked = result.ranked()
    print_preview("R-squared of arr_delay ~ wday by airline (ascending):", ranked, rows=len(ranked))
    for group, reason in result.skipped.items():
        print(f"Skipped {group}: {reason}")

    if make_plots and not ranked.empty:
        labelled = ranked.assign(label=ranked["group"].map(short_name))
        plot_bars(labelled, "label", "r_squared", out_dir / "r_squared_by_airline.png", horizontal=True,
                  title="R-squared of arrival delay ~ weekday")
        best = ranked.iloc[-1]["group"]
        plot_diagnostics(result.models[best], out_dir / "diagnostics_best_fit.png", title=str(best))
    return ranked


def main(argv=None):
    setup_logging()
    args = parse_args(argv)
    settings = Settings.from_env()

    out_dir = Path(args.out_dir) if args.out_dir else settings.output_dir
    min_obs = args.min_obs if args.min_obs else settings.min_obs
    make_plots = not args.no_plots

    try:
        airlines = load_airlines(args.airlines or settings.airlines_path)
        flights = load_flights(resolve_flights_path(args.flights, settings.flights_path))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc))

    reshape_step(out_dir, make_plots)
    delay_step(flights, airlines, out_dir, make_plots)
    model_step(flights, airlines, out_dir, make_plots, min_obs)
    if make_plots:
        print(f"\nCharts written to {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
