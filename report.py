#!/usr/bin/env python3
"""
Where is it safe to park in Vancouver?

Loads the VPD crime extract and the 2016 census local area profiles, looks
at thefts of and from vehicles by year, neighbourhood, street and hour, and
writes the charts, a clustered incident map and an HTML report to output/.
"""
from pathlib import Path

from analysis.auto_theft import (
    FIRST_FULL_YEAR,
    LAST_FULL_YEAR,
    filter_auto_theft,
    neighbourhood_hour_matrix,
    thefts_by_hour,
    thefts_by_neighbourhood,
    thefts_by_street,
    thefts_by_weekday,
    thefts_by_year,
    thefts_in_year,
    worst_streets,
)
from data_preparation.data_join.data_joiner import (
    per_capita,
    reconcile_neighbourhoods,
    report_coverage,
)
from data_preparation.data_services.census_service import CensusService
from data_preparation.data_services.crime_service import CrimeService
from plots import charts, narrative
from plots.interactive_map import build_theft_map, save_theft_map

CRIME_PATH = Path("data/raw/crime/crime_csv_all_years.csv")
CENSUS_PATH = Path("data/raw/census/CensusLocalAreaProfiles2016.csv")
ICON_PATH = Path("data/raw/autothefticon.png")
OUTPUT_DIR = Path("output")

CENSUS_YEAR = 2016
TOP_N_STREETS = 25


def main():
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    crime_df = CrimeService(CRIME_PATH).get_data()
    census = CensusService(CENSUS_PATH)

    auto_theft = filter_auto_theft(crime_df)
    print(f"Auto thefts: {len(auto_theft)} of {len(crime_df)} incidents.")

    # 1. Trend over the complete years
    by_year = thefts_by_year(auto_theft, FIRST_FULL_YEAR, LAST_FULL_YEAR)
    fig_year = charts.yearly_trend_figure(by_year)
    fig_year.write_html(OUTPUT_DIR / "thefts_by_year.html")

    # 2. Neighbourhood totals and per-capita rates for the census year
    by_nbhd = thefts_by_neighbourhood(auto_theft)

    thefts_census_year = thefts_in_year(auto_theft, CENSUS_YEAR)
    nbhd_census_year = thefts_by_neighbourhood(thefts_census_year)
    population = census.population()

    reconciliation = reconcile_neighbourhoods(nbhd_census_year, population)
    report_coverage(reconciliation)

    rates = per_capita(nbhd_census_year, population)
    fig_rates = charts.per_capita_figure(rates, CENSUS_YEAR)
    fig_rates.write_html(OUTPUT_DIR / "per_capita.html")

    theft_map = build_theft_map(
        thefts_census_year, icon_path=ICON_PATH if ICON_PATH.exists() else None
    )
    save_theft_map(theft_map, OUTPUT_DIR / f"auto_thefts_{CENSUS_YEAR}_map.html")

    # 3. Streets
    by_street = thefts_by_street(auto_theft)
    histogram_path = charts.street_histogram(
        by_street, OUTPUT_DIR / "thefts_by_street_hist.png"
    )
    mean_streets = worst_streets(by_street, TOP_N_STREETS)
    fig_streets = charts.worst_streets_figure(mean_streets)
    fig_streets.write_html(OUTPUT_DIR / "worst_streets.html")

    # 4. Time of day and day of week
    by_hour = thefts_by_hour(auto_theft)
    fig_hour = charts.hourly_figure(by_hour, FIRST_FULL_YEAR, LAST_FULL_YEAR)
    fig_hour.write_html(OUTPUT_DIR / "thefts_by_hour.html")

    by_weekday = thefts_by_weekday(auto_theft)
    fig_weekday = charts.weekday_figure(by_weekday)

    matrix = neighbourhood_hour_matrix(auto_theft)
    fig_matrix = charts.neighbourhood_hour_heatmap(matrix)

    known_hours = by_hour.dropna(subset=["hour"]).sort_values(
        "incidents", ascending=False, kind="mergesort"
    )
    peak = f"{int(known_hours.iloc[0]['hour'])}:00" if len(known_hours) else "unknown"
    unmatched = ", ".join(reconciliation.unmatched_incidents) or "none"

    sections = [
        narrative.section(
            "How has auto theft changed?",
            f"Thefts of vehicles and thefts from vehicles, counted per year from "
            f"{FIRST_FULL_YEAR} to {LAST_FULL_YEAR}. The partial current year "
            f"is left out.",
            narrative.figure_html(fig_year),
        ),
        narrative.section(
            "Which neighbourhoods are safe places to park?",
            "Total incidents by neighbourhood over every year in the data. "
            "Incidents without a neighbourhood are listed as None Listed.",
            narrative.table_html(by_nbhd),
        ),
        narrative.section(
            f"Per capita ({CENSUS_YEAR})",
            f"Bigger neighbourhoods see more thefts, so {CENSUS_YEAR} incidents "
            f"are divided by the {CENSUS_YEAR} census population, per 1,000 "
            f"residents.\n\nNeighbourhoods with no census population: {unmatched}.",
            narrative.figure_html(fig_rates) + narrative.table_html(rates),
        ),
        narrative.section(
            f"Where did the {CENSUS_YEAR} thefts happen?",
            "Each marker is one incident; zoom in to break up the clusters. "
            "Incidents recorded at the edge of the UTM zone have no real "
            "location and are not shown.",
            narrative.map_html(theft_map),
        ),
        narrative.section(
            "Are there streets to avoid?",
            "Incidents by street with the hundred block removed. Most streets "
            "see very few thefts, but the range is wide.",
            narrative.image_html(histogram_path.name, "Histogram of thefts per street")
            + narrative.figure_html(fig_streets),
        ),
        narrative.section(
            "When do thefts happen?",
            f"The busiest hour is {peak}. Thefts noticed after a "
            f"workday or school day may only be reported then.",
            narrative.figure_html(fig_hour)
            + narrative.figure_html(fig_weekday)
            + narrative.figure_html(fig_matrix),
        ),
    ]

    narrative.render_report(
        "Should I Park Here? Auto Theft in Vancouver",
        sections,
        OUTPUT_DIR / "report.html",
    )


if __name__ == "__main__":
    main()
