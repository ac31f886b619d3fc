import pandas as pd

from analysis.streets import extract_streets

NONE_LISTED = "None Listed"
UNKNOWN_WEEKDAY = "Unknown"

FIRST_FULL_YEAR = 2003
LAST_FULL_YEAR = 2017

# "Theft of Vehicle", "Theft from Vehicle", and the reversed "Vehicle Theft"
AUTO_THEFT_PATTERN = r"\btheft\b.*\bvehicles?\b|\bvehicles?\b.*\btheft\b"

WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def filter_auto_theft(df: pd.DataFrame) -> pd.DataFrame:
    mask = df["TYPE"].str.contains(AUTO_THEFT_PATTERN, case=False, regex=True, na=False)
    return df[mask].copy()


def thefts_in_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    return df[df["YEAR"] == year].copy()


def _count(keys: pd.Series, name: str) -> pd.DataFrame:
    return (
        keys.rename(name)
        .to_frame()
        .groupby(name, dropna=False, sort=True)
        .size()
        .reset_index(name="incidents")
    )


def thefts_by_year(df, first_year=FIRST_FULL_YEAR, last_year=LAST_FULL_YEAR):
    """Incidents per year over a closed range of complete years."""
    years = pd.to_numeric(df["YEAR"], errors="coerce")
    in_range = years.between(first_year, last_year).fillna(False).astype(bool)
    by_year = _count(years[in_range].astype(int), "year")
    return by_year.sort_values("year").reset_index(drop=True)


def thefts_by_neighbourhood(df: pd.DataFrame) -> pd.DataFrame:
    """
    Incidents per neighbourhood, worst first.

    Missing neighbourhoods are counted under "None Listed". Equal counts
    are ordered by name so the table is the same on every run.
    """
    neighbourhoods = df["NEIGHBOURHOOD"].fillna(NONE_LISTED)
    by_nbhd = _count(neighbourhoods, "neighbourhood")
    return by_nbhd.sort_values(
        ["incidents", "neighbourhood"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)


def thefts_by_street(df: pd.DataFrame) -> pd.DataFrame:
    streets = extract_streets(df["HUNDRED_BLOCK"]).fillna(NONE_LISTED)
    by_street = _count(streets, "street")
    return by_street.sort_values("street", kind="mergesort").reset_index(drop=True)


def worst_streets(by_street: pd.DataFrame, n: int = 25) -> pd.DataFrame:
    # mergesort is stable: ties keep their input order
    return (
        by_street.sort_values("incidents", ascending=False, kind="mergesort")
        .head(n)
        .reset_index(drop=True)
    )


def thefts_by_hour(df: pd.DataFrame) -> pd.DataFrame:
    hours = pd.to_numeric(df["HOUR"], errors="coerce").astype("Int64")
    by_hour = _count(hours, "hour")
    return by_hour.sort_values("hour", na_position="last").reset_index(drop=True)


def thefts_by_weekday(df: pd.DataFrame) -> pd.DataFrame:
    dates = pd.to_datetime(
        pd.DataFrame(
            {
                "year": pd.to_numeric(df["YEAR"], errors="coerce").astype("float64"),
                "month": pd.to_numeric(df["MONTH"], errors="coerce").astype("float64"),
                "day": pd.to_numeric(df["DAY"], errors="coerce").astype("float64"),
            },
            index=df.index,
        ),
        errors="coerce",
    )
    weekdays = dates.dt.day_name().fillna(UNKNOWN_WEEKDAY)

    order = WEEKDAYS + [UNKNOWN_WEEKDAY]
    by_weekday = _count(weekdays, "weekday")
    by_weekday["weekday"] = pd.Categorical(
        by_weekday["weekday"], categories=order, ordered=True
    )
    by_weekday = by_weekday.sort_values("weekday").reset_index(drop=True)
    by_weekday["weekday"] = by_weekday["weekday"].astype(str)
    return by_weekday


def neighbourhood_hour_matrix(df: pd.DataFrame) -> pd.DataFrame:
    """Incident counts with neighbourhoods as rows and hour of day as columns."""
    frame = pd.DataFrame(
        {
            "neighbourhood": df["NEIGHBOURHOOD"].fillna(NONE_LISTED),
            "hour": pd.to_numeric(df["HOUR"], errors="coerce").astype("Int64"),
        }
    )
    frame = frame.dropna(subset=["hour"])
    matrix = pd.crosstab(frame["neighbourhood"], frame["hour"])
    matrix.columns = [int(c) for c in matrix.columns]
    matrix.columns.name = "hour"
    return matrix.sort_index()
