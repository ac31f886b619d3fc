import numpy as np
import pandas as pd
import pytest

CRIME_COLUMNS = [
    "TYPE",
    "YEAR",
    "MONTH",
    "DAY",
    "HOUR",
    "MINUTE",
    "HUNDRED_BLOCK",
    "NEIGHBOURHOOD",
    "X",
    "Y",
]

CRIME_ROWS = [
    ["Theft of Vehicle", 2016, 3, 5, 18, 0, "4XX W 15TH AVE", "Mount Pleasant", 492000.0, 5459000.0],
    ["Theft from Vehicle", 2016, 3, 6, 12, 30, "100 BLOCK MAIN ST", "Strathcona", 493000.0, 5458000.0],
    ["Theft from Vehicle", 2016, 7, 1, 18, 15, "4XX W 15TH AVE", None, 0.0, 0.0],
    ["Theft from Vehicle", 2018, 1, 2, None, None, "X NK_LOC ST", "Kitsilano", None, None],
    ["Break and Enter Residential/Other", 2016, 1, 1, 2, 0, "1XX E HASTINGS ST", "Strathcona", 493500.0, 5458500.0],
    ["Theft of Vehicle", 2010, 12, 31, 23, 59, "2XX MAIN ST", "Strathcona", 493100.0, 5458100.0],
    ["Other Theft", 2012, 5, 5, 9, 0, "8XX GRANVILLE ST", "Central Business District", 491000.0, 5459500.0],
    ["Theft from Vehicle", 2003, 6, 15, 18, 45, "1ST AVE", "Kitsilano", 488000.0, 5458000.0],
]


@pytest.fixture
def crime_frame():
    return pd.DataFrame(CRIME_ROWS, columns=CRIME_COLUMNS)


@pytest.fixture
def crime_csv(tmp_path, crime_frame):
    path = tmp_path / "crime_csv_all_years.csv"
    crime_frame.to_csv(path, index=False)
    return path


@pytest.fixture
def census_csv(tmp_path):
    path = tmp_path / "CensusLocalAreaProfiles2016.csv"
    path.write_text(
        "Variable,ID,Arbutus-Ridge,Downtown,Kitsilano,Mount Pleasant,Strathcona,Vancouver CSD,Vancouver CMA\n"
        'Total - Age groups and average age of persons - 100% data,1,"15,295","62,030","43,045","32,955","12,585","631,485","2,463,430"\n'
        "0 to 14 years,2,2325,4665,5545,3520,1320,76460,\n"
        "Median age,3,,,,,,,\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def auto_theft_frame():
    """Already-filtered auto thefts, as the aggregation functions see them."""
    return pd.DataFrame(
        {
            "TYPE": [
                "Theft of Vehicle",
                "Theft from Vehicle",
                "Theft from Vehicle",
                "Theft from Vehicle",
                "Theft of Vehicle",
                "Theft from Vehicle",
                "Theft from Vehicle",
            ],
            "YEAR": [2003, 2016, 2016, 2017, 2018, 2016, 2010],
            "MONTH": [1, 3, 3, 6, 2, 13, 8],
            "DAY": [1, 5, 6, 15, 1, 1, 2],
            "HOUR": [18, 12, np.nan, 18, 0, 18, 3],
            "MINUTE": [0, 30, np.nan, 5, 0, 10, 0],
            "NEIGHBOURHOOD": [
                "Kitsilano",
                "Strathcona",
                None,
                "Kitsilano",
                "Strathcona",
                "Fairview",
                None,
            ],
            "HUNDRED_BLOCK": [
                "4XX W 15TH AVE",
                "1XX MAIN ST",
                "100 BLOCK MAIN ST",
                "4XX W 15TH AVE",
                "1ST AVE",
                "2XX E HASTINGS ST",
                None,
            ],
        }
    )
