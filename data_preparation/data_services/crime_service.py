import pandas as pd
from pathlib import Path

from data_preparation.coordinates import normalize_coordinates, COORD_OK


class CrimeService:
    RAW_PATH = Path("data/raw/crime/crime_csv_all_years.csv")

    REQUIRED_COLUMNS = [
        "TYPE",
        "YEAR",
        "MONTH",
        "DAY",
        "HOUR",
        "MINUTE",
        "NEIGHBOURHOOD",
        "HUNDRED_BLOCK",
        "X",
        "Y",
    ]

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else self.RAW_PATH
        self.data: pd.DataFrame = pd.DataFrame()
        self.__load()

    def __load(self):
        if not self.path.exists():
            raise FileNotFoundError(f"{self.path} does not exist.")

        print(f"Loading crime data from {self.path}")
        df = pd.read_csv(
            self.path,
            dtype={"TYPE": str, "NEIGHBOURHOOD": str, "HUNDRED_BLOCK": str},
        )
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in self.REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{self.path} is missing expected columns: {missing}")

        for col in ["YEAR", "MONTH", "DAY", "HOUR", "MINUTE"]:
            df[col] = pd.to_numeric(df[col], errors="coerce").astype("Int64")

        # The VPD extract uses UTM Zone 10 for X/Y
        df = normalize_coordinates(df, x_col="X", y_col="Y")

        mapped = (df["coord_status"] == COORD_OK).sum()
        print(f"Loaded {len(df)} incidents, {mapped} with a mappable location.")
        self.data = df

    def get_data(self) -> pd.DataFrame:
        if self.data.empty:
            raise RuntimeError("Crime data not loaded.")
        return self.data.copy()
