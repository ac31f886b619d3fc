import pandas as pd
from pathlib import Path


class CensusService:
    RAW_PATH = Path("data/raw/census/CensusLocalAreaProfiles2016.csv")

    TOTAL_POPULATION_ID = 1

    # Census local area name -> VPD neighbourhood name
    NEIGHBOURHOOD_RENAMES = {
        "Downtown": "Central Business District",
    }

    # City-wide totals, not local areas
    CITY_TOTAL_COLUMNS = ["Vancouver CSD", "Vancouver CMA"]

    def __init__(self, path: Path | str | None = None, renames: dict | None = None):
        self.path = Path(path) if path is not None else self.RAW_PATH
        self.renames = self.NEIGHBOURHOOD_RENAMES if renames is None else renames
        self.data: pd.DataFrame = pd.DataFrame()
        self.__load()

    def __load(self):
        if not self.path.exists():
            raise FileNotFoundError(f"{self.path} does not exist.")

        print(f"Processing census data from {self.path}")
        df = pd.read_csv(self.path, dtype=str, encoding_errors="replace")
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in ["Variable", "ID"] if c not in df.columns]
        if missing:
            raise ValueError(f"{self.path} is missing expected columns: {missing}")

        df = df.drop(columns=[c for c in self.CITY_TOTAL_COLUMNS if c in df.columns])

        long = df.melt(
            id_vars=["Variable", "ID"],
            var_name="neighbourhood",
            value_name="value",
        ).rename(columns={"Variable": "variable", "ID": "variable_id"})

        long["variable_id"] = pd.to_numeric(long["variable_id"], errors="coerce")
        long["value"] = pd.to_numeric(
            long["value"].str.replace(",", "", regex=False).str.strip(),
            errors="coerce",
        )
        long = long.dropna(subset=["variable_id", "value"])
        long["variable_id"] = long["variable_id"].astype(int)

        long["neighbourhood"] = long["neighbourhood"].str.strip().replace(self.renames)

        self.data = long.reset_index(drop=True)
        print(
            f"Loaded {len(self.data)} census values for "
            f"{self.data['neighbourhood'].nunique()} neighbourhoods."
        )

    def get_data(self) -> pd.DataFrame:
        if self.data.empty:
            raise RuntimeError("Census data not loaded.")
        return self.data.copy()

    def population(self, variable_id: int | None = None) -> pd.DataFrame:
        """Neighbourhood population table for one census statistic."""
        if variable_id is None:
            variable_id = self.TOTAL_POPULATION_ID

        df = self.get_data()
        df = df[df["variable_id"] == variable_id]

        duplicated = df["neighbourhood"][df["neighbourhood"].duplicated()].unique()
        if len(duplicated):
            raise ValueError(
                f"{self.path} has more than one value for ID {variable_id} in: "
                f"{sorted(duplicated)}"
            )

        return (
            df[["neighbourhood", "value"]]
            .rename(columns={"value": "population"})
            .sort_values("neighbourhood")
            .reset_index(drop=True)
        )
