import numpy as np
import pandas as pd
from dataclasses import dataclass, field

POPULATION_OK = "ok"
POPULATION_MISSING = "missing"
POPULATION_ZERO = "zero"


@dataclass(frozen=True)
class NeighbourhoodRecord:
    name: str
    incidents: int
    population: float | None


@dataclass(frozen=True)
class NeighbourhoodReconciliation:
    records: dict[str, NeighbourhoodRecord] = field(default_factory=dict)
    unmatched_incidents: list[str] = field(default_factory=list)
    unmatched_population: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unmatched_incidents


def reconcile_neighbourhoods(
    counts: pd.DataFrame, population: pd.DataFrame
) -> NeighbourhoodReconciliation:
    """
    Match incident neighbourhoods to census neighbourhoods by exact name.

    counts needs neighbourhood/incidents columns, population needs
    neighbourhood/population. Names on either side without a partner are
    listed rather than dropped.
    """
    population_by_name = dict(zip(population["neighbourhood"], population["population"]))

    records = {}
    for name, incidents in zip(counts["neighbourhood"], counts["incidents"]):
        pop = population_by_name.get(name)
        records[name] = NeighbourhoodRecord(
            name=name,
            incidents=int(incidents),
            population=None if pop is None or pd.isna(pop) else float(pop),
        )

    unmatched_incidents = sorted(n for n, r in records.items() if r.population is None)
    unmatched_population = sorted(n for n in population_by_name if n not in records)

    return NeighbourhoodReconciliation(
        records=records,
        unmatched_incidents=unmatched_incidents,
        unmatched_population=unmatched_population,
    )


def report_coverage(reconciliation: NeighbourhoodReconciliation) -> None:
    matched = len(reconciliation.records) - len(reconciliation.unmatched_incidents)
    print(f"Matched {matched}/{len(reconciliation.records)} neighbourhoods to census data.")

    if reconciliation.unmatched_incidents:
        print("❌ No population for:")
        for name in reconciliation.unmatched_incidents:
            print(f" • {name}")
    if reconciliation.unmatched_population:
        print("Census areas with no incidents:")
        for name in reconciliation.unmatched_population:
            print(f" • {name}")
    if reconciliation.is_complete:
        print("✅ Every neighbourhood has a population.")


def per_capita(counts: pd.DataFrame, population: pd.DataFrame) -> pd.DataFrame:
    """
    Incidents per 1,000 residents for each neighbourhood in counts.

    Neighbourhoods without a census population, or with a population of
    zero, get a NaN rate and a population_status saying which.
    """
    merged = counts[["neighbourhood", "incidents"]].merge(
        population[["neighbourhood", "population"]],
        on="neighbourhood",
        how="left",
        validate="many_to_one",
    )
    merged = merged.rename(columns={"incidents": "total_incidents"})

    missing = merged["population"].isna()
    zero = merged["population"] == 0
    usable = ~missing & ~zero

    merged["per_thousand"] = np.nan
    merged.loc[usable, "per_thousand"] = merged.loc[usable, "total_incidents"] / (
        merged.loc[usable, "population"] / 1000
    )

    merged["population_status"] = POPULATION_OK
    merged.loc[missing, "population_status"] = POPULATION_MISSING
    merged.loc[zero, "population_status"] = POPULATION_ZERO

    return merged.sort_values(
        ["per_thousand", "neighbourhood"], na_position="last", kind="mergesort"
    ).reset_index(drop=True)
