import matplotlib.pyplot as plt
import pandas as pd
import plotly.express as px
import seaborn as sns

THEFT_BLUE = "#3c78d8"
THEFT_RED = "#ff4d4d"


def yearly_trend_figure(by_year: pd.DataFrame):
    first, last = by_year["year"].min(), by_year["year"].max()
    fig = px.line(
        by_year,
        x="year",
        y="incidents",
        title=f"Theft of or From Autos in Vancouver<br>{first} - {last}",
    )
    fig.update_traces(line_color=THEFT_BLUE)
    fig.update_layout(template="simple_white", xaxis_title="", yaxis_title="Incidents")
    return fig


def per_capita_figure(rates: pd.DataFrame, year: int):
    """Horizontal bars of incidents per 1,000 residents, safest at the bottom."""
    plotted = rates.dropna(subset=["per_thousand"])
    fig = px.bar(
        plotted,
        x="per_thousand",
        y="neighbourhood",
        orientation="h",
        hover_data={"total_incidents": True, "population": ":,.0f"},
        labels={
            "per_thousand": "Thefts of autos or from autos, per 1,000 residents",
            "neighbourhood": "",
            "total_incidents": "Total Incidents",
            "population": "Population",
        },
        title=f"Vancouver Neighbourhoods: Auto Theft Stats ({year})",
    )
    fig.update_traces(marker_color=THEFT_BLUE)
    fig.update_layout(
        template="simple_white",
        yaxis={"categoryorder": "array", "categoryarray": list(plotted["neighbourhood"])},
        height=max(400, 28 * len(plotted)),
    )
    return fig


def street_histogram(by_street: pd.DataFrame, output_path):
    fig, ax = plt.subplots(figsize=(10, 6))
    sns.histplot(by_street["incidents"], bins=100, ax=ax)
    ax.set_title("Auto Thefts per Street")
    ax.set_xlabel("Total Incidents")
    ax.set_ylabel("Streets")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    print(f"Saved: {output_path}")
    return output_path


def worst_streets_figure(worst: pd.DataFrame):
    # Plotly draws the first category at the bottom, so worst goes last
    ordered = worst.iloc[::-1]
    fig = px.bar(
        ordered,
        x="incidents",
        y="street",
        orientation="h",
        labels={"incidents": "Thefts of autos or from autos", "street": ""},
        title=f"Vancouver's Top {len(worst)} Worst Streets to Park on",
    )
    fig.update_traces(marker_color=THEFT_RED)
    fig.update_layout(
        template="simple_white",
        yaxis={"categoryorder": "array", "categoryarray": list(ordered["street"])},
        height=max(400, 28 * len(ordered)),
    )
    return fig


def hourly_figure(by_hour: pd.DataFrame, first_year: int, last_year: int):
    known = by_hour.dropna(subset=["hour"]).astype({"hour": int})
    fig = px.line(
        known,
        x="hour",
        y="incidents",
        markers=True,
        labels={"hour": "Hour", "incidents": "Incidents"},
        title=(
            "Vancouver: Thefts of or from Autos, by Hour of Day"
            f"<br>{first_year} - {last_year}"
        ),
    )
    fig.update_traces(line_color=THEFT_BLUE, line_width=3, marker_size=8)
    fig.update_layout(template="simple_white", xaxis={"dtick": 1})
    return fig


def weekday_figure(by_weekday: pd.DataFrame):
    fig = px.bar(
        by_weekday,
        x="weekday",
        y="incidents",
        labels={"weekday": "", "incidents": "Incidents"},
        title="Thefts of or from Autos, by Day of Week",
    )
    fig.update_traces(marker_color=THEFT_BLUE)
    fig.update_layout(template="simple_white")
    return fig


def neighbourhood_hour_heatmap(matrix: pd.DataFrame):
    # Row shares, so small and large neighbourhoods are comparable
    shares = matrix.div(matrix.sum(axis=1), axis=0)
    fig = px.imshow(
        shares,
        aspect="auto",
        color_continuous_scale="OrRd",
        labels={"x": "Hour", "y": "", "color": "Share of incidents"},
        title="When Do Auto Thefts Happen in Each Neighbourhood?",
    )
    fig.update_layout(height=max(400, 24 * len(shares)))
    return fig
