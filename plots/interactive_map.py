import folium
import pandas as pd
from folium.plugins import MarkerCluster

from data_preparation.coordinates import mappable

VANCOUVER_CENTRE = [49.255, -123.12]


def _field(value) -> str:
    if pd.isna(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def popup_text(row) -> str:
    return (
        f"Description: {_field(row['TYPE'])}<br>"
        f"Location: {_field(row['HUNDRED_BLOCK'])}<br>"
        f"Date: {_field(row['YEAR'])}-{_field(row['MONTH'])}-{_field(row['DAY'])}<br>"
        f"Time: {_field(row['HOUR'])}:{_field(row['MINUTE'])}"
    )


def build_theft_map(thefts: pd.DataFrame, icon_path=None, max_cluster_radius=100):
    """
    Clustered marker map of individual incidents.

    Only incidents with a real location are drawn; zero-easting and invalid
    coordinates are left off the map.
    """
    points = mappable(thefts)

    m = folium.Map(location=VANCOUVER_CENTRE, zoom_start=12, tiles=None)
    folium.TileLayer("CartoDB positron", name="Toner Lite", opacity=0.45).add_to(m)

    cluster = MarkerCluster(
        name="Auto thefts", options={"maxClusterRadius": max_cluster_radius}
    ).add_to(m)

    for _, row in points.iterrows():
        icon = (
            folium.CustomIcon(str(icon_path), icon_size=(50, 50))
            if icon_path is not None
            else None
        )
        folium.Marker(
            location=[row["lat"], row["lon"]],
            popup=folium.Popup(popup_text(row), max_width=300),
            icon=icon,
        ).add_to(cluster)

    print(f"Mapped {len(points)} of {len(thefts)} incidents.")
    return m


def save_theft_map(m: folium.Map, output_path):
    m.save(str(output_path))
    print(f"Saved: {output_path}")
    return output_path
