import numpy as np
import pandas as pd
import geopandas as gpd

UTM_ZONE_10 = "EPSG:32610"
WGS84 = "EPSG:4326"

COORD_OK = "ok"
COORD_ZERO_EASTING = "zero_easting"
COORD_INVALID = "invalid"

# Northern hemisphere UTM bounds in metres
MAX_EASTING = 1_000_000
MAX_NORTHING = 10_000_000


def utm_to_lat_lon(easting: pd.Series, northing: pd.Series) -> pd.DataFrame:
    """
    Convert UTM Zone 10 easting/northing to WGS84 latitude/longitude.

    Returns a frame aligned with the input index holding lat, lon and
    coord_status. An easting of exactly 0 is the zone edge the source uses
    for unset locations: its raw lat/lon is kept but tagged "zero_easting".
    Anything else outside the zone is "invalid" with NaN coordinates.
    """
    easting = pd.to_numeric(pd.Series(easting), errors="coerce").astype("float64")
    northing = pd.to_numeric(pd.Series(northing), errors="coerce").astype("float64")
    northing.index = easting.index

    lat = pd.Series(np.nan, index=easting.index, dtype="float64")
    lon = pd.Series(np.nan, index=easting.index, dtype="float64")

    finite = np.isfinite(easting) & np.isfinite(northing)
    if finite.any():
        points = gpd.GeoSeries(
            gpd.points_from_xy(easting[finite], northing[finite]),
            index=easting[finite].index,
            crs=UTM_ZONE_10,
        ).to_crs(WGS84)
        lat[finite] = points.y
        lon[finite] = points.x

    in_zone = (
        (easting > 0)
        & (easting < MAX_EASTING)
        & (northing >= 0)
        & (northing <= MAX_NORTHING)
    )
    computed = np.isfinite(lat) & np.isfinite(lon) & lat.between(-90, 90)
    zero_easting = (easting == 0) & finite & computed

    status = pd.Series(COORD_INVALID, index=easting.index, dtype="object")
    status[in_zone & computed] = COORD_OK
    status[zero_easting] = COORD_ZERO_EASTING

    invalid = status == COORD_INVALID
    lat[invalid] = np.nan
    lon[invalid] = np.nan

    return pd.DataFrame({"lat": lat, "lon": lon, "coord_status": status})


def normalize_coordinates(df: pd.DataFrame, x_col="X", y_col="Y") -> pd.DataFrame:
    missing = [c for c in (x_col, y_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing coordinate columns: {missing}")

    converted = utm_to_lat_lon(df[x_col], df[y_col])
    out = df.drop(columns=[x_col, y_col]).copy()
    out["lat"] = converted["lat"]
    out["lon"] = converted["lon"]
    out["coord_status"] = converted["coord_status"]
    return out


def mappable(df: pd.DataFrame) -> pd.DataFrame:
    """Records with a real location, safe to plot as points."""
    return df[df["coord_status"] == COORD_OK].copy()
