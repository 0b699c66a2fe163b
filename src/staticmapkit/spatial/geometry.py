import math
import warnings
import geopandas as gpd
from shapely.geometry import LineString, MultiLineString, Point

from staticmapkit.types import Location, Marker, Polyline

WGS84 = "EPSG:4326"


def location_from_point(point):
    """
    Convert a shapely Point to a Location.
    Shapely stores (x, y) = (longitude, latitude).
    """
    return Location(point.y, point.x)


def polyline_from_linestring(line, color=None):
    """
    Convert a shapely LineString to a Polyline, keeping vertex order.

    Args:
        line (shapely.geometry.LineString): Line in lon/lat coordinates.
        color (optional): Stroke color, any form accepted by ``to_argb``.

    Returns:
        Polyline
    """
    points = [Location(y, x) for x, y, *_ in line.coords]
    return Polyline(points=points, color=color)


def _is_missing(value):
    return value is None or (isinstance(value, float) and math.isnan(value))


def _as_frame(data):
    if isinstance(data, gpd.GeoSeries):
        return gpd.GeoDataFrame(geometry=data)
    return data


def _to_wgs84(gdf):
    if gdf.crs is not None and not gdf.crs.equals(WGS84):
        warnings.warn(f"Input GeoDataFrame is in {gdf.crs}. Reprojecting to {WGS84} for the static map.")
        return gdf.to_crs(WGS84)
    return gdf


def markers_from_geodataframe(gdf, title_column=None):
    """
    Build one Marker per row of a GeoDataFrame.

    Args:
        gdf (geopandas.GeoDataFrame or geopandas.GeoSeries): Features to pin.
            Polygons and lines are pinned at their centroid.
        title_column (str, optional): Column used as the marker title.

    Returns:
        list[Marker]: Markers in row order. Empty for an empty frame.
    """
    gdf = _as_frame(gdf)
    if gdf.empty:
        return []

    gdf = _to_wgs84(gdf)

    geoms = gdf.geometry
    if not all(isinstance(g, Point) for g in geoms):
        # Centroids in degrees are good enough for placing a pin
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            geoms = geoms.centroid

    titles = gdf[title_column] if title_column else [None] * len(gdf)

    markers = []
    for geom, title in zip(geoms, titles):
        if geom is None or geom.is_empty:
            continue
        markers.append(Marker(latitude=geom.y, longitude=geom.x,
                              title=None if _is_missing(title) else str(title)))
    return markers


def polylines_from_geodataframe(gdf, color_column=None):
    """
    Build Polylines from the line geometries of a GeoDataFrame.

    Each LineString becomes one polyline and each part of a MultiLineString
    becomes its own. Rows with other geometry types are skipped.

    Args:
        gdf (geopandas.GeoDataFrame or geopandas.GeoSeries): Line features.
        color_column (str, optional): Column holding a per-row stroke color.

    Returns:
        list[Polyline]
    """
    gdf = _as_frame(gdf)
    if gdf.empty:
        return []

    gdf = _to_wgs84(gdf)
    colors = gdf[color_column] if color_column else [None] * len(gdf)

    polylines = []
    skipped = 0
    for geom, color in zip(gdf.geometry, colors):
        color = None if _is_missing(color) else color
        if isinstance(geom, LineString):
            polylines.append(polyline_from_linestring(geom, color=color))
        elif isinstance(geom, MultiLineString):
            polylines.extend(polyline_from_linestring(part, color=color) for part in geom.geoms)
        else:
            skipped += 1

    if skipped:
        warnings.warn(f"Skipped {skipped} non-line geometries when building polylines.")
    return polylines
