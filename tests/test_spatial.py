import pytest
import geopandas as gpd
from shapely.geometry import Point, LineString, MultiLineString, box
from staticmapkit import StaticMapProvider
from staticmapkit.types import Location, Marker
from staticmapkit.spatial.geometry import (
    location_from_point,
    polyline_from_linestring,
    markers_from_geodataframe,
    polylines_from_geodataframe,
)

def test_location_from_point_swaps_axes():
    assert location_from_point(Point(-97.0, 38.0)) == Location(38.0, -97.0)

def test_polyline_from_linestring():
    line = LineString([(2, 1), (4, 3), (6, 5)])
    polyline = polyline_from_linestring(line, color="#FF0000")

    assert polyline.points == [Location(1, 2), Location(3, 4), Location(5, 6)]
    assert polyline.color == "#FF0000"

def test_markers_from_points():
    gdf = gpd.GeoDataFrame(
        {'name': ['Clinic', 'School']},
        geometry=[Point(2, 1), Point(4, 3)],
        crs="EPSG:4326"
    )
    markers = markers_from_geodataframe(gdf, title_column='name')

    assert markers == [Marker(1, 2, title='Clinic'), Marker(3, 4, title='School')]

def test_markers_from_polygons_use_centroid():
    gdf = gpd.GeoDataFrame(geometry=[box(0, 0, 2, 4)], crs="EPSG:4326")
    markers = markers_from_geodataframe(gdf)

    assert len(markers) == 1
    assert markers[0].latitude == pytest.approx(2)
    assert markers[0].longitude == pytest.approx(1)

def test_markers_reprojected_from_metric_crs():
    gdf = gpd.GeoDataFrame(geometry=[Point(0, 0)], crs="EPSG:3857")

    with pytest.warns(UserWarning, match="Reprojecting"):
        markers = markers_from_geodataframe(gdf)

    assert markers[0].latitude == pytest.approx(0)
    assert markers[0].longitude == pytest.approx(0)

def test_markers_from_geoseries():
    series = gpd.GeoSeries([Point(2, 1)], crs="EPSG:4326")
    assert markers_from_geodataframe(series) == [Marker(1, 2)]

def test_empty_frame_gives_no_markers():
    gdf = gpd.GeoDataFrame(geometry=[], crs="EPSG:4326")
    assert markers_from_geodataframe(gdf) == []
    assert polylines_from_geodataframe(gdf) == []

def test_polylines_from_lines():
    gdf = gpd.GeoDataFrame(
        {'color': ['#FF0000', '#0000FF', None]},
        geometry=[
            LineString([(0, 0), (1, 1)]),
            MultiLineString([[(2, 2), (3, 3)], [(4, 4), (5, 5)]]),
            Point(9, 9),
        ],
        crs="EPSG:4326"
    )

    with pytest.warns(UserWarning, match="Skipped 1"):
        polylines = polylines_from_geodataframe(gdf, color_column='color')

    assert len(polylines) == 3
    assert [p.color for p in polylines] == ['#FF0000', '#0000FF', '#0000FF']
    assert polylines[1].points == [Location(2, 2), Location(3, 3)]

def test_polylines_feed_the_builder():
    gdf = gpd.GeoDataFrame(geometry=[LineString([(2, 1), (4, 3)])], crs="EPSG:4326")
    url = StaticMapProvider("k").get_static_uri_with_polylines(polylines_from_geodataframe(gdf))

    assert url.endswith("&path=1.0,2.0|3.0,4.0")
