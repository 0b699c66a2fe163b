from shapely.geometry import LineString
from staticmapkit import StaticMapProvider, Location, Marker, MapType
from staticmapkit.constants import PORTLAND
from staticmapkit.spatial.geometry import polyline_from_linestring
from staticmapkit.io.download import download_static_map


def main():
    print("=== staticmapkit: Static Map URL Example ===")

    try:
        provider = StaticMapProvider.from_env()
    except Exception as e:
        print(f"   {e}")
        return

    print("1. Plain map centered on Kansas")
    print("  ", provider.get_static_uri(Location(38.0, -97.0), zoom=4))

    print("2. Pins in Portland")
    markers = [Marker(PORTLAND.latitude, PORTLAND.longitude), Marker(45.5231, -122.6765)]
    print("  ", provider.get_static_uri_with_markers(markers, map_type=MapType.HYBRID))

    print("3. Two routes in different colors")
    routes = [
        polyline_from_linestring(LineString([(-122.68, 45.51), (-122.66, 45.52)]), color="#FF0000"),
        polyline_from_linestring(LineString([(-122.69, 45.50), (-122.67, 45.49)]), color="#0000FF"),
    ]
    url = provider.get_static_uri_with_polylines(routes, width=640, height=480)
    print("  ", url)

    print("4. Saving the route map")
    try:
        path = download_static_map(url, "output/routes.png")
        print(f"   Saved to {path}")
    except Exception as e:
        print(f"   Failed to download map: {e}")

    print("=== Done ===")

if __name__ == "__main__":
    main()
