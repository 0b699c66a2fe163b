import os
import warnings

from staticmapkit.config import API_KEY_ENV_VAR, DEFAULT_ZOOM, MAX_URL_LENGTH, STATIC_MAP_BASE_URL
from staticmapkit.constants import CENTER_OF_USA
from staticmapkit.exceptions import MissingApiKeyError
from staticmapkit.io.mapview import read_snapshot
from staticmapkit.types import MapRequest
from staticmapkit.url.color import to_hex_rgb
from staticmapkit.url.query import QueryParams, encode_url


class StaticMapProvider:
    """
    Builds Google Static Maps URLs.
    One provider holds one API key, which is written verbatim into every URL.
    """

    def __init__(self, api_key, base_url=STATIC_MAP_BASE_URL):
        """
        Args:
            api_key (str): Google Maps API key. Not validated.
            base_url (str): Static Maps endpoint.
        """
        self.api_key = api_key
        self.base_url = base_url

    @classmethod
    def from_env(cls, env_var=API_KEY_ENV_VAR):
        """Create a provider from the API key stored in ``env_var``."""
        api_key = os.getenv(env_var)
        if not api_key:
            raise MissingApiKeyError(f"Missing {env_var}. Set it in the environment.")
        return cls(api_key)

    def get_static_uri(self, center, zoom=None, width=None, height=None, map_type=None):
        """
        URL for a map centered on ``center`` at ``zoom`` (default 4).
        The image is 600x400 unless ``width``/``height`` are given.
        """
        request = MapRequest(
            center=center,
            zoom=DEFAULT_ZOOM if zoom is None else zoom,
            width=width,
            height=height,
            map_type=map_type,
        )
        return self.build_url(request)

    def get_static_uri_with_markers(self, markers, width=None, height=None, map_type=None, center=None):
        """
        URL for a map with one pin per marker.
        Google fits the viewport to the pins unless ``center`` is given.
        """
        request = MapRequest(
            markers=markers,
            center=center,
            width=width,
            height=height,
            map_type=map_type,
        )
        return self.build_url(request)

    def get_static_uri_with_polylines(self, polylines, width=None, height=None, map_type=None, center=None):
        """URL for a map drawing each polyline as its own path."""
        request = MapRequest(
            polylines=polylines,
            center=center,
            width=width,
            height=height,
            map_type=map_type,
        )
        return self.build_url(request)

    def get_static_uri_with_markers_and_zoom(self, markers, width=None, height=None, map_type=None,
                                             center=None, zoom=None):
        """
        URL for a map with pins around ``center``.
        Pins decide the viewport, so ``zoom`` is accepted but not sent.
        """
        request = MapRequest(
            markers=markers,
            center=center,
            zoom=zoom,
            width=width,
            height=height,
            map_type=map_type,
        )
        return self.build_url(request)

    async def get_image_uri_from_map(self, map_view, width=None, height=None, map_type=None):
        """
        URL reproducing what a live map view currently shows.

        The view's pins, center and zoom are read one after another (see
        ``read_snapshot``), so a view that moves mid-read yields a mixed
        snapshot. Errors from the view propagate unchanged.
        """
        snapshot = await read_snapshot(map_view)
        request = MapRequest(
            markers=snapshot.markers,
            center=snapshot.center,
            zoom=snapshot.zoom,
            width=width,
            height=height,
            map_type=map_type,
        )
        return self.build_url(request)

    def build_url(self, request):
        """
        Build the URL for a ``MapRequest``.

        Markers win over polylines, which win over a plain center/zoom image.
        Only the plain image carries a zoom.
        Without any center, markers or polylines the map is centered on the USA.

        Args:
            request (MapRequest): What to draw. Unset size and map type use defaults.

        Returns:
            str: The Static Maps URL.
        """
        request = request.resolve()
        center = request.center
        if center is None and not request.has_markers and not request.has_polylines:
            center = CENTER_OF_USA

        params = QueryParams()
        paths = []

        if request.has_markers:
            params.set("markers", "|".join(m.location.as_param() for m in request.markers))
            self._add_common(params, request)
        elif request.has_polylines:
            self._add_common(params, request)
            paths = [self._path_value(polyline) for polyline in request.polylines]
        else:
            params.set("center", center.as_param())
            params.set("zoom", DEFAULT_ZOOM if request.zoom is None else request.zoom)
            self._add_common(params, request)

        if center is not None:
            params.set("center", center.as_param())

        # path repeats, so it goes after every single-valued parameter
        for path in paths:
            params.add("path", path)

        url = encode_url(self.base_url, params)
        if len(url) > MAX_URL_LENGTH:
            warnings.warn(
                f"Static map URL is {len(url)} characters; Google rejects URLs over {MAX_URL_LENGTH}."
            )
        return url

    def _add_common(self, params, request):
        params.set("size", f"{request.width}x{request.height}")
        params.set("maptype", request.map_type.value)
        params.set("key", self.api_key)

    @staticmethod
    def _path_value(polyline):
        points = "|".join(point.as_param() for point in polyline.points)
        if polyline.color is not None:
            return f"color:{to_hex_rgb(polyline.color)}|{points}"
        return points
