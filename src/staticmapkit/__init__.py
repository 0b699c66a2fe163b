from .core import StaticMapProvider
from .types import Color, Location, MapRequest, MapType, Marker, Polyline
from .io.mapview import MapSnapshot, read_snapshot
from .__about__ import __version__
