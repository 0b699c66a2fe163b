from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Union

from staticmapkit.config import DEFAULT_HEIGHT, DEFAULT_MAP_TYPE, DEFAULT_WIDTH


class MapType(str, Enum):
    """Rendering style understood by the ``maptype`` parameter."""
    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    HYBRID = "hybrid"
    TERRAIN = "terrain"


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def as_param(self):
        """Render as the ``lat,lng`` text the Static Maps API expects."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Color:
    """32-bit ARGB color, e.g. ``Color(0xFFFF0000)`` for opaque red."""
    value: int


ColorLike = Union[Color, int, str, tuple]


@dataclass
class Marker:
    latitude: float
    longitude: float
    id: Optional[str] = None
    title: Optional[str] = None
    color: Optional[ColorLike] = None

    @property
    def location(self):
        return Location(self.latitude, self.longitude)


@dataclass
class Polyline:
    points: Sequence[Location]
    color: Optional[ColorLike] = None
    id: Optional[str] = None


@dataclass
class MapRequest:
    """
    Everything needed to build one Static Maps URL.

    Fields left as None fall back to the defaults in ``staticmapkit.config``
    when the request is resolved. ``zoom`` has no default here: the plain
    center/zoom image applies its own, while the marker and polyline images
    omit it unless it was given.
    """
    center: Optional[Location] = None
    zoom: Optional[int] = None
    markers: Optional[List[Marker]] = None
    polylines: Optional[List[Polyline]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    map_type: Optional[MapType] = None

    def resolve(self):
        """Return a copy with width, height and map type defaults filled in."""
        return replace(
            self,
            width=DEFAULT_WIDTH if self.width is None else self.width,
            height=DEFAULT_HEIGHT if self.height is None else self.height,
            map_type=MapType(self.map_type or DEFAULT_MAP_TYPE),
        )

    @property
    def has_markers(self):
        return bool(self.markers)

    @property
    def has_polylines(self):
        return bool(self.polylines)
