from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from staticmapkit.types import Location, Marker


class MapView(Protocol):
    """
    The parts of a live interactive map widget that are read for a snapshot.
    The widget must be visible; what happens otherwise is up to the widget.
    """

    async def visible_annotations(self) -> List[Marker]: ...

    async def center_location(self) -> Location: ...

    async def zoom_level(self) -> float: ...


@dataclass
class MapSnapshot:
    markers: List[Marker] = field(default_factory=list)
    center: Optional[Location] = None
    zoom: Optional[int] = None


async def read_snapshot(map_view):
    """
    Read the visible pins, center and zoom of a live map view.

    The three values are awaited one after another (pins, center, zoom) and
    are not read atomically: if the user pans or zooms in between, the
    snapshot mixes states. Zoom is truncated to an int.

    Args:
        map_view (MapView): A currently displayed map view.

    Returns:
        MapSnapshot: What the view showed while it was being read.
    """
    markers = await map_view.visible_annotations()
    center = await map_view.center_location()
    zoom = await map_view.zoom_level()

    return MapSnapshot(
        markers=list(markers or []),
        center=center,
        zoom=int(zoom) if zoom is not None else None,
    )
