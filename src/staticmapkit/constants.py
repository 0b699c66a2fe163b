# constants.py

from staticmapkit.types import Location

CENTER_OF_USA = Location(37.0902, -95.7129)
PORTLAND = Location(45.512794, -122.679565)

# Characters the Static Maps API expects unescaped inside parameter values
SAFE_QUERY_CHARS = ",|:"
