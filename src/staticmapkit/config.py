# config.py
# Defaults for image size, zoom, map type and the Static Maps endpoint

STATIC_MAP_BASE_URL = "https://maps.googleapis.com/maps/api/staticmap"

DEFAULT_ZOOM = 4
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
DEFAULT_MAP_TYPE = "roadmap"

# Google rejects anything longer than this
MAX_URL_LENGTH = 8192

API_KEY_ENV_VAR = "GOOGLE_MAPS_API_KEY"
