from .query import QueryParams, encode_url
from .color import to_argb, to_hex_rgb
