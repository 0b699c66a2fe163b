import numbers
import string

from staticmapkit.exceptions import InvalidColorError
from staticmapkit.types import Color

OPAQUE = 0xFF000000


def _parse_hex(text):
    raw = text.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    elif raw[:2].lower() == "0x":
        raw = raw[2:]

    if len(raw) not in (6, 8) or any(c not in string.hexdigits for c in raw):
        raise InvalidColorError(f"Unrecognised color '{text}'. Use #RRGGBB, #AARRGGBB or the 0x forms.")

    value = int(raw, 16)
    # Six digits carry no alpha: treat them as opaque
    return value | OPAQUE if len(raw) == 6 else value


def _parse_channels(channels):
    if len(channels) not in (3, 4):
        raise InvalidColorError(f"Expected (r, g, b) or (r, g, b, a), got {channels!r}.")
    if any(not isinstance(c, int) or not 0 <= c <= 255 for c in channels):
        raise InvalidColorError(f"Color channels must be integers in 0..255, got {channels!r}.")

    r, g, b = channels[:3]
    a = channels[3] if len(channels) == 4 else 255
    return (a << 24) | (r << 16) | (g << 8) | b


def to_argb(color):
    """
    Normalise a color to a 32-bit ARGB integer.

    Args:
        color (Color, int, str or tuple): A ``Color``, an ARGB integer, hex text
            (``#RRGGBB``, ``#AARRGGBB``, ``0xRRGGBB``, ``0xAARRGGBB``) or an
            ``(r, g, b[, a])`` tuple.

    Returns:
        int: The ARGB value.

    Raises:
        InvalidColorError: If the color cannot be interpreted.
    """
    if isinstance(color, Color):
        color = color.value

    if isinstance(color, bool):
        raise InvalidColorError(f"Unsupported color value {color!r}.")
    if isinstance(color, numbers.Integral):
        color = int(color)
        if not 0 <= color <= 0xFFFFFFFF:
            raise InvalidColorError(f"ARGB value out of range: {color:#x}.")
        return color
    if isinstance(color, str):
        return _parse_hex(color)
    if isinstance(color, tuple):
        return _parse_channels(color)

    raise InvalidColorError(f"Unsupported color type: {type(color).__name__}.")


def to_hex_rgb(color):
    """
    Format a color as ``0xRRGGBB`` with the alpha channel stripped.

    The RGB channels are always zero padded to six digits, so transparent or
    dark colors keep their full value.
    """
    return f"0x{to_argb(color) & 0xFFFFFF:06x}"
