"""
Tile colors.

Background colors cycle through four base colors: every third power of two starts at the next
base color, and the powers in between are interpolated towards it. Text is light or dark
depending on the luminance of the background.
"""

from dataclasses import dataclass
from typing import NamedTuple

from numpy import array, clip, dot, float64, floor, ndarray

from slidingtiles.config import is_tile_value


@dataclass(frozen=True)
class Theme:
    """Fixed colors of the game."""

    background_dark: str = '#072931'
    background_light: str = '#072931'
    text_dark: str = '#072931'
    text_light: str = '#f2ba0d'
    button: str = '#92cdb9'
    button_hover: str = '#b4ddcf'
    board: str = '#022244'
    cell: str = '#92cdb9'
    opacity: str = '99'  # hex alpha suffix, appended to any of the colors above


THEME = Theme()

# ##>: Yellow, magenta, blue, purple.
BASE_COLORS = ('#F2BA0D', '#F50A40', '#3949AB', '#6A0DAD')
INTERPOLATION_STEPS = 3

# ##>: Text turns light at or below this relative luminance.
LUMINANCE_THRESHOLD = 0.35

_LUMINANCE_WEIGHTS = array([0.2126, 0.7152, 0.0722])


class TileColors(NamedTuple):
    """Background and text colors of a tile, as ``#RRGGBB`` strings."""

    background: str
    text: str


def parse_hex(color: str) -> ndarray:
    """
    Parse a ``#RRGGBB`` color.

    Returns
    -------
    ndarray
        The (R, G, B) channels as floats.
    """
    code = color.lstrip('#')
    if len(code) != 6:
        raise ValueError(f'Expected a #RRGGBB color, got {color!r}')
    return array([int(code[i : i + 2], 16) for i in (0, 2, 4)], dtype=float64)


def to_hex(channels: ndarray) -> str:
    """Format (R, G, B) channels as an uppercase ``#RRGGBB`` string."""
    return '#' + ''.join(f'{int(channel):02X}' for channel in channels)


def interpolate(start: ndarray, end: ndarray, fraction: float) -> ndarray:
    """
    Linearly interpolate two colors channel by channel.

    Channels are rounded half away from zero and clamped to [0, 255].
    """
    channels = (1.0 - fraction) * start + fraction * end
    return clip(floor(channels + 0.5), 0, 255)


def relative_luminance(channels: ndarray) -> float:
    """Relative luminance of a color, between 0 and 1."""
    return float(dot(_LUMINANCE_WEIGHTS, channels)) / 255.0


def derive_colors(value: int) -> TileColors:
    """
    Compute the colors of a tile from its value.

    Parameters
    ----------
    value : int
        Tile value, a power of two greater or equal to 2.

    Returns
    -------
    TileColors
        The background and text colors.

    Raises
    ------
    ValueError
        If ``value`` is not a valid tile value.

    Example
    -------
    >>> derive_colors(2)
    TileColors(background='#F2BA0D', text='#072931')
    >>> derive_colors(16)
    TileColors(background='#F50A40', text='#f2ba0d')
    """
    if not is_tile_value(value):
        raise ValueError(f'Tile value must be a power of two >= 2, got {value}')

    # ##: Tiles start at 2**1.
    power = int(value).bit_length() - 2
    base_index = (power // INTERPOLATION_STEPS) % len(BASE_COLORS)
    next_index = (base_index + 1) % len(BASE_COLORS)
    fraction = (power % INTERPOLATION_STEPS) / INTERPOLATION_STEPS

    background = interpolate(parse_hex(BASE_COLORS[base_index]), parse_hex(BASE_COLORS[next_index]), fraction)
    if relative_luminance(background) <= LUMINANCE_THRESHOLD:
        text = THEME.text_light
    else:
        text = THEME.text_dark
    return TileColors(background=to_hex(background), text=text)
