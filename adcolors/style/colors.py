# style/colors.py

import math
import logging
from typing import Optional, Tuple

from .definitions import NAMED_COLORS

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
HEX_DIGITS = set('0123456789abcdefABCDEF')

def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))

def parse_hex(value: str, allow_short: bool = True) -> Optional[Color]:
    """
    Parse a hex color string into an RGB triple.

    Args:
        value: Hex digits with or without a leading '#'
        allow_short: Accept the 3-digit form, expanded by doubling each digit

    Returns:
        The RGB triple, or None when value is not a valid hex color
    """
    digits = value[1:] if value.startswith('#') else value
    if not digits or not set(digits) <= HEX_DIGITS:
        return None
    if len(digits) == 3 and allow_short:
        digits = ''.join(d * 2 for d in digits)
    if len(digits) != 6:
        return None
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))

def resolve_color(value) -> Color:
    """
    Resolve a color name, hex string or RGB triple into an RGB triple.

    Unresolvable input falls back to black instead of raising.
    """
    if isinstance(value, str):
        rgb = parse_hex(NAMED_COLORS.get(value, value))
        if rgb is not None:
            return rgb
    elif (isinstance(value, (list, tuple)) and len(value) == 3
          and all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value)):
        return tuple(value)
    logger.debug(f"Unresolvable color {value!r}, using black")
    return BLACK

def mix(color_a: Color, color_b: Color, ratio: float = 0.5, mode: str = 'normal') -> Color:
    """Combine two RGB triples channel by channel under a blend mode."""
    if mode == 'multiply':
        return tuple(round_half_up((a / 255) * (b / 255) * 255) for a, b in zip(color_a, color_b))
    if mode == 'screen':
        return tuple(255 - round_half_up((255 - a) * (255 - b) / 255) for a, b in zip(color_a, color_b))
    if mode != 'normal':
        logger.debug(f"Unknown blend mode {mode!r}, using normal")
    return tuple(round_half_up(a * (1 - ratio) + b * ratio) for a, b in zip(color_a, color_b))

def color_distance(color_a: Color, color_b: Color) -> float:
    """Euclidean distance between two colors in RGB space."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(color_a, color_b)))

def nearest_named_color(value) -> str:
    """
    Return the named color closest to value.

    Names are compared in table order and the first one at the minimum
    distance wins.
    """
    target = resolve_color(value)
    nearest, min_distance = '', math.inf
    for name, hex_value in NAMED_COLORS.items():
        distance = color_distance(target, resolve_color(hex_value))
        if distance < min_distance:
            nearest, min_distance = name, distance
    return nearest
