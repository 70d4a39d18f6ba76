# style/__init__.py

from .definitions import (
    ANSI_HEX, BOX_STYLES, COLORS, EXTENDED_COLORS, NAMED_COLORS, RESET, STYLES,
    BoxGlyphs, merge_named_colors,
)
from .colors import Color, color_distance, nearest_named_color, resolve_color
from .engine import (
    AttributeKind, InvalidColorFormat, InvalidPaletteIndex, Style, classify, color,
)
from .blending import blend, generate_shades, gradient, rainbow

__all__ = [
    'ANSI_HEX', 'BOX_STYLES', 'COLORS', 'EXTENDED_COLORS', 'NAMED_COLORS', 'RESET', 'STYLES',
    'BoxGlyphs', 'merge_named_colors',
    'Color', 'color_distance', 'nearest_named_color', 'resolve_color',
    'AttributeKind', 'InvalidColorFormat', 'InvalidPaletteIndex', 'Style', 'classify', 'color',
    'blend', 'generate_shades', 'gradient', 'rainbow',
]
