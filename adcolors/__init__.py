# __init__.py

from .logger import Logger, StyledFormatter
from .text import center, pad, strip, visible_length, wrap
from .layout import ascii_art, box, bullet_list, line, progress_bar, table, title
from .style import (
    EXTENDED_COLORS, NAMED_COLORS, STYLES, COLORS,
    InvalidColorFormat, InvalidPaletteIndex, Style, color,
    blend, generate_shades, gradient, nearest_named_color, rainbow, resolve_color,
)
from .display import Display, Terminal
from .display.animations import Spinner, animate

__all__ = [
    "color", "Style", "STYLES", "COLORS", "EXTENDED_COLORS", "NAMED_COLORS",
    "InvalidColorFormat", "InvalidPaletteIndex",
    "resolve_color", "blend", "gradient", "rainbow", "generate_shades", "nearest_named_color",
    "strip", "visible_length", "pad", "center", "wrap",
    "box", "table", "line", "title", "bullet_list", "progress_bar", "ascii_art",
    "Display", "Terminal", "Spinner", "animate",
    "Logger", "StyledFormatter",
]
