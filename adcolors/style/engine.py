# style/engine.py

from enum import Enum, auto
from dataclasses import dataclass
from typing import List, Tuple

from .colors import parse_hex, resolve_color
from .definitions import COLORS, EXTENDED_COLORS, RESET, STYLES, fmt

class InvalidColorFormat(ValueError):
    """Raised when a hex color is not exactly six hex digits."""

class InvalidPaletteIndex(ValueError):
    """Raised when a 256-color palette index is outside 0-255."""

class AttributeKind(Enum):
    """Every kind of name a Style can be asked for, in dispatch order."""
    STRUCTURAL_STYLE = auto()
    BASIC_COLOR = auto()
    TRUE_COLOR_FUNCTION = auto()
    HEX_FUNCTION = auto()
    PALETTE_FUNCTION = auto()
    NAMED_EXTENDED_COLOR = auto()
    UNKNOWN = auto()

TRUE_COLOR_FUNCTIONS = {'rgb': 38, 'bg_rgb': 48}
HEX_FUNCTIONS = {'hex': 38, 'bg_hex': 48}
PALETTE_FUNCTIONS = {'color256': 38, 'bg256': 48}

def classify(name: str) -> AttributeKind:
    """Resolve an attribute name to the kind of style it denotes."""
    if name in STYLES:
        return AttributeKind.STRUCTURAL_STYLE
    if name in COLORS:
        return AttributeKind.BASIC_COLOR
    if name in TRUE_COLOR_FUNCTIONS:
        return AttributeKind.TRUE_COLOR_FUNCTION
    if name in HEX_FUNCTIONS:
        return AttributeKind.HEX_FUNCTION
    if name in PALETTE_FUNCTIONS:
        return AttributeKind.PALETTE_FUNCTION
    if name in EXTENDED_COLORS:
        return AttributeKind.NAMED_EXTENDED_COLOR
    return AttributeKind.UNKNOWN

def true_color(layer: int, r, g, b) -> str:
    """Escape fragment for a 24-bit color; layer is 38 (fg) or 48 (bg)."""
    return fmt(f'{layer};2;{r};{g};{b}')

def _hex_rgb(value: str) -> Tuple[int, int, int]:
    rgb = parse_hex(value, allow_short=False) if isinstance(value, str) else None
    if rgb is None:
        raise InvalidColorFormat(f"Invalid hex color '{value}'. Must be 6 hex digits.")
    return rgb

@dataclass(frozen=True)
class Style:
    """
    Immutable, chainable style builder.

    Each attribute access returns a new Style whose prefix is this one's
    prefix plus the fragment the attribute stands for. Calling a Style
    wraps text in the prefix and a single reset:

        color.bold.red("error")
        color.hex("#1E90FF").underline("link")
        color.bg256(236).gold("note")
    """
    prefix: str = ''

    def __call__(self, text) -> str:
        return f"{self.prefix}{text}{RESET}"

    def _extend(self, fragment: str) -> 'Style':
        return Style(self.prefix + fragment)

    def __getattr__(self, name: str) -> 'Style':
        # Private and dunder lookups (copy, pickle, ...) are never styles
        if name.startswith('_'):
            raise AttributeError(name)

        kind = classify(name)
        if kind is AttributeKind.STRUCTURAL_STYLE:
            return self._extend(STYLES[name])
        if kind is AttributeKind.BASIC_COLOR:
            return self._extend(COLORS[name])
        if kind is AttributeKind.NAMED_EXTENDED_COLOR:
            return self._extend(true_color(38, *resolve_color(EXTENDED_COLORS[name])))
        raise AttributeError(f"no such style: '{name}'")

    def rgb(self, r: int, g: int, b: int) -> 'Style':
        """Add a 24-bit foreground color. Channels are not range checked."""
        return self._extend(true_color(TRUE_COLOR_FUNCTIONS['rgb'], r, g, b))

    def bg_rgb(self, r: int, g: int, b: int) -> 'Style':
        """Add a 24-bit background color. Channels are not range checked."""
        return self._extend(true_color(TRUE_COLOR_FUNCTIONS['bg_rgb'], r, g, b))

    def hex(self, value: str) -> 'Style':
        """Add a foreground color from a 6-digit hex string."""
        return self._extend(true_color(HEX_FUNCTIONS['hex'], *_hex_rgb(value)))

    def bg_hex(self, value: str) -> 'Style':
        """Add a background color from a 6-digit hex string."""
        return self._extend(true_color(HEX_FUNCTIONS['bg_hex'], *_hex_rgb(value)))

    def color256(self, code: int) -> 'Style':
        """Add a foreground color from the 256-color palette."""
        return self._palette(PALETTE_FUNCTIONS['color256'], code)

    def bg256(self, code: int) -> 'Style':
        """Add a background color from the 256-color palette."""
        return self._palette(PALETTE_FUNCTIONS['bg256'], code)

    def _palette(self, layer: int, code: int) -> 'Style':
        if not 0 <= code <= 255:
            raise InvalidPaletteIndex(f"256-color code must be between 0 and 255, got {code}")
        return self._extend(fmt(f'{layer};5;{code}'))

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(STYLES) | set(COLORS) | set(EXTENDED_COLORS))

    def __repr__(self) -> str:
        return f"Style({self.prefix!r})"

color = Style()

def style_for(name: str) -> Style:
    """Look up a style or color name on the root builder."""
    return getattr(color, name)
