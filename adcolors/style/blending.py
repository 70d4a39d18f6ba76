# style/blending.py

from typing import List

from .colors import mix, resolve_color, round_half_up
from .engine import Style, color

RAINBOW = [color.red, color.yellow, color.green, color.cyan, color.blue, color.magenta]

def blend(text: str, color_a, color_b, ratio: float = 0.5, mode: str = 'normal') -> str:
    """
    Color text with the blend of two colors.

    Args:
        text: Text to color as a single span
        color_a: First color (name, hex or RGB triple)
        color_b: Second color (name, hex or RGB triple)
        ratio: 0.0 is pure color_a, 1.0 is pure color_b ('normal' mode only)
        mode: 'normal', 'multiply' or 'screen'

    Returns:
        Text wrapped in the blended 24-bit foreground color
    """
    r, g, b = mix(resolve_color(color_a), resolve_color(color_b), ratio, mode)
    return color.rgb(r, g, b)(text)

def gradient(text: str, start, end) -> str:
    """
    Color each character along a linear gradient from start to end.

    Character i of n gets fraction i / n, so the last character stops one
    step short of the end color.
    """
    start_rgb, end_rgb = resolve_color(start), resolve_color(end)
    length = len(text)
    out = []
    for i, char in enumerate(text):
        r, g, b = (round_half_up(s + (e - s) * i / length) for s, e in zip(start_rgb, end_rgb))
        out.append(color.rgb(r, g, b)(char))
    return ''.join(out)

def rainbow(text: str) -> str:
    """Cycle the six rainbow colors over the characters of text."""
    return ''.join(RAINBOW[i % len(RAINBOW)](char) for i, char in enumerate(text))

def generate_shades(base, count: int = 5, direction: str = 'darken') -> List[Style]:
    """
    Build styles stepping from base toward black ('darken') or white ('lighten').

    The first style is the base color itself and the last is the target.
    """
    base_rgb = resolve_color(base)
    if count <= 1:
        return [color.rgb(*base_rgb)] if count == 1 else []
    target = 255 if direction == 'lighten' else 0
    shades = []
    for i in range(count):
        ratio = i / (count - 1)
        r, g, b = (round_half_up(c * (1 - ratio) + target * ratio) for c in base_rgb)
        shades.append(color.rgb(r, g, b))
    return shades
