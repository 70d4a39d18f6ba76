# style/definitions.py

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple

def fmt(code: str) -> str:
    """Build an SGR escape fragment from its parameter string."""
    return f'\033[{code}m'

RESET = fmt('0')
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

# Structural styles
STYLES: Mapping[str, str] = MappingProxyType({
    'reset': RESET,
    'bold': fmt('1'),
    'dim': fmt('2'),
    'italic': fmt('3'),
    'underline': fmt('4'),
    'inverse': fmt('7'),
    'hidden': fmt('8'),
    'strikethrough': fmt('9'),
    'overline': fmt('53'),
})

_BASIC = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']
_BRIGHT = ['gray'] + [f'bright_{name}' for name in _BASIC[1:]]

def _color_codes() -> Dict[str, str]:
    codes = {}
    for offset, name in enumerate(_BASIC):
        codes[name] = fmt(str(30 + offset))
    for offset, name in enumerate(_BRIGHT):
        codes[name] = fmt(str(90 + offset))
    for offset, name in enumerate(_BASIC):
        codes[f'bg_{name}'] = fmt(str(40 + offset))
    for offset, name in enumerate(_BRIGHT):
        codes[f'bg_{name}'] = fmt(str(100 + offset))
    return codes

# Basic 16 foreground and background colors
COLORS: Mapping[str, str] = MappingProxyType(_color_codes())

# Closest true hex of each basic ANSI foreground color
ANSI_HEX: Mapping[str, str] = MappingProxyType({
    'black': '#000000',
    'red': '#CD0000',
    'green': '#00CD00',
    'yellow': '#CDCD00',
    'blue': '#0000CD',
    'magenta': '#CD00CD',
    'cyan': '#00CDCD',
    'white': '#E5E5E5',
    'gray': '#808080',
    'bright_red': '#FF0000',
    'bright_green': '#00FF00',
    'bright_yellow': '#FFFF00',
    'bright_blue': '#0000FF',
    'bright_magenta': '#FF00FF',
    'bright_cyan': '#00FFFF',
    'bright_white': '#FFFFFF',
})

EXTENDED_COLORS: Mapping[str, str] = MappingProxyType({
    'maroon': '#800000',
    'darkred': '#8B0000',
    'firebrick': '#B22222',
    'crimson': '#DC143C',
    'tomato': '#FF6347',
    'coral': '#FF7F50',
    'indianred': '#CD5C5C',
    'lightcoral': '#F08080',
    'salmon': '#FA8072',
    'darksalmon': '#E9967A',
    'lightsalmon': '#FFA07A',
    'orangered': '#FF4500',
    'darkorange': '#FF8C00',
    'orange': '#FFA500',
    'gold': '#FFD700',
    'yellowgreen': '#9ACD32',
    'olivedrab': '#6B8E23',
    'olive': '#808000',
    'darkolivegreen': '#556B2F',
    'forestgreen': '#228B22',
    'seagreen': '#2E8B57',
    'mediumseagreen': '#3CB371',
    'darkcyan': '#008B8B',
    'teal': '#008080',
    'darkturquoise': '#00CED1',
    'turquoise': '#40E0D0',
    'lightseagreen': '#20B2AA',
    'cadetblue': '#5F9EA0',
    'steelblue': '#4682B4',
    'cornflowerblue': '#6495ED',
    'royalblue': '#4169E1',
    'mediumblue': '#0000CD',
    'darkblue': '#00008B',
    'navy': '#000080',
    'midnightblue': '#191970',
    'indigo': '#4B0082',
    'darkmagenta': '#8B008B',
    'purple': '#800080',
    'mediumorchid': '#BA55D3',
    'orchid': '#DA70D6',
    'violet': '#EE82EE',
    'plum': '#DDA0DD',
    'thistle': '#D8BFD8',
    'silver': '#C0C0C0',
    'lightgray': '#D3D3D3',
    'darkgray': '#A9A9A9',
    'dimgray': '#696969',
    'slategray': '#708090',
    'lightslategray': '#778899',
    'rosybrown': '#BC8F8F',
    'palevioletred': '#D87093',
    'hotpink': '#FF69B4',
    'deeppink': '#FF1493',
    'fuchsia': '#FF00FF',
    'paleturquoise': '#AFEEEE',
    'lightblue': '#ADD8E6',
    'skyblue': '#87CEEB',
    'deepskyblue': '#00BFFF',
    'dodgerblue': '#1E90FF',
    'azure': '#F0FFFF',
    'aliceblue': '#F0F8FF',
    'ghostwhite': '#F8F8FF',
})

def merge_named_colors(
    ansi: Mapping[str, str],
    extended: Mapping[str, str]
) -> Mapping[str, str]:
    """
    Combine the ANSI and extended tables into one read-only mapping.

    Extended names come first in iteration order and win when both tables
    define the same key; ANSI names are only added where absent.
    """
    merged = dict(extended)
    for name, hex_value in ansi.items():
        merged.setdefault(name, hex_value)
    return MappingProxyType(merged)

NAMED_COLORS: Mapping[str, str] = merge_named_colors(ANSI_HEX, EXTENDED_COLORS)

class BoxGlyphs(NamedTuple):
    """Border characters of a box style."""
    top_left: str
    horizontal: str
    top_right: str
    vertical: str
    bottom_left: str
    bottom_right: str

BOX_STYLES: Mapping[str, BoxGlyphs] = MappingProxyType({
    'single': BoxGlyphs('╭', '─', '╮', '│', '╰', '╯'),
    'double': BoxGlyphs('╔', '═', '╗', '║', '╚', '╝'),
    'triple': BoxGlyphs('╓', '─', '╖', '║', '╙', '╜'),
})

# 5-row block font used by ascii_art()
ASCII_FONT: Mapping[str, List[str]] = MappingProxyType({
    'A': [" ███ ", "█   █", "█████", "█   █", "█   █"],
    'B': ["████ ", "█   █", "████ ", "█   █", "████ "],
    'C': [" ███ ", "█   █", "█    ", "█   █", " ███ "],
    'D': ["████ ", "█   █", "█   █", "█   █", "████ "],
    'E': ["█████", "█    ", "███  ", "█    ", "█████"],
    'I': ["█████", "  █  ", "  █  ", "  █  ", "█████"],
    'L': ["█    ", "█    ", "█    ", "█    ", "█████"],
    'M': ["█   █", "██ ██", "█ █ █", "█   █", "█   █"],
    'O': [" ███ ", "█   █", "█   █", "█   █", " ███ "],
    'P': ["████ ", "█   █", "████ ", "█    ", "█    "],
    'R': ["████ ", "█   █", "████ ", "█ █  ", "█  ██"],
    'S': [" ████", "█    ", " ███ ", "    █", "████ "],
    'T': ["█████", "  █  ", "  █  ", "  █  ", "  █  "],
    ' ': ["     ", "     ", "     ", "     ", "     "],
})
FONT_HEIGHT = 5
FONT_WIDTH = 5
