# layout.py

import shutil
import logging
from typing import Iterable, List, Optional, Sequence

from .text import center, pad, strip, visible_length
from .style.colors import resolve_color, round_half_up
from .style.definitions import ASCII_FONT, BOX_STYLES, FONT_HEIGHT, FONT_WIDTH
from .style.engine import color

logger = logging.getLogger(__name__)

RULE_CHAR = '─'

def box(text: str, border_color='white', style: str = 'single', padding: int = 1) -> str:
    """
    Draw a box around text.

    Args:
        text: Text to enclose, may span several lines and contain styling
        border_color: Color of the border glyphs (name, hex or RGB triple)
        style: 'single', 'double' or 'triple'
        padding: Extra spaces between the border and the text on each side

    Returns:
        The boxed text, one string with newline-separated rows
    """
    glyphs = BOX_STYLES.get(style)
    if glyphs is None:
        logger.debug(f"Unknown box style {style!r}, using single")
        glyphs = BOX_STYLES['single']
    border = color.rgb(*resolve_color(border_color))

    lines = text.split('\n')
    max_len = max(visible_length(line) for line in lines)
    gap = ' ' * (padding + 1)
    bar = glyphs.horizontal * (max_len + 2 + padding * 2)

    rows = [border(glyphs.top_left + bar + glyphs.top_right)]
    for line in lines:
        rows.append(f"{border(glyphs.vertical)}{gap}{pad(line, max_len)}{gap}{border(glyphs.vertical)}")
    rows.append(border(glyphs.bottom_left + bar + glyphs.bottom_right))
    return '\n'.join(rows)

def _align_cell(cell: str, width: int, alignment: str) -> str:
    if alignment == 'right':
        return pad(cell, width, side='left')
    if alignment == 'center':
        left = (width - visible_length(cell)) // 2
        return pad(' ' * left + cell, width)
    return pad(cell, width)

def table(rows: Sequence[Sequence], align: Optional[Sequence[str]] = None) -> str:
    """
    Format rows as a table; the first row is the header.

    Columns are as wide as their widest cell, measured without escape codes.
    Alignment is given per column ('left', 'center', 'right'), default left.
    """
    if not rows:
        return ''
    align = list(align or [])
    columns = max(len(row) for row in rows)
    cells = [[str(row[i]) if i < len(row) else '' for i in range(columns)] for row in rows]
    widths = [max(visible_length(row[i]) for row in cells) for i in range(columns)]

    def format_row(row: List[str]) -> str:
        return ' │ '.join(
            _align_cell(cell, widths[i], align[i] if i < len(align) else 'left')
            for i, cell in enumerate(row)
        )

    separator = '─┼─'.join(RULE_CHAR * w for w in widths)
    out = [color.bold(format_row(cells[0])), color.dim(separator)]
    out.extend(format_row(row) for row in cells[1:])
    return '\n'.join(out)

def line(width: int, text: str = '') -> str:
    """Horizontal rule of the given width, optionally with text in the middle."""
    text_len = visible_length(text)
    if text_len == 0:
        return RULE_CHAR * width

    side = RULE_CHAR * max(0, (width - text_len - 2) // 2)
    rule = f"{side} {text} {side}"
    # Odd widths come out one short
    if visible_length(rule) < width:
        rule += RULE_CHAR
    return rule

def title(text: str, subtitle: str = '', width: Optional[int] = None) -> str:
    """Bold centered title with an optional dim centered subtitle."""
    if width is None:
        width = shutil.get_terminal_size().columns
    lines = [color.bold(center(text, width))]
    if subtitle:
        lines.append(color.dim(center(subtitle, width)))
    return '\n'.join(lines)

def bullet_list(items: Iterable, symbol: str = '•') -> str:
    """One item per line, each led by a cyan symbol."""
    return '\n'.join(f"{color.cyan(symbol)} {item}" for item in items)

def progress_bar(
    value: float,
    total: float,
    width: int = 50,
    filled_char: str = '█',
    empty_char: str = '░'
) -> str:
    """
    Render a progress bar colored red, yellow or green by completion.

    Args:
        value: Current value
        total: Value at completion; non-positive totals count as no progress
        width: Number of bar characters
        filled_char: Character for the completed part
        empty_char: Character for the remaining part

    Returns:
        The bar followed by the rounded percentage
    """
    progress = min(max(value / total, 0), 1) if total > 0 else 0
    filled = round_half_up(width * progress)
    percentage = round_half_up(progress * 100)

    if percentage >= 70:
        fill_style = color.green
    elif percentage >= 30:
        fill_style = color.yellow
    else:
        fill_style = color.red

    return f"{fill_style(filled_char * filled)}{color.dim(empty_char * (width - filled))} {percentage}%"

def ascii_art(text: str) -> str:
    """Render text in the 5-row block font; unknown characters become blanks."""
    blank = ' ' * (FONT_WIDTH + 1)
    rows = []
    for i in range(FONT_HEIGHT):
        row = ''.join(
            ASCII_FONT[char][i] + ' ' if char in ASCII_FONT else blank
            for char in strip(text).upper()
        )
        rows.append(row)
    return '\n'.join(rows)
