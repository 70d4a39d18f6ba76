# text.py

import re

# CSI-style sequences introduced by ESC or the 8-bit 0x9B byte
ANSI_REGEX = re.compile(
    r'[\x1B\x9B][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]'
)

def strip(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return ANSI_REGEX.sub('', text)

def visible_length(text: str) -> int:
    """Return the length of text once escape sequences are removed."""
    return len(strip(text))

def pad(text: str, width: int, side: str = 'right', char: str = ' ') -> str:
    """
    Pad text to a visible width without ever truncating it.

    Args:
        text: Text to pad, may contain escape sequences
        width: Target visible width
        side: 'left' to prepend the padding, anything else appends it
        char: Padding character

    Returns:
        Padded text
    """
    padding = char * max(0, width - visible_length(text))
    return padding + text if side == 'left' else text + padding

def center(text: str, width: int) -> str:
    """Prepend enough spaces to center text within width; the right side is left open."""
    return ' ' * max(0, (width - visible_length(text)) // 2) + text

def wrap(text: str, width: int) -> str:
    """
    Greedily pack space-separated words into lines of at most width visible chars.

    A word wider than width is placed on a line of its own and never split.
    """
    lines, line = [], ''
    for word in text.split(' '):
        if not line:
            line = word
            continue
        test = f"{line} {word}"
        if visible_length(test) <= width:
            line = test
        else:
            lines.append(line)
            line = word
    lines.append(line)
    return '\n'.join(lines)
