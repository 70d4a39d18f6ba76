# display/animations/effects.py

import asyncio
import logging
from typing import Optional

from ..terminal import Terminal
from ...style.engine import color
from ...text import visible_length

logger = logging.getLogger(__name__)

async def _blink(text: str, interval: float, terminal: Terminal):
    """Alternate the text with blanks of the same visible width."""
    visible = True
    while True:
        terminal.write(f"\r{text}" if visible else f"\r{' ' * visible_length(text)}")
        visible = not visible
        await asyncio.sleep(interval)

async def _pulse(text: str, interval: float, terminal: Terminal):
    """Show the text dim for the first half of each interval, white for the second."""
    while True:
        terminal.write(f"\r{color.dim(text)}")
        await asyncio.sleep(interval / 2)
        terminal.write(f"\r{color.white(text)}")
        await asyncio.sleep(interval / 2)

EFFECTS = {'blink': _blink, 'pulse': _pulse}

async def animate(
    text: str,
    effect: str = 'blink',
    interval: float = 0.5,
    duration: float = 3.0,
    terminal: Optional[Terminal] = None
) -> None:
    """
    Animate text in place for a fixed duration.

    Args:
        text: Text to animate, may be styled
        effect: 'blink' or 'pulse'; other values just wait out the duration
        interval: Seconds per animation cycle
        duration: Total seconds to run
        terminal: Output terminal, stdout when omitted

    The text is always left visible, followed by a newline, and the cursor
    is shown again, however the animation ends.
    """
    terminal = terminal or Terminal()
    runner = EFFECTS.get(effect)
    if runner is None:
        logger.debug(f"Unknown effect {effect!r}, nothing to animate")

    terminal.hide_cursor()
    try:
        if runner:
            try:
                await asyncio.wait_for(runner(text, interval, terminal), timeout=duration)
            except asyncio.TimeoutError:
                pass  # Duration elapsed
        else:
            await asyncio.sleep(duration)
    finally:
        terminal.write(f"\r{text}", newline=True)
        terminal.show_cursor()
