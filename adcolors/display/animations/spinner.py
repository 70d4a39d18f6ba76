# display/animations/spinner.py

import asyncio
import logging
from typing import Callable, Optional, Sequence

from ..terminal import Terminal
from ...style.engine import color, style_for

logger = logging.getLogger(__name__)

DOTS = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']

class Spinner:
    """
    Frame-cycling spinner shown next to a line of text.

    The animation runs as an asyncio task owned by the spinner. Use it as an
    async context manager to have the task cancelled and the cursor restored
    on every way out of the block:

        async with Spinner(text="Loading") as spinner:
            await work()
    """
    def __init__(
        self,
        frames: Sequence[str] = DOTS,
        text: str = "",
        interval: float = 0.08,
        style: Callable[[str], str] = color.white,
        terminal: Optional[Terminal] = None
    ):
        """
        Initialize the spinner.

        Args:
            frames: Characters shown in turn
            text: Text displayed after the frame
            interval: Seconds between frames
            style: Style applied to each frame
            terminal: Output terminal, stdout when omitted
        """
        if not frames:
            raise ValueError("frames must not be empty")
        self.frames = list(frames)
        self.text = text
        self.interval = interval
        self.style = style
        self.terminal = terminal or Terminal()
        self.frame_index = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Hide the cursor and start the animation task."""
        if self._task:
            return
        self.terminal.hide_cursor()
        self._task = asyncio.get_running_loop().create_task(self._spin())

    async def _spin(self):
        """Render frames until cancelled."""
        while True:
            self.terminal.write(f"\r{self.style(self.frames[self.frame_index])} {self.text}")
            self.frame_index = (self.frame_index + 1) % len(self.frames)
            await asyncio.sleep(self.interval)

    async def stop(
        self,
        final_char: str = '✔',
        final_text: str = 'Done!',
        final_color: str = 'green'
    ) -> None:
        """
        Stop the animation and replace it with a final line.

        Stopping a spinner that is not running does nothing.
        """
        if not self._task:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        try:
            final_style = style_for(final_color)
            self.terminal.write(f"\r{final_style(final_char)} {final_style.bold(final_text)}", newline=True)
        finally:
            self.terminal.show_cursor()
        logger.debug(f"Spinner stopped after frame {self.frame_index}")

    async def __aenter__(self) -> 'Spinner':
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            await self.stop()
        else:
            await self.stop('✖', 'Failed', 'red')
        return False  # Don't suppress exceptions
