# display/animations/__init__.py

from .spinner import DOTS, Spinner
from .effects import EFFECTS, animate

class DisplayAnimations:
    """Coordinates terminal animation components."""
    def __init__(self, terminal):
        """Initialize with the Terminal every animation writes to."""
        self.terminal = terminal

    def create_spinner(self, text="", frames=DOTS, interval=0.08, style=None):
        """Create and return a spinner bound to this terminal."""
        kwargs = {'style': style} if style else {}
        return Spinner(frames, text, interval, terminal=self.terminal, **kwargs)

    async def animate(self, text, effect='blink', interval=0.5, duration=3.0):
        """Run a text effect on this terminal."""
        await animate(text, effect, interval, duration, terminal=self.terminal)

__all__ = ['DisplayAnimations', 'Spinner', 'animate', 'DOTS', 'EFFECTS']
