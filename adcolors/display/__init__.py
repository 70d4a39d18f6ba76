# display/__init__.py

from .terminal import Terminal
from .animations import DisplayAnimations

class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    Terminal (base) → DisplayAnimations
    """
    def __init__(self, terminal=None):
        """Initialize components in dependency order."""
        self.terminal = terminal or Terminal()
        self.animations = DisplayAnimations(terminal=self.terminal)

    def print(self, text: str = "") -> None:
        """Write a line of (styled) text."""
        self.terminal.write_line(text)

__all__ = ['Display', 'Terminal', 'DisplayAnimations']
