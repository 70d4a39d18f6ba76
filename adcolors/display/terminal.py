# display/terminal.py

from typing import Optional, TextIO

from rich.console import Console

from ..style.definitions import HIDE_CURSOR, SHOW_CURSOR

class Terminal:
    """
    Thin "write text" capability over a rich Console.

    Styled strings are written to the console's file untouched; the console
    is only asked whether it is attached to a terminal and how wide it is.
    """

    def __init__(
        self,
        file: Optional[TextIO] = None,
        force_terminal: Optional[bool] = None,
        width: Optional[int] = None
    ):
        """
        Initialize the terminal.

        Args:
            file: Output stream, stdout when omitted
            force_terminal: Override terminal detection
            width: Fixed width, detected from the console when omitted
        """
        self.console = Console(
            file=file,
            force_terminal=force_terminal,
            width=width,
            highlight=False
        )
        self._cursor_visible = True

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.console.width

    def _is_terminal(self) -> bool:
        """Return True if output goes to a terminal."""
        return self.console.is_terminal

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text as-is; append newline if requested."""
        try:
            self.console.file.write(text)
            if newline:
                self.console.file.write("\n")
            self.console.file.flush()
        except BrokenPipeError:
            pass  # Reader went away

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            self.write(SHOW_CURSOR if show else HIDE_CURSOR)

    def show_cursor(self) -> None:
        """Make cursor visible."""
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        """Make cursor hidden."""
        self._manage_cursor(False)
