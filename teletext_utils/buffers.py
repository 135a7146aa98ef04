"""
Display buffers for rendered teletext pages.

The reader never draws anything itself: it hands (text, foreground,
background) spans to a StyledBuffer, which owns the output and decides how
colors are displayed.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from teletext_utils.models import RenderedLine, RenderedSpan, TELETEXT_COLOR_NAMES

# ANSI SGR escapes; 9 selects the terminal's default color
ANSI_FOREGROUND = "\x1b[3{}m"
ANSI_BACKGROUND = "\x1b[4{}m"
ANSI_DEFAULT_COLOR = 9


class StyledBuffer(ABC):
    """Output buffer that appends styled text at its insertion point."""

    @abstractmethod
    def append(self, text: str, foreground: str, background: str) -> None:
        """Append `text` drawn in the given colors."""

    @abstractmethod
    def newline(self) -> None:
        """Terminate the current line."""


class SpanBuffer(StyledBuffer):
    """Buffer that records spans line by line."""

    def __init__(self):
        self.lines: List[RenderedLine] = []
        self._current: List[RenderedSpan] = []

    def append(self, text: str, foreground: str, background: str) -> None:
        self._current.append(RenderedSpan(text, foreground, background))

    def newline(self) -> None:
        self.lines.append(tuple(self._current))
        self._current = []

    @property
    def text(self) -> str:
        """Get plain text without colors, one row per line."""
        return "".join(
            "".join(span.text for span in line) + "\n" for line in self.lines
        )


class AnsiBuffer(StyledBuffer):
    """Buffer that writes ANSI colored text to a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream if stream is not None else sys.stdout

    @staticmethod
    def _color_index(name: str) -> int:
        color = TELETEXT_COLOR_NAMES.get(name)
        return color.value if color is not None else ANSI_DEFAULT_COLOR

    def append(self, text: str, foreground: str, background: str) -> None:
        self._stream.write(
            ANSI_FOREGROUND.format(self._color_index(foreground))
            + ANSI_BACKGROUND.format(self._color_index(background))
            + text
        )

    def newline(self) -> None:
        # Reset colors so the line break is not painted
        self._stream.write(
            ANSI_FOREGROUND.format(ANSI_DEFAULT_COLOR)
            + ANSI_BACKGROUND.format(ANSI_DEFAULT_COLOR)
            + "\n"
        )
