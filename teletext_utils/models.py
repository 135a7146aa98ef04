"""
Teletext Models - Data structures and type definitions.

Contains:
- Enums and constants for teletext colors
- Network constants for the YLE Teksti-TV service
- Dataclasses for the decoded page (Page, Subpage, ContentBlock, Line, Run)
- Dataclasses for reader output (RenderedSpan, PageMetadata)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple


# =============================================================================
# Teletext Colors
# =============================================================================


class TeletextColor(Enum):
    """Teletext Level 1 display colors, valued by their ANSI color index"""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


# Map color names used by the API to teletext colors
TELETEXT_COLOR_NAMES: Dict[str, TeletextColor] = {
    "black": TeletextColor.BLACK,
    "red": TeletextColor.RED,
    "green": TeletextColor.GREEN,
    "yellow": TeletextColor.YELLOW,
    "blue": TeletextColor.BLUE,
    "magenta": TeletextColor.MAGENTA,
    "cyan": TeletextColor.CYAN,
    "white": TeletextColor.WHITE,
}

# Leading marker of a graphics (mosaic) color name, e.g. "gred"
GRAPHICS_COLOR_MARKER = "g"

# Graphics colors paint a colored blank cell instead of text
GRAPHICS_COLORS: FrozenSet[str] = frozenset(
    {
        "gblue",
        "gcyan",
        "ggreen",
        "gmagenta",
        "gred",
        "gwhite",
        "gyellow",
    }
)

# Content block variant holding the line/run structure
STRUCTURED_CONTENT_TYPE = "structured"


# =============================================================================
# Network Constants
# =============================================================================

YLE_NETWORK = "YLE"
YLE_NETWORK_HEADING = "YLE Teksti-TV"
YLE_PAGE_LABEL = "Sivu"
YLE_TIME_FORMAT = "%d.%m. %H:%M"
YLE_API_URL = "https://external.api.yle.fi/v1/teletext/pages"

# Valid teletext page numbers
FIRST_PAGE = 100
LAST_PAGE = 899


# =============================================================================
# Decoded Page Structures
# =============================================================================


@dataclass(frozen=True)
class Run:
    """A fixed-length span within a line sharing one color pair and text source."""

    length: int
    foreground: str
    background: str
    text: Optional[str] = None
    charcode: Optional[str] = None  # e.g. "41h"


@dataclass(frozen=True)
class Line:
    """A single row of a teletext page."""

    runs: Tuple[Run, ...] = ()


@dataclass(frozen=True)
class ContentBlock:
    """One content representation of a subpage.

    Only blocks of type "structured" carry lines; other variants are kept
    with an empty line tuple so the block order is preserved.
    """

    type: str
    lines: Tuple[Line, ...] = ()

    @property
    def is_structured(self) -> bool:
        return self.type == STRUCTURED_CONTENT_TYPE


@dataclass(frozen=True)
class Subpage:
    """One numbered variant of a page's content."""

    number: int
    content: Tuple[ContentBlock, ...] = ()


@dataclass(frozen=True)
class Page:
    """A decoded teletext page record."""

    number: int
    subpages: Tuple[Subpage, ...] = ()
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    name: Optional[str] = None
    time: Optional[str] = None


# =============================================================================
# Reader Output Structures
# =============================================================================


@dataclass(frozen=True)
class RenderedSpan:
    """A run of text ready to be styled by the display layer."""

    text: str
    foreground: str
    background: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "style": {
                "color": self.foreground,
                "background-color": self.background,
            },
        }


RenderedLine = Tuple[RenderedSpan, ...]


@dataclass(frozen=True)
class PageMetadata:
    """Navigation and display information for a rendered page."""

    page_number: int
    subpage_number: int = 1
    subpage_count: int = 1
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    network_heading: str = YLE_NETWORK_HEADING
    page_label: str = YLE_PAGE_LABEL
    time_format: str = YLE_TIME_FORMAT
    page_name: Optional[str] = None
    page_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "page": self.page_number,
            "subpage": self.subpage_number,
            "subpage_count": self.subpage_count,
            "network_heading": self.network_heading,
            "page_label": self.page_label,
            "time_format": self.time_format,
        }
        # Optional fields are only included when present
        if self.previous_page is not None:
            result["previous_page"] = self.previous_page
        if self.next_page is not None:
            result["next_page"] = self.next_page
        if self.page_name:
            result["page_name"] = self.page_name
        if self.page_time:
            result["page_time"] = self.page_time
        return result
