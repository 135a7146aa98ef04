"""
Teletext Helpers - TeletextReader
- Turns a decoded teletext page into styled output:
    - Subpage selection (requested number, else the first subpage)
    - Structured content lookup
    - Run decoding (literal text, repeated character code, graphics fill)
    - Color resolution (graphics colors -> display colors)
    - Line emission into a display buffer
    - Page metadata
"""

import re
import warnings
from typing import Iterable, List, Optional, Sequence

from teletext_utils.buffers import StyledBuffer
from teletext_utils.models import (
    ContentBlock,
    Line,
    Page,
    PageMetadata,
    RenderedLine,
    RenderedSpan,
    Run,
    Subpage,
    GRAPHICS_COLORS,
    GRAPHICS_COLOR_MARKER,
    YLE_NETWORK_HEADING,
    YLE_PAGE_LABEL,
    YLE_TIME_FORMAT,
)
from .TeletextValidationWarning import TeletextValidationWarning


# Character code as sent by the API: two hex digits and an "h" suffix, e.g. "41h"
_CHARCODE_PATTERN = re.compile(r"^([0-9A-Fa-f]{2})h$")


# =============================================================================
# Subpage / Content Selection
# =============================================================================


def select_subpage(
    subpages: Sequence[Subpage], requested: Optional[int] = None
) -> Optional[Subpage]:
    """
    Return the first subpage numbered `requested`.

    Falls back to the first subpage when nothing was requested or nothing
    matches, and to None when the page has no subpages.
    """
    if not subpages:
        return None

    if requested is not None:
        for subpage in subpages:
            if subpage.number == requested:
                return subpage

    return subpages[0]


def find_structured_block(subpage: Optional[Subpage]) -> Optional[ContentBlock]:
    """Return the first "structured" content block of a subpage, if any."""
    if subpage is None:
        return None
    for block in subpage.content:
        if block.is_structured:
            return block
    return None


# =============================================================================
# Run Decoding
# =============================================================================


def is_graphics_color(name: str) -> bool:
    return name in GRAPHICS_COLORS


def resolve_color(name: str) -> str:
    """
    Map a color name to its display color.

    Graphics colors ("gred") lose their leading marker ("red"); every other
    name is returned unchanged.
    """
    if is_graphics_color(name) and name.startswith(GRAPHICS_COLOR_MARKER):
        return name[len(GRAPHICS_COLOR_MARKER) :]
    return name


def decode_charcode(charcode: Optional[str]) -> Optional[str]:
    """
    Decode a character code field ("41h" -> "A").
    Returns None when the field is absent or malformed.
    """
    if not charcode:
        return None
    match = _CHARCODE_PATTERN.match(charcode.strip())
    if not match:
        return None
    return chr(int(match.group(1), 16))


def _fit_text(text: str, length: int) -> str:
    """
    Pad or truncate literal text to the declared run length.

    The API normally sends text of exactly `length` characters; anything else
    is reported with a TeletextValidationWarning and fitted so the page grid
    stays aligned.
    """
    if len(text) == length:
        return text

    warnings.warn(
        f"Run text {text!r} has {len(text)} characters but declares length "
        f"{length}; text was {'padded' if len(text) < length else 'truncated'}.",
        TeletextValidationWarning,
        stacklevel=4,
    )
    return text[:length].ljust(length)


def decode_run(run: Run) -> RenderedSpan:
    """
    Decode one run into displayable text and colors.

    Text source, first match wins:
        1. graphics foreground   -> `length` spaces (colored blank cell)
        2. literal text          -> the text, fitted to `length`
        3. valid character code  -> the character repeated `length` times
        4. otherwise             -> `length` spaces
    """
    length = max(run.length, 0)

    if is_graphics_color(run.foreground):
        text = " " * length
    elif run.text is not None:
        text = _fit_text(run.text, length)
    else:
        char = decode_charcode(run.charcode)
        text = char * length if char is not None else " " * length

    return RenderedSpan(
        text=text,
        foreground=resolve_color(run.foreground),
        background=resolve_color(run.background),
    )


def decode_line(line: Line) -> RenderedLine:
    return tuple(decode_run(run) for run in line.runs)


def decode_lines(block: Optional[ContentBlock]) -> List[RenderedLine]:
    """Decode every line of a structured block; no block means no lines."""
    if block is None:
        return []
    return [decode_line(line) for line in block.lines]


# =============================================================================
# Output
# =============================================================================


def emit_lines(lines: Iterable[RenderedLine], buffer: StyledBuffer) -> None:
    """
    Append each span to the buffer in order and end every line with a
    line break.
    """
    for line in lines:
        for span in line:
            buffer.append(span.text, span.foreground, span.background)
        buffer.newline()


def build_metadata(
    page: Optional[Page],
    subpage: Optional[Subpage],
    page_number: Optional[int] = None,
) -> PageMetadata:
    """
    Assemble navigation metadata for a page.

    The subpage count reflects the length of the subpage list (at least 1),
    not the number of renderable subpages. Without a page (failed fetch)
    only the requested page number is known.
    """
    if page is None:
        return PageMetadata(
            page_number=page_number if page_number is not None else 0,
            network_heading=YLE_NETWORK_HEADING,
            page_label=YLE_PAGE_LABEL,
            time_format=YLE_TIME_FORMAT,
        )

    return PageMetadata(
        page_number=page.number,
        subpage_number=subpage.number if subpage is not None else 1,
        subpage_count=max(1, len(page.subpages)),
        previous_page=page.previous_page,
        next_page=page.next_page,
        network_heading=YLE_NETWORK_HEADING,
        page_label=YLE_PAGE_LABEL,
        time_format=YLE_TIME_FORMAT,
        page_name=page.name,
        page_time=page.time,
    )
