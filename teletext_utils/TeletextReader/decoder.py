from typing import Any, List, Optional, Tuple

from teletext_utils.models import PageMetadata, RenderedLine, YLE_NETWORK
from .helpers import (
    build_metadata,
    decode_lines,
    find_structured_block,
    select_subpage,
)
from .parsers.page_parser import parse_page


def list_networks() -> List[str]:
    """Return the identifiers of the supported teletext networks."""
    return [YLE_NETWORK]


def decode_page(
    raw_payload: Any,
    requested_subpage: Optional[int] = None,
    page_number: Optional[int] = None,
) -> Tuple[List[RenderedLine], PageMetadata]:
    """
    Decode a parsed teletext response into styled lines and page metadata.

    Args:
        raw_payload: Parsed JSON response, or None when fetching failed
        requested_subpage: Subpage to show; the first subpage is used when
                           omitted or not present on the page
        page_number: Requested page number, reported when the payload has none

    A failed fetch yields no lines and default metadata.
    """
    page = parse_page(raw_payload, page_number)
    if page is None:
        return [], build_metadata(None, None, page_number)

    subpage = select_subpage(page.subpages, requested_subpage)
    lines = decode_lines(find_structured_block(subpage))

    return lines, build_metadata(page, subpage, page_number)
