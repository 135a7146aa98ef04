from typing import Any, List, Optional, Tuple

from teletext_utils.buffers import StyledBuffer
from teletext_utils.models import PageMetadata, RenderedLine
from teletext_utils.TeletextFetcher import TeletextFetcher
from teletext_utils.TeletextReader import decode_page, list_networks
from teletext_utils.TeletextReader.helpers import emit_lines


class TeletextProvider:
    """
    Teletext source that a host application registers and calls.

    The host drives navigation itself, using the previous/next page numbers
    in the returned metadata.
    """

    def __init__(self, fetcher: TeletextFetcher):
        self._fetcher = fetcher

    def list_networks(self) -> List[str]:
        return list_networks()

    def decode_page(
        self,
        payload: Any,
        subpage: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Tuple[List[RenderedLine], PageMetadata]:
        return decode_page(payload, subpage, page_number)

    def render_page(
        self, page_number: int, subpage: Optional[int], buffer: StyledBuffer
    ) -> PageMetadata:
        """Fetch a page, draw it into `buffer` and return its metadata."""
        payload = self._fetcher.fetch(page_number)
        lines, metadata = self.decode_page(payload, subpage, page_number)
        emit_lines(lines, buffer)
        return metadata
