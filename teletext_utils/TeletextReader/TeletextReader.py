"""
TeletextReader - YLE Teksti-TV page reader.

Decodes the JSON page payload of the YLE teletext API into rows of styled
spans plus navigation metadata.

The result payload looks like:
    {
        "lines": [
            [
                {
                    "text": "YLE TEKSTI-TV",
                    "style": {"color": "white", "background-color": "blue"},
                },
                ...
            ],
            ...
        ],
        "metadata": {
            "page": 100,
            "subpage": 1,
            "subpage_count": 2,
            "previous_page": 899,    # only when present
            "next_page": 101,        # only when present
            "network_heading": "YLE Teksti-TV",
            "page_label": "Sivu",
            "time_format": "%d.%m. %H:%M",
        },
    }
"""

from typing import Any, Dict, List, Optional

from teletext_utils.buffers import StyledBuffer
from teletext_utils.models import PageMetadata, RenderedLine
from .decoder import decode_page
from .helpers import emit_lines


class TeletextReader:
    """
    Reader for one teletext page at a time.

    Args:
        subpage: Optional subpage to select. If None, or if the page has no
                 such subpage, the first subpage is used.
    """

    def __init__(self, subpage: Optional[int] = None):
        self._subpage = subpage
        self._lines: Optional[List[RenderedLine]] = None
        self._metadata: Optional[PageMetadata] = None
        self._result: Optional[Dict[str, Any]] = None

    @property
    def subpage(self) -> Optional[int]:
        return self._subpage

    @property
    def lines(self) -> Optional[List[RenderedLine]]:
        return self._lines

    @property
    def metadata(self) -> Optional[PageMetadata]:
        return self._metadata

    @property
    def result(self) -> Optional[Dict[str, Any]]:
        return self._result

    # --------------------------------------------------------------------- #
    # Public API
    # --------------------------------------------------------------------- #
    def read(self, payload: Any, page_number: Optional[int] = None) -> Dict[str, Any]:
        """
        Decode a parsed page payload (None for a failed fetch) and return the
        result payload.
        """
        lines, metadata = decode_page(payload, self._subpage, page_number)

        self._lines = lines
        self._metadata = metadata
        self._result = {
            "lines": [[span.to_dict() for span in line] for line in lines],
            "metadata": metadata.to_dict(),
        }
        return self._result

    def render(self, buffer: StyledBuffer) -> None:
        """Emit the lines of the last read page into a display buffer."""
        if self._lines is None:
            raise ValueError("No page has been read yet")
        emit_lines(self._lines, buffer)
