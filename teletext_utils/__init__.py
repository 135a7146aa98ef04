from .TeletextFetcher import TeletextFetcher
from .TeletextReader import TeletextReader, decode_page, list_networks
from .buffers import AnsiBuffer, SpanBuffer, StyledBuffer
from .provider import TeletextProvider

__all__ = [
    "AnsiBuffer",
    "SpanBuffer",
    "StyledBuffer",
    "TeletextFetcher",
    "TeletextProvider",
    "TeletextReader",
    "decode_page",
    "list_networks",
]
