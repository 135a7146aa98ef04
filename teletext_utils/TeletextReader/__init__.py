from .TeletextReader import TeletextReader
from .decoder import decode_page, list_networks
from .TeletextValidationWarning import TeletextValidationWarning

__all__ = [
    "TeletextReader",
    "TeletextValidationWarning",
    "decode_page",
    "list_networks",
]
