from .TeletextFetcher import TeletextFetcher, fetcher_from_env
from .TeletextFetchWarning import TeletextFetchWarning

__all__ = ["TeletextFetcher", "TeletextFetchWarning", "fetcher_from_env"]
