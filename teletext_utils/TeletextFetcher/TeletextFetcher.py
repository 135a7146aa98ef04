import os
import warnings
from typing import Any, Dict, Optional

import requests

from teletext_utils.models import FIRST_PAGE, LAST_PAGE, YLE_API_URL
from .TeletextFetchWarning import TeletextFetchWarning


class TeletextFetcher:
    """
    Fetches teletext pages from the YLE API as parsed JSON.

    Args:
        app_id: YLE API application id (required)
        app_key: YLE API application key (required)
        base_url: Pages endpoint; "{base_url}/{page}.json" is requested
        timeout: Request timeout in seconds
        session: Optional requests.Session to reuse connections
    """

    def __init__(
        self,
        app_id: Optional[str] = None,
        app_key: Optional[str] = None,
        base_url: str = YLE_API_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        if not app_id:
            raise ValueError("YLE app_id is required")
        if not app_key:
            raise ValueError("YLE app_key is required")

        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def page_url(self, page_number: int) -> str:
        return f"{self.base_url}/{page_number}.json"

    def fetch(self, page_number: int) -> Optional[Dict[str, Any]]:
        """
        Fetch one page and return its parsed JSON.

        Returns None when the request fails, the server answers with an
        error status, or the body is not JSON. Failures are reported with a
        TeletextFetchWarning and never retried.
        """
        if not FIRST_PAGE <= page_number <= LAST_PAGE:
            raise ValueError(
                f"Page number must be between {FIRST_PAGE} and {LAST_PAGE}, "
                f"got {page_number}"
            )

        params = {"app_id": self.app_id, "app_key": self.app_key}

        try:
            response = self._session.get(
                self.page_url(page_number), params=params, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            warnings.warn(
                f"Could not fetch teletext page {page_number}: {e}",
                TeletextFetchWarning,
                stacklevel=2,
            )
            return None

        if not isinstance(data, dict):
            warnings.warn(
                f"Teletext page {page_number} response is not a JSON object",
                TeletextFetchWarning,
                stacklevel=2,
            )
            return None

        return data


def fetcher_from_env(**kwargs: Any) -> TeletextFetcher:
    """
    Create a fetcher with credentials from the YLE_APP_ID and YLE_APP_KEY
    environment variables.
    """
    return TeletextFetcher(
        app_id=os.environ.get("YLE_APP_ID"),
        app_key=os.environ.get("YLE_APP_KEY"),
        **kwargs,
    )
