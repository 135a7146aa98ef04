"""
Development script for fetching and rendering YLE teletext pages.

Usage:
    YLE_APP_ID=... YLE_APP_KEY=... python dev.py [page] [subpage]

This will render the page in the terminal and print its metadata.
"""

import sys
import os
import json

# Add the project root to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from teletext_utils import AnsiBuffer, TeletextProvider
from teletext_utils.TeletextFetcher import fetcher_from_env


def render_page(page_number: int, subpage=None):
    try:
        fetcher = fetcher_from_env()
    except ValueError as e:
        print(f"\n✗ Missing credentials: {e}")
        return

    provider = TeletextProvider(fetcher)

    print(f"\n{'=' * 60}")
    print(f"Network: {', '.join(provider.list_networks())}")
    print(f"Page: {page_number}" + (f"/{subpage}" if subpage else ""))
    print(f"{'=' * 60}")

    metadata = provider.render_page(page_number, subpage, AnsiBuffer())

    print(json.dumps(metadata.to_dict(), indent=4))
    print(f"{'=' * 60}")


def main():
    page_number = int(sys.argv[1]) if len(sys.argv) > 1 else 100
    subpage = int(sys.argv[2]) if len(sys.argv) > 2 else None
    render_page(page_number, subpage)


if __name__ == "__main__":
    main()
