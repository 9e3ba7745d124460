"""
Page loader.

Downloads a wiki page with plain requests and parses it with BeautifulSoup.
"""

from typing import Optional

import requests
from bs4 import BeautifulSoup

from .errors import PageFetchError
from .logger import get_component_logger

log = get_component_logger('loader')

DEFAULT_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}


class PageLoader:
    """Fetches HTML pages."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = 30):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self):
        """Close the session if this loader opened it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def fetch_html(self, url: str) -> str:
        log.info("Fetching page content...")
        try:
            response = self.session.get(url, headers=DEFAULT_HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise PageFetchError(f"Could not fetch {url}: {e}") from e

        log.debug(f"Got {len(response.text)} characters from {url}")
        return response.text

    def load(self, url: str) -> BeautifulSoup:
        return BeautifulSoup(self.fetch_html(url), 'html.parser')
