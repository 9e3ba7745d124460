"""
Wiki page lookup.

Finds the fandom wiki Rocket Pass page for a season through SerpAPI's Google
search endpoint.
"""

from typing import Optional, List

import requests

from .config import WIKI_DOMAIN, PLACEHOLDER_API_KEY
from .errors import ConfigurationError, WikiLookupError
from .logger import get_component_logger

log = get_component_logger('locator')

SERPAPI_URL = 'https://serpapi.com/search'


def build_query(season: int) -> str:
    return f"rocket league season {season} rocket pass wiki fandom"


class WikiPageLocator:
    """Resolves the Rocket Pass wiki URL for a season."""

    def __init__(self, api_key: Optional[str], session: Optional[requests.Session] = None,
                 wiki_domain: str = WIKI_DOMAIN, num_results: int = 5, timeout: int = 30):
        self.api_key = api_key
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.wiki_domain = wiki_domain
        self.num_results = num_results
        self.timeout = timeout

    def close(self):
        """Close the session if this locator opened it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _check_api_key(self):
        if not self.api_key:
            raise ConfigurationError('SERPAPI_KEY is not defined in .env')
        if self.api_key == PLACEHOLDER_API_KEY:
            raise ConfigurationError(
                'SERPAPI_KEY is still set to the placeholder value. Please verify your .env file.'
            )

    def search(self, query: str) -> List[dict]:
        """Run the search and return SerpAPI's organic results."""
        self._check_api_key()

        params = {
            'engine': 'google',
            'api_key': self.api_key,
            'q': query,
            'num': self.num_results,
        }
        try:
            response = self.session.get(SERPAPI_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise WikiLookupError(f"Search request failed: {e}") from e
        except ValueError as e:
            raise WikiLookupError(f"Search returned invalid JSON: {e}") from e

        return data.get('organic_results') or []

    def pick_wiki_link(self, results: List[dict]) -> Optional[str]:
        """First result link on the wiki domain."""
        for result in results:
            link = result.get('link') or ''
            if self.wiki_domain in link:
                return link
        return None

    def locate(self, season: int) -> str:
        """
        Find the wiki URL for a season.

        Raises:
            ConfigurationError: API key missing or left as the placeholder
            WikiLookupError: search failed or no wiki link was returned
        """
        log.info(f"Searching for Rocket League Season {season} Rocket Pass Wiki...")

        results = self.search(build_query(season))
        link = self.pick_wiki_link(results)
        if not link:
            raise WikiLookupError('Could not find a Fandom Wiki link in search results.')

        log.info(f"Found Wiki URL: {link}")
        return link
