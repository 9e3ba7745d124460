"""
Rewards update pipeline.

locate wiki page -> fetch -> build catalog -> persist

The steps run one after another. An empty catalog never overwrites the
existing rewards file.
"""

from dataclasses import dataclass, field
from typing import Optional

import requests

from .catalog import build_catalog
from .config import UpdaterConfig
from .models import CatalogResult
from .page_loader import PageLoader
from .wiki_locator import WikiPageLocator
from .writer import RewardsWriter
from .logger import logger


@dataclass
class UpdateOutcome:
    """What an update run did."""
    url: str
    catalog: CatalogResult = field(default_factory=CatalogResult)
    written: bool = False


class RewardsUpdater:
    """Runs one update for the configured season."""

    def __init__(self, config: UpdaterConfig,
                 locator: Optional[WikiPageLocator] = None,
                 loader: Optional[PageLoader] = None,
                 writer: Optional[RewardsWriter] = None):
        self.config = config
        self.locator = locator
        self.loader = loader
        self.writer = writer or RewardsWriter(config.output_path)

    def _resolve_url(self, session: requests.Session) -> str:
        if self.config.wiki_url:
            logger.info(f"Using pinned Wiki URL: {self.config.wiki_url}")
            return self.config.wiki_url

        locator = self.locator or WikiPageLocator(
            self.config.serpapi_key,
            session=session,
            wiki_domain=self.config.wiki_domain,
            num_results=self.config.search_results,
            timeout=self.config.request_timeout,
        )
        return locator.locate(self.config.season)

    def run(self) -> UpdateOutcome:
        """
        Execute the update.

        Raises:
            RewardsUpdateError: lookup, fetch or write failed
        """
        with requests.Session() as session:
            url = self._resolve_url(session)
            loader = self.loader or PageLoader(session=session, timeout=self.config.request_timeout)
            soup = loader.load(url)

        catalog = build_catalog(soup)
        outcome = UpdateOutcome(url=url, catalog=catalog)

        if not catalog.found:
            logger.warning("Scraping didn't yield items. The Wiki structure might have changed.")
            logger.info("Keeping existing data.")
            return outcome

        if self.config.dry_run:
            logger.info(f"Dry run: {len(catalog.items)} items not written to {self.writer.path}")
            return outcome

        self.writer.write(catalog.items)
        outcome.written = True
        logger.info(f"Successfully updated {self.writer.path} with {len(catalog.items)} items.")
        return outcome
