"""
Catalog assembly.

Runs every wikitable on the page through the aligner and the cell extractor,
then orders the collected rewards by tier.
"""

from typing import List, Union

from bs4 import BeautifulSoup

from .aligner import align_table
from .cell_extractor import extract_item
from .models import RewardItem, CatalogResult
from .logger import get_component_logger

log = get_component_logger('catalog')

TABLE_CLASS = 'wikitable'


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'html.parser')


def find_candidate_tables(soup: BeautifulSoup) -> list:
    return soup.find_all('table', class_=TABLE_CLASS)


def build_catalog(document: Union[BeautifulSoup, str]) -> CatalogResult:
    """
    Build the reward catalog from a wiki page.

    Args:
        document: parsed page, or raw HTML

    Returns:
        CatalogResult sorted by tier. When no table yields an item the result
        is empty and `found` is False; callers should keep prior output.
    """
    soup = parse_document(document) if isinstance(document, str) else document
    tables = find_candidate_tables(soup)

    rewards: List[RewardItem] = []
    matched = 0

    for table in tables:
        aligned = align_table(table)
        if not aligned:
            continue
        matched += 1

        for column in aligned:
            premium_item = extract_item(column.premium.cells, column.column, column.tier, False)
            if premium_item:
                rewards.append(premium_item)

            free_item = extract_item(column.free.cells, column.column, column.tier, True)
            if free_item:
                rewards.append(free_item)

    log.debug(f"{len(tables)} wikitables, {matched} tier tables, {len(rewards)} rewards")

    if not rewards:
        return CatalogResult.empty(tables_seen=len(tables), tables_matched=matched)

    # sorted() is stable: premium before free within a tier, then table order
    rewards = sorted(rewards, key=lambda item: item.tier)
    return CatalogResult(items=rewards, tables_seen=len(tables), tables_matched=matched)
