"""
Tier table alignment.

The wiki lays the Rocket Pass out horizontally:
    Row 0: tier headers (<th>)   TIER 1 | TIER 2 | ...
    Row 1: premium rewards (<td>)
    Row 2: free rewards (<td>)

Track cells are matched to tiers purely by column index.
"""

import re
from typing import List, Optional

from .models import AlignedTier, TrackRow, RowStatus
from .logger import get_component_logger

log = get_component_logger('aligner')

TIER_TOKEN = re.compile(r'TIER', re.IGNORECASE)
LEADING_INT = re.compile(r'[+-]?\d+')

HEADER_ROW = 0
PREMIUM_ROW = 1
FREE_ROW = 2


def is_tier_table(table) -> bool:
    """A table qualifies when it has 2+ rows and its first header says TIER."""
    rows = table.find_all('tr')
    if len(rows) < 2:
        return False

    first_header = rows[HEADER_ROW].find('th')
    if first_header is None:
        return False
    return 'TIER' in first_header.get_text().upper()


def parse_tier(text: str) -> Optional[int]:
    """
    Parse a header like "TIER 12" into 12.

    Only the leading integer after the TIER token counts. Headers without
    one (e.g. "BONUS") or with a tier below 1 return None.
    """
    match = LEADING_INT.match(TIER_TOKEN.sub('', text or '', count=1).strip())
    if not match:
        return None
    tier = int(match.group(0))
    return tier if tier > 0 else None


def _track_row(rows, position: int) -> TrackRow:
    if position >= len(rows):
        return TrackRow(cells=[], status=RowStatus.MISSING)
    cells = rows[position].find_all('td')
    status = RowStatus.PRESENT if cells else RowStatus.EMPTY
    return TrackRow(cells=cells, status=status)


def align_table(table) -> List[AlignedTier]:
    """
    Align premium and free cells to the tier headers of a table.

    Returns an empty list for tables that are not tier tables. Columns whose
    header has no tier number are left out.
    """
    if not is_tier_table(table):
        return []

    rows = table.find_all('tr')
    headers = rows[HEADER_ROW].find_all('th')
    premium = _track_row(rows, PREMIUM_ROW)
    free = _track_row(rows, FREE_ROW)

    for label, track in (('premium', premium), ('free', free)):
        if track.status is not RowStatus.PRESENT:
            log.debug(f"Tier table {label} row is {track.status.value}")
        elif len(track.cells) < len(headers):
            log.debug(f"Tier table {label} row has {len(track.cells)} cells for {len(headers)} headers")

    aligned = []
    for column, header in enumerate(headers):
        tier = parse_tier(header.get_text())
        if tier is None:
            log.debug(f"Skipping header column {column}: {header.get_text().strip()!r}")
            continue
        aligned.append(AlignedTier(tier=tier, column=column, premium=premium, free=free))

    return aligned
