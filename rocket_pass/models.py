"""
Data models for reward extraction.
"""

from dataclasses import dataclass, field
from typing import List, Any
from enum import Enum


PLACEHOLDER_TYPE = "Unknown"
PLACEHOLDER_RARITY = "Limited"


@dataclass
class RewardItem:
    """A single Rocket Pass reward on the premium or free track."""
    tier: int
    name: str
    is_free: bool
    image_url: str = ""

    # Not derived from the page yet
    type: str = PLACEHOLDER_TYPE
    rarity: str = PLACEHOLDER_RARITY

    def to_dict(self) -> dict:
        return {
            "tier": self.tier,
            "name": self.name,
            "type": self.type,
            "rarity": self.rarity,
            "isFree": self.is_free,
            "imageUrl": self.image_url,
        }


class RowStatus(Enum):
    """State of a track row inside a tier table."""
    PRESENT = "present"
    EMPTY = "empty"      # row exists but holds no <td> cells
    MISSING = "missing"  # table has no row at that position


@dataclass
class TrackRow:
    """Cells of one reward track (premium or free)."""
    cells: List[Any] = field(default_factory=list)
    status: RowStatus = RowStatus.MISSING


@dataclass
class AlignedTier:
    """One tier column with the track rows it indexes into."""
    tier: int
    column: int
    premium: TrackRow
    free: TrackRow


@dataclass
class CatalogResult:
    """Outcome of assembling a catalog from a document."""
    items: List[RewardItem] = field(default_factory=list)
    tables_seen: int = 0
    tables_matched: int = 0

    @property
    def found(self) -> bool:
        """False is the "no data" signal: nothing should be persisted."""
        return bool(self.items)

    @classmethod
    def empty(cls, tables_seen: int = 0, tables_matched: int = 0) -> 'CatalogResult':
        return cls(items=[], tables_seen=tables_seen, tables_matched=tables_matched)
