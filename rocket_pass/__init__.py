"""
Rocket Pass Rewards Updater

Reads the Rocket Pass reward table from the Rocket League fandom wiki and
normalizes every tier cell into a RewardItem catalog written as JSON.
"""

from .models import RewardItem, CatalogResult
from .catalog import build_catalog, parse_document

__all__ = [
    'RewardItem',
    'CatalogResult',
    'build_catalog',
    'parse_document',
]
