"""
Cell extraction.

Turns a single reward-track cell into a RewardItem. Wiki cells either carry the
item name as text, or only an icon whose data-image-key / alt attribute holds a
file-style name such as "RocketBoostIconRL.png".
"""

import re
from typing import Optional, Sequence, Any

from .models import RewardItem
from .logger import get_component_logger

log = get_component_logger('cell')

IMAGE_EXTENSION = re.compile(r'\.(png|jpg|jpeg|gif)$', re.IGNORECASE)

# Applied in order, each one at most once
ICON_SUFFIXES = [
    re.compile(r'IconRL$', re.IGNORECASE),
    re.compile(r'RL$', re.IGNORECASE),
    re.compile(r'_icon$', re.IGNORECASE),
    re.compile(r' icon$', re.IGNORECASE),
]

CAMEL_BOUNDARY = re.compile(r'([a-z])([A-Z])')
WHITESPACE = re.compile(r'\s+')
FILE_PREFIX = 'File:'


def _strip_file_prefix(name: str) -> str:
    """Clean a wiki "File:Name.png" reference down to "Name"."""
    if name.startswith(FILE_PREFIX):
        name = IMAGE_EXTENSION.sub('', name[len(FILE_PREFIX):])
    return name.strip()


def normalize_image_name(raw: str) -> str:
    """
    Derive a display name from an image key or alt text.

    "RocketBoostIconRL.png" -> "Rocket Boost"
    "Some_Decal_icon.jpg"   -> "Some Decal"
    "File:Wheels.png"       -> "Wheels"
    """
    name = IMAGE_EXTENSION.sub('', raw or '')
    for suffix in ICON_SUFFIXES:
        name = suffix.sub('', name)

    # MediaWiki file keys use underscores for spaces
    name = name.replace('_', ' ')
    name = CAMEL_BOUNDARY.sub(r'\1 \2', name)
    name = WHITESPACE.sub(' ', name).strip()

    return _strip_file_prefix(name)


def image_url_of(img) -> str:
    """Direct source, falling back to the lazy-load source."""
    if img is None:
        return ''
    return img.get('src') or img.get('data-src') or ''


def extract_item(cells: Optional[Sequence[Any]], index: int, tier: int,
                 is_free: bool) -> Optional[RewardItem]:
    """
    Extract the reward held by cells[index].

    Args:
        cells: <td> cells of one track row, or None when the row is missing
        index: header column to read
        tier: tier parsed from the header column
        is_free: True for the free track

    Returns:
        RewardItem, or None when the cell is absent, empty or unnamed
    """
    if not cells or index < 0 or index >= len(cells):
        return None

    cell = cells[index]
    img = cell.find('img')
    text = cell.get_text().strip()

    if not text and img is None:
        return None

    name = text
    if name.startswith('<'):
        # Markup leaked into the text node, not a real name
        log.debug(f"Tier {tier}: discarding markup text {name[:40]!r}")
        name = ''

    if not name and img is not None:
        raw = img.get('data-image-key') or img.get('alt') or ''
        name = normalize_image_name(raw)

    name = _strip_file_prefix(name)
    if name.startswith('<'):
        log.debug(f"Tier {tier}: discarding markup name {name[:40]!r}")
        name = ''

    if not name:
        log.debug(f"Tier {tier}: no usable name in {'free' if is_free else 'premium'} cell")
        return None

    return RewardItem(
        tier=tier,
        name=name,
        is_free=is_free,
        image_url=image_url_of(img),
    )
