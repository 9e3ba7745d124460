"""
Fatal errors raised by the updater's I/O collaborators.

Table and cell problems never raise; they are skipped where they occur.
"""


class RewardsUpdateError(Exception):
    """Base class for errors that abort an update run."""


class ConfigurationError(RewardsUpdateError):
    """Missing or placeholder credentials."""


class WikiLookupError(RewardsUpdateError):
    """The search API failed or returned no wiki page."""


class PageFetchError(RewardsUpdateError):
    """The wiki page could not be downloaded."""


class PersistenceError(RewardsUpdateError):
    """The rewards file could not be written."""
