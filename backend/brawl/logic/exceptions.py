"""Typed exceptions for the brawl engine.

Roll recognition problems are never raised: they are expected noise from
the chat stream and are reported as OfferResult values. Only the durable
history document produces hard failures.
"""


class BrawlError(Exception):
    """Base exception for brawl engine failures."""


class HistoryLoadError(BrawlError):
    """Raised when the persisted history document cannot be parsed."""


class HistorySaveError(BrawlError):
    """Raised when the history document could not be written.

    The in-memory history already contains the summary when this is raised.
    """
