"""Wiring for hosts: build a Session from settings with its history loaded."""

from __future__ import annotations

import structlog

from brawl.server.settings import BrawlSettings
from brawl.session.history import HistoryStore
from brawl.session.match import Session
from shared.storage import LocalHistoryStorage

logger = structlog.get_logger()


def create_session(settings: BrawlSettings | None = None) -> Session:
    """Create the process-wide session and load persisted history into it."""
    if settings is None:
        settings = BrawlSettings()

    storage = LocalHistoryStorage(settings.history_file)
    session = Session(HistoryStore(storage), observer_name=settings.observer)
    if session.load_history():
        logger.info("session ready", history_file=settings.history_file, matches=len(session.history))
    return session
