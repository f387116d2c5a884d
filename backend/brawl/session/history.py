"""Durable, append-only history of finished matches.

The whole history is rewritten on every append; the document is small and
the storage layer replaces it atomically.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog
from pydantic import TypeAdapter, ValidationError

from brawl.logic.exceptions import HistoryLoadError, HistorySaveError
from brawl.logic.types import MatchSummary

if TYPE_CHECKING:
    from shared.storage import HistoryDocumentStorage

logger = structlog.get_logger()

_SUMMARY_LIST = TypeAdapter(list[MatchSummary])


def encode_history(entries: tuple[MatchSummary, ...] | list[MatchSummary]) -> str:
    """Serialize summaries to the persisted JSON array format."""
    data = [summary.model_dump(mode="json", by_alias=True) for summary in entries]
    return json.dumps(data, indent=2, ensure_ascii=False)


def decode_history(content: str) -> tuple[MatchSummary, ...]:
    """Parse a history document. Blank content is an empty history."""
    if not content.strip():
        return ()
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise HistoryLoadError(f"Malformed history JSON: {exc}") from exc
    if not isinstance(data, list):
        raise HistoryLoadError(f"Expected a JSON array at the history root, got {type(data).__name__}")
    try:
        return tuple(_SUMMARY_LIST.validate_python(data))
    except ValidationError as exc:
        raise HistoryLoadError(f"Invalid match summary in history: {exc}") from exc


class HistoryStore:
    """Ordered in-memory history backed by a persisted document.

    The in-memory sequence is authoritative for the running process: a
    failed write never drops a summary from it, only from the durable copy.
    """

    def __init__(self, storage: HistoryDocumentStorage) -> None:
        self._storage = storage
        self._entries: list[MatchSummary] = []

    @property
    def entries(self) -> tuple[MatchSummary, ...]:
        return tuple(self._entries)

    def load(self) -> tuple[MatchSummary, ...]:
        """Replace the in-memory history with the persisted document.

        A missing or blank document yields an empty history. Unreadable or
        malformed content raises HistoryLoadError and leaves the in-memory
        history untouched.
        """
        try:
            content = self._storage.read_document()
        except (OSError, UnicodeDecodeError) as exc:
            raise HistoryLoadError(f"Failed to read history document: {exc}") from exc

        entries = decode_history(content) if content is not None else ()
        self._entries = list(entries)
        logger.info("history loaded", matches=len(entries))
        return entries

    def append(self, summary: MatchSummary) -> None:
        """Add ``summary`` and rewrite the whole persisted document."""
        self._entries.append(summary)
        try:
            self._storage.write_document(encode_history(self._entries))
        except OSError as exc:
            logger.exception("history save failed", matches=len(self._entries))
            raise HistorySaveError(f"Failed to write history document: {exc}") from exc
        logger.info(
            "match saved to history",
            black=summary.black_name,
            blue=summary.blue_name,
            black_damage=summary.black_damage,
            blue_damage=summary.blue_damage,
        )

    def __len__(self) -> int:
        return len(self._entries)
