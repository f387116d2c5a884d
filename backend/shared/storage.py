"""Storage abstraction for the match history document.

The history document is a single UTF-8 JSON text that is always rewritten
as a whole. The local implementation replaces the file via
temp-file-then-rename so readers never observe a half-written document.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only file permissions for the history document.
_HISTORY_FILE_MODE = 0o600


class HistoryDocumentStorage(Protocol):
    """Protocol for reading and overwriting the persisted history document."""

    def read_document(self) -> str | None: ...

    def write_document(self, content: str) -> None: ...


class LocalHistoryStorage:
    """Keeps the history document in one file on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_document(self) -> str | None:
        """Return the document text, or None when the file does not exist yet."""
        if not self._path.exists():
            return None
        return self._path.read_text(encoding="utf-8")

    def write_document(self, content: str) -> None:
        """Replace the document with ``content``, creating the parent directory lazily."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write_text(self._path, content)
        logger.info("saved history document", path=str(self._path), size=len(content))


def _atomic_write_text(target: Path, content: str) -> None:
    """Write UTF-8 ``content`` beside ``target`` and rename it into place.

    Readers see either the previous document or the new one. On failure the
    temporary file is removed and ``target`` is left as it was.
    """
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".history_", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        try:
            stream = os.fdopen(fd, "w", encoding="utf-8", newline="")
        except BaseException:
            os.close(fd)
            raise
        with stream:
            stream.write(content)
            stream.flush()
            os.fsync(stream.fileno())
        tmp_path.chmod(_HISTORY_FILE_MODE)
        tmp_path.replace(target)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
