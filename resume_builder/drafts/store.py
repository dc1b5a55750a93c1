"""
Draft Store - single-slot persistence for the application profile.

Holds at most one serialized ApplicationProfile (JSON text) under a fixed
slot name. Every save overwrites the slot; there is no versioning, no user
scoping and no coordination between concurrent writers: the last save wins.

Implementations:
- FileDraftStore: one JSON file per slot, written atomically
- MemoryDraftStore: process-local slot for tests and embedding

Design decisions:
- Absent or corrupt drafts read as "no draft" (logged, never raised)
- Serialization lives in the base class so implementations only move text
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from ..common.config import Config
from ..common.error_handling import DraftStoreError
from ..profile.models import ApplicationProfile

logger = logging.getLogger(__name__)


class DraftStore(ABC):
    """
    Abstract single-slot store.

    Subclasses provide raw text access to the slot; load/save/clear handle
    (de)serialization and the corrupt-draft fallback.
    """

    def __init__(self, slot: str = Config.DRAFT_SLOT):
        self.slot = slot

    @abstractmethod
    def read_text(self) -> Optional[str]:
        """Return the slot contents, or None when the slot is empty."""
        pass

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Overwrite the slot contents."""
        pass

    @abstractmethod
    def delete(self) -> None:
        """Empty the slot. Must not fail when it is already empty."""
        pass

    def load(self) -> Optional[ApplicationProfile]:
        """
        Read the draft back.

        Returns:
            The stored profile, or None if the slot is empty or unreadable
        """
        try:
            text = self.read_text()
        except OSError as e:
            logger.error(f"Error reading draft '{self.slot}': {e}")
            return None

        if text is None:
            return None

        try:
            return ApplicationProfile.from_json(text)
        except ValidationError as e:
            logger.error(f"Error loading draft '{self.slot}', discarding it: {e.error_count()} invalid field(s)")
            logger.debug(f"Draft validation errors: {e}")
            return None

    def save(self, profile: ApplicationProfile) -> None:
        """
        Overwrite the slot with the given profile.

        Raises:
            DraftStoreError: if the slot cannot be written
        """
        try:
            self.write_text(profile.to_json())
        except OSError as e:
            logger.error(f"Error saving draft '{self.slot}': {e}")
            raise DraftStoreError(f"Failed to save draft '{self.slot}': {e}") from e
        logger.debug(f"Draft '{self.slot}' saved")

    def clear(self) -> None:
        """Remove the draft."""
        try:
            self.delete()
        except OSError as e:
            raise DraftStoreError(f"Failed to clear draft '{self.slot}': {e}") from e
        logger.info(f"Draft '{self.slot}' cleared")


class FileDraftStore(DraftStore):
    """
    Draft slot backed by `<directory>/<slot>.json`.

    Writes go to a temporary file in the same directory followed by
    os.replace(), so readers see either the previous or the new draft.
    """

    def __init__(self, directory: Optional[Path] = None, slot: str = Config.DRAFT_SLOT):
        super().__init__(slot)
        self.directory = Path(directory or Config.DRAFT_DIR)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.slot}.json"

    def read_text(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def write_text(self, text: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{self.slot}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryDraftStore(DraftStore):
    """
    Process-wide in-memory slots.

    Instances created with the same slot name share the stored text, which
    mirrors a browser's storage area shared by every tab.
    """

    _slots: Dict[str, str] = {}

    def read_text(self) -> Optional[str]:
        return self._slots.get(self.slot)

    def write_text(self, text: str) -> None:
        self._slots[self.slot] = text

    def delete(self) -> None:
        self._slots.pop(self.slot, None)

    @classmethod
    def reset_all(cls) -> None:
        """Drop every in-memory slot (test helper)."""
        cls._slots.clear()


# ==========================================================================
# MODULE-LEVEL CONVENIENCE
# ==========================================================================

_default_store: Optional[DraftStore] = None


def get_draft_store() -> DraftStore:
    """
    Get the default (file-backed) draft store.

    Returns:
        DraftStore instance for Config.DRAFT_DIR / Config.DRAFT_SLOT
    """
    global _default_store
    if _default_store is None:
        _default_store = FileDraftStore()
    return _default_store
