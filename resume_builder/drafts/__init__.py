"""Single-slot draft persistence for the application profile."""

from .store import DraftStore, FileDraftStore, MemoryDraftStore, get_draft_store

__all__ = ["DraftStore", "FileDraftStore", "MemoryDraftStore", "get_draft_store"]
