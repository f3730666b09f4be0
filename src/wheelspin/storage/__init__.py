"""Persistence collaborator for wheelspin."""

from wheelspin.storage.state_store import SavedState, StateStore

__all__ = ["SavedState", "StateStore"]
