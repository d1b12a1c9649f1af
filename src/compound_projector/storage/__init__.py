"""Persistence for user-entered calculator state."""

from compound_projector.storage.state import InputStore

__all__ = ["InputStore"]
