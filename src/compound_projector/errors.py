"""Domain errors."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Inputs that cannot produce a projection.

    Always recoverable by correcting the input.  ``errors`` holds one
    human-readable message per offending field.
    """

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
