"""Engine — deterministic month-by-month projection."""

from compound_projector.engine.projection import TAX_RATE, project, validate_inputs

__all__ = [
    "TAX_RATE",
    "project",
    "validate_inputs",
]
