"""Result models — projection output contracts."""

from compound_projector.models.results import (
    PeriodRecord,
    ProjectionResult,
    SummaryFigures,
    TableRow,
)

__all__ = [
    "PeriodRecord",
    "ProjectionResult",
    "SummaryFigures",
    "TableRow",
]
