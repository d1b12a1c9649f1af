"""Presentation helpers — formatting and views over projection results."""

from compound_projector.presentation.formatting import axis_tick, format_currency, format_period
from compound_projector.presentation.views import (
    build_growth_chart,
    details_frame,
    summary_figures,
    table_frame,
    table_rows,
)

__all__ = [
    "axis_tick",
    "format_currency",
    "format_period",
    "build_growth_chart",
    "details_frame",
    "summary_figures",
    "table_frame",
    "table_rows",
]
