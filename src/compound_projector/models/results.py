"""Result types — the contract between engine, API, and dashboard.

The engine produces a ``ProjectionResult``; everything else in the package
only reads it.  Values are kept unrounded so the per-record identity
``total == cumulative_deposits + profit`` holds to floating-point precision.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Engine output
# ═══════════════════════════════════════════════════════════════════════════

class PeriodRecord(BaseModel):
    """Balance breakdown at the end of one month."""

    model_config = ConfigDict(frozen=True)

    period: int
    """1-based month index."""
    cumulative_deposits: float
    """Initial principal plus every deposit made through this month."""
    profit: float
    """total − cumulative_deposits."""
    total: float
    """Running balance after this month's interest and deposit."""


class ProjectionResult(BaseModel):
    """Aggregates plus the full month-by-month series."""

    model_config = ConfigDict(frozen=True)

    final_amount: float
    total_deposits: float
    total_profit: float
    profit_after_tax: float
    """total_profit × (1 − tax rate); tax is realised once, on withdrawal."""
    monthly_details: tuple[PeriodRecord, ...]

    @property
    def final_amount_after_tax(self) -> float:
        return self.total_deposits + self.profit_after_tax


# ═══════════════════════════════════════════════════════════════════════════
# Presentation views (derived from ProjectionResult, never fed back)
# ═══════════════════════════════════════════════════════════════════════════

class SummaryFigures(BaseModel):
    """The five headline figures shown above the table."""

    final_amount: float
    total_deposits: float
    total_profit: float
    profit_after_tax: float
    final_amount_after_tax: float


class TableRow(BaseModel):
    """One displayed row of the details table.

    ``label`` is the period as shown: a month number for monthly
    deposits, a year number for yearly ones.
    """

    label: int
    period: int
    cumulative_deposits: float
    profit: float
    total: float
