"""Projection inputs — the engine's typed input snapshot."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DepositFrequency = Literal["monthly", "yearly"]
DurationUnit = Literal["months", "years"]


class ProjectionInputs(BaseModel):
    """Scalar inputs for one projection run.

    Carries types only.  Range checks (positive duration, non-negative
    amounts) belong to the engine, which rejects a bad snapshot with
    ``InvalidInput`` instead of projecting it.
    """

    model_config = ConfigDict(frozen=True)

    initial_amount: float = Field(default=0.0, description="Starting principal")
    annual_interest_rate_pct: float = Field(
        default=0.0,
        description="Nominal annual rate in percent (e.g. 5 for 5%). May be negative.",
    )
    deposit_frequency: DepositFrequency = Field(
        default="monthly",
        description="Cadence of periodic_deposit. 'yearly' deposits land at the end of each year.",
    )
    duration_unit: DurationUnit = Field(default="years", description="Unit of duration")
    duration: int = Field(default=10, description="Projection length in duration_unit units")
    periodic_deposit: float = Field(default=0.0, description="Amount deposited each period")

    @property
    def total_months(self) -> int:
        """Projection length normalised to months."""
        if self.duration_unit == "years":
            return self.duration * 12
        return self.duration

    @property
    def monthly_rate(self) -> float:
        """Annual percentage rate spread evenly over twelve months."""
        return self.annual_interest_rate_pct / 100 / 12
