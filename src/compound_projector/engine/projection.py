"""Monthly compound-interest projection.

Interest compounds monthly whatever the deposit cadence, so the loop always
runs at month granularity:
  - interest accrues on the balance *before* this month's deposit
  - monthly deposits land every month
  - yearly deposits land in full on months 12, 24, 36, … (end-of-year model)
  - tax is a flat multiplier on total profit, applied once after the loop
"""

from __future__ import annotations

import logging
import math

from compound_projector.config.inputs import ProjectionInputs
from compound_projector.errors import InvalidInput
from compound_projector.models.results import PeriodRecord, ProjectionResult

logger = logging.getLogger(__name__)

TAX_RATE = 0.25
"""Flat tax on realised profit."""


def validate_inputs(inputs: ProjectionInputs) -> None:
    """Raise ``InvalidInput`` listing every violated precondition."""
    errors: list[str] = []

    for name in ("initial_amount", "annual_interest_rate_pct", "periodic_deposit"):
        value = getattr(inputs, name)
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number, got {value!r}")

    if inputs.duration <= 0:
        errors.append(f"duration must be positive, got {inputs.duration}")
    if inputs.initial_amount < 0:
        errors.append(f"initial_amount must be non-negative, got {inputs.initial_amount}")
    if inputs.periodic_deposit < 0:
        errors.append(f"periodic_deposit must be non-negative, got {inputs.periodic_deposit}")

    if errors:
        raise InvalidInput(errors)


def deposit_for_month(inputs: ProjectionInputs, month: int) -> float:
    """Amount deposited at the end of ``month`` (1-based)."""
    if inputs.deposit_frequency == "monthly":
        return inputs.periodic_deposit
    return inputs.periodic_deposit if month % 12 == 0 else 0.0


def project(inputs: ProjectionInputs) -> ProjectionResult:
    """Run one deterministic projection.

    Returns the aggregates plus one ``PeriodRecord`` per month, ordered
    by period.  Raises ``InvalidInput`` before doing any work if the
    inputs violate a precondition.
    """
    validate_inputs(inputs)

    total_months = inputs.total_months
    monthly_rate = inputs.monthly_rate

    current_amount = inputs.initial_amount
    total_deposits = inputs.initial_amount
    details: list[PeriodRecord] = []

    for month in range(1, total_months + 1):
        interest = current_amount * monthly_rate
        deposit = deposit_for_month(inputs, month)

        current_amount += interest + deposit
        total_deposits += deposit

        details.append(PeriodRecord(
            period=month,
            cumulative_deposits=total_deposits,
            profit=current_amount - total_deposits,
            total=current_amount,
        ))

    total_profit = current_amount - total_deposits

    logger.debug(
        "Projected %d months (%s deposits of %s): final=%.2f",
        total_months, inputs.deposit_frequency, inputs.periodic_deposit, current_amount,
    )

    return ProjectionResult(
        final_amount=current_amount,
        total_deposits=total_deposits,
        total_profit=total_profit,
        profit_after_tax=total_profit * (1 - TAX_RATE),
        monthly_details=tuple(details),
    )
