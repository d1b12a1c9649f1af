"""Narrative generator — plain-English reading of a projection.

Turns ``ProjectionInputs`` + ``ProjectionResult`` into a short sectioned
text block for API clients and the dashboard.
"""

from __future__ import annotations

from compound_projector.config.inputs import ProjectionInputs
from compound_projector.engine.projection import TAX_RATE
from compound_projector.models.results import ProjectionResult
from compound_projector.presentation.formatting import format_currency, format_period


def generate_narrative(
    inputs: ProjectionInputs,
    result: ProjectionResult,
    currency_symbol: str = "₪",
) -> str:
    """Generate a plain-English narrative covering inputs, outcome and tax."""
    def fmt(v: float) -> str:
        return format_currency(v, currency_symbol)

    horizon = format_period(inputs.total_months)
    cadence = "month" if inputs.deposit_frequency == "monthly" else "year"

    sections: list[str] = []

    # ── 1. Inputs ──
    sections.append("=" * 60)
    sections.append("INPUTS")
    sections.append("=" * 60)
    sections.append(
        f"Initial amount: {fmt(inputs.initial_amount)}\n"
        f"Annual interest rate: {inputs.annual_interest_rate_pct:g}% "
        f"(compounded monthly at {inputs.monthly_rate * 100:.4f}%)\n"
        f"Deposit: {fmt(inputs.periodic_deposit)} per {cadence}\n"
        f"Horizon: {horizon}"
    )

    # ── 2. Outcome ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("OUTCOME")
    sections.append("=" * 60)
    sections.append(
        f"Final amount: {fmt(result.final_amount)}\n"
        f"Total deposited: {fmt(result.total_deposits)}\n"
        f"Profit: {fmt(result.total_profit)}"
    )
    if result.total_deposits > 0:
        growth_pct = result.total_profit / result.total_deposits * 100
        sections.append(f"Growth on money deposited: {growth_pct:.1f}%")
    if result.total_profit < 0:
        sections.append("The balance ends below what was deposited: the rate is negative.")
    elif result.total_profit == 0:
        sections.append("No interest was earned over the horizon.")

    # ── 3. Tax ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("AFTER TAX")
    sections.append("=" * 60)
    sections.append(
        f"Tax rate on profit: {TAX_RATE:.0%}\n"
        f"Profit after tax: {fmt(result.profit_after_tax)}\n"
        f"Final amount after tax: {fmt(result.final_amount_after_tax)}"
    )

    sections.append("")
    sections.append(
        "This is an estimate under simplified assumptions and is not financial advice."
    )
    return "\n".join(sections)
