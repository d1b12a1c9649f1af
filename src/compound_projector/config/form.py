"""Calculator form — raw user input and its conversion to ``ProjectionInputs``.

The form keeps every numeric field as the string the user typed, so a
half-edited value survives persistence unchanged.  Parsing happens once,
in ``to_inputs``.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, ValidationError, model_validator

from compound_projector.config.inputs import DepositFrequency, DurationUnit, ProjectionInputs
from compound_projector.errors import InvalidInput


class CalculatorForm(BaseModel):
    """Form state as entered.  Blank strings mean "not filled in"."""

    initial_amount: str = Field(default="", description="Starting principal")
    interest_rate: str = Field(default="", description="Annual interest rate in percent")
    periodic_deposit: str = Field(default="", description="Deposit per period")
    duration: str = Field(default="", description="Projection length")
    deposit_frequency: DepositFrequency = "monthly"
    duration_unit: DurationUnit = "years"

    @model_validator(mode="after")
    def couple_yearly_to_years(self) -> "CalculatorForm":
        # Yearly deposits only make sense over whole years.
        if self.deposit_frequency == "yearly" and self.duration_unit != "years":
            self.duration_unit = "years"
        return self

    @property
    def ready(self) -> bool:
        """True once the fields without a usable blank default are filled in."""
        return bool(self.periodic_deposit.strip()) and bool(self.duration.strip())

    def update(self, **changes: str) -> "CalculatorForm":
        """Return a new form with ``changes`` applied and the coupling re-enforced."""
        return CalculatorForm.model_validate({**self.model_dump(), **changes})

    def to_inputs(self, max_total_months: int | None = None) -> ProjectionInputs:
        """Parse into engine inputs.

        Blank principal and rate count as zero.  Raises ``InvalidInput``
        for non-numeric text or a projection longer than
        ``max_total_months``.
        """
        payload = {
            "initial_amount": self.initial_amount.strip() or "0",
            "annual_interest_rate_pct": self.interest_rate.strip() or "0",
            "periodic_deposit": self.periodic_deposit.strip(),
            "duration": self.duration.strip(),
            "deposit_frequency": self.deposit_frequency,
            "duration_unit": self.duration_unit,
        }
        try:
            inputs = ProjectionInputs.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInput([
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]) from exc

        if max_total_months is not None and inputs.total_months > max_total_months:
            raise InvalidInput([
                f"duration: {inputs.total_months} months exceeds the "
                f"{max_total_months}-month limit"
            ])
        return inputs

    @classmethod
    def from_inputs(cls, inputs: ProjectionInputs) -> "CalculatorForm":
        """Render a parsed snapshot back into form strings."""
        return cls(
            initial_amount=_fmt_number(inputs.initial_amount),
            interest_rate=_fmt_number(inputs.annual_interest_rate_pct),
            periodic_deposit=_fmt_number(inputs.periodic_deposit),
            duration=str(inputs.duration),
            deposit_frequency=inputs.deposit_frequency,
            duration_unit=inputs.duration_unit,
        )


def _fmt_number(value: float) -> str:
    """Whole numbers without a trailing '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)
