"""Shared test fixtures — the reference scenarios."""

from __future__ import annotations

import pytest

from compound_projector.config import CalculatorForm, ProjectionInputs


@pytest.fixture
def lump_sum() -> ProjectionInputs:
    """1,000 at 12% for 12 months, no deposits."""
    return ProjectionInputs(
        initial_amount=1000,
        annual_interest_rate_pct=12,
        deposit_frequency="monthly",
        duration_unit="months",
        duration=12,
        periodic_deposit=0,
    )


@pytest.fixture
def zero_rate_saver() -> ProjectionInputs:
    """100 a month for 10 months at 0%."""
    return ProjectionInputs(
        initial_amount=0,
        annual_interest_rate_pct=0,
        deposit_frequency="monthly",
        duration_unit="months",
        duration=10,
        periodic_deposit=100,
    )


@pytest.fixture
def yearly_saver() -> ProjectionInputs:
    """1,200 at each year-end for 2 years at 12%."""
    return ProjectionInputs(
        initial_amount=0,
        annual_interest_rate_pct=12,
        deposit_frequency="yearly",
        duration_unit="years",
        duration=2,
        periodic_deposit=1200,
    )


@pytest.fixture
def monthly_saver() -> ProjectionInputs:
    """5,000 up front plus 500 a month at 5% for 10 years."""
    return ProjectionInputs(
        initial_amount=5000,
        annual_interest_rate_pct=5,
        deposit_frequency="monthly",
        duration_unit="years",
        duration=10,
        periodic_deposit=500,
    )


@pytest.fixture
def filled_form() -> CalculatorForm:
    return CalculatorForm(
        initial_amount="1000",
        interest_rate="12",
        periodic_deposit="0",
        duration="12",
        deposit_frequency="monthly",
        duration_unit="months",
    )
