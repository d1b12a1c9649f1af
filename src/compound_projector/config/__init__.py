"""Configuration models — inputs, form state, settings."""

from compound_projector.config.inputs import DepositFrequency, DurationUnit, ProjectionInputs
from compound_projector.config.form import CalculatorForm
from compound_projector.config.settings import AppSettings
from compound_projector.config.loader import load_inputs, load_scenarios

__all__ = [
    "DepositFrequency",
    "DurationUnit",
    "ProjectionInputs",
    "CalculatorForm",
    "AppSettings",
    "load_inputs",
    "load_scenarios",
]
