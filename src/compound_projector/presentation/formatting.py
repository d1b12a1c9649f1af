"""Display formatting — currency amounts and period labels.

Pure string helpers; nothing here feeds back into the numbers.
"""

from __future__ import annotations

from typing import Literal

from compound_projector.config.inputs import DurationUnit

Language = Literal["en", "he"]

_PERIOD_LABELS: dict[str, dict[str, str]] = {
    "en": {"months": "{n} months", "years": "{n} years", "both": "{y} years and {m} months"},
    "he": {"months": "{n} חודשים", "years": "{n} שנים", "both": "{y} שנים ו-{m} חודשים"},
}


def format_currency(amount: float, symbol: str = "₪") -> str:
    """Whole-unit amount with thousands separators, e.g. ``₪1,127`` / ``-₪40``."""
    rounded = round(amount)
    if rounded < 0:
        return f"-{symbol}{-rounded:,.0f}"
    return f"{symbol}{rounded:,.0f}"


def format_period(months: int, language: Language = "en") -> str:
    """Month count as text: ``5 months``, ``2 years``, ``2 years and 5 months``."""
    labels = _PERIOD_LABELS[language]
    years, rem = divmod(months, 12)
    if years == 0:
        return labels["months"].format(n=rem)
    if rem == 0:
        return labels["years"].format(n=years)
    return labels["both"].format(y=years, m=rem)


def axis_tick(period: int, duration_unit: DurationUnit) -> int:
    """Chart x-axis value: the month itself, or whole elapsed years."""
    if duration_unit == "months":
        return period
    return period // 12
