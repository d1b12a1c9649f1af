"""Application settings — read once from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "COMPOUND_PROJECTOR_"


def _default_state_path() -> Path:
    return Path.home() / ".compound_projector" / "calculator_inputs.json"


class AppSettings(BaseModel):
    """Settings shared by the API and the dashboard.

    The engine never reads these; they bound and decorate what callers
    send it.
    """

    state_path: Path = Field(
        default_factory=_default_state_path,
        description="File holding the last-entered calculator form.",
    )
    max_total_months: int = Field(
        default=1200, ge=1, le=12_000,
        description="Longest projection accepted from a user, in months. "
                    "Bounds compute time and output size.",
    )
    currency_symbol: str = Field(default="₪", description="Symbol prefixed to formatted amounts")
    language: Literal["en", "he"] = Field(default="en", description="Label language for period text")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from ``COMPOUND_PROJECTOR_*`` variables; unset ones keep defaults."""
        env_map = {
            "state_path": "STATE_PATH",
            "max_total_months": "MAX_MONTHS",
            "currency_symbol": "CURRENCY",
            "language": "LANGUAGE",
            "log_level": "LOG_LEVEL",
        }
        values = {}
        for field, suffix in env_map.items():
            raw = os.environ.get(ENV_PREFIX + suffix)
            if raw is not None and raw != "":
                values[field] = raw
        return cls(**values)
