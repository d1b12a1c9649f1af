"""Persisted calculator form — the last-entered values survive restarts.

Lifecycle: ``load()`` once at session start, ``save()`` whenever the form
changes.  The engine never touches this state.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from compound_projector.config.form import CalculatorForm

logger = logging.getLogger(__name__)


class InputStore:
    """JSON file holding one ``CalculatorForm``."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> CalculatorForm:
        """Return the saved form, or a blank one if nothing usable is stored."""
        if not self.path.exists():
            return CalculatorForm()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return CalculatorForm.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable saved inputs at %s: %s", self.path, exc)
            return CalculatorForm()

    def save(self, form: CalculatorForm) -> None:
        """Write ``form`` atomically, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".inputs-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(form.model_dump(), f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved calculator inputs to %s", self.path)

    def clear(self) -> None:
        """Forget the saved form."""
        self.path.unlink(missing_ok=True)
