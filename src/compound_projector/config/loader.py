"""YAML scenario files → ``ProjectionInputs``."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from compound_projector.config.inputs import ProjectionInputs

logger = logging.getLogger(__name__)


def load_inputs(path: str | Path) -> ProjectionInputs:
    """Load one scenario file.  Missing fields take model defaults."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return ProjectionInputs(**data)


def load_scenarios(directory: str | Path) -> dict[str, ProjectionInputs]:
    """Load every ``*.yaml`` file in ``directory``, keyed by file stem."""
    scenarios: dict[str, ProjectionInputs] = {}
    for path in sorted(Path(directory).glob("*.yaml")):
        scenarios[path.stem] = load_inputs(path)
    logger.info("Loaded %d scenario(s) from %s", len(scenarios), directory)
    return scenarios
