"""Named scenario files: YAML in, ``InputAssumptions`` out.

The bundled scenarios ship inside the package (``config/scenarios/``) and
are located with ``importlib.resources``, so they resolve the same way from
a source checkout and from an installed wheel.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from governos_roi.config.assumptions import InputAssumptions

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

SCENARIO_DIR: Traversable = resources.files("governos_roi.config") / "scenarios"


def _as_dir(directory: str | Path | Traversable) -> Path | Traversable:
    return Path(directory) if isinstance(directory, str) else directory


def load_inputs(path: str | Path | Traversable) -> InputAssumptions:
    """Load a scenario YAML file.

    Sections may be partial; missing fields take their defaults.  Keys may
    be snake_case or the calculator's camelCase.  Parse and validation
    errors propagate to the caller.
    """
    with _as_dir(path).open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return InputAssumptions.model_validate(data)


def list_scenarios(directory: str | Path | Traversable = SCENARIO_DIR) -> list[str]:
    """Names of the scenario files in ``directory`` (stem of each ``*.yaml``)."""
    return sorted(
        entry.name.removesuffix(".yaml")
        for entry in _as_dir(directory).iterdir()
        if entry.name.endswith(".yaml") and entry.is_file()
    )


def load_named_scenario(name: str, directory: str | Path | Traversable = SCENARIO_DIR) -> InputAssumptions:
    """Load ``<directory>/<name>.yaml``.  Raises ``FileNotFoundError`` for unknown names."""
    if name not in list_scenarios(directory):
        raise FileNotFoundError(f"No scenario named {name!r} in {directory}")
    return load_inputs(_as_dir(directory) / f"{name}.yaml")


def dump_inputs(inputs: InputAssumptions, path: str | Path) -> None:
    """Write inputs as a complete YAML scenario (snake_case keys)."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(inputs.model_dump(), f, sort_keys=False)
