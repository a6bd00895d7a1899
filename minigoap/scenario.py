"""
Scenario loading for JSON-defined initial stores.

A scenario file only describes the starting agent and world properties;
actions and goals are code. Keeping the initial numbers in data makes it
easy to try the same world from different starting points.

Scenario file structure:
```json
{
  "name": "campfire",
  "description": "...",
  "agent": {"wood": 0, "food": 20, "hunger": 0},
  "world": {"fire": 9, "wood": 50}
}
```

Usage:
    agent, world = load_scenario("campfire")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from .config import Config
from .errors import ScenarioError
from .schemas import ScenarioDefinition
from .store import MemoryStore


def scenario_from_dict(data: Dict[str, Any], *, source: str = "<dict>") -> ScenarioDefinition:
    """Validate raw scenario data, wrapping pydantic errors in ``ScenarioError``."""
    try:
        return ScenarioDefinition.model_validate(data)
    except ValidationError as exc:
        raise ScenarioError(source=source, reason=str(exc), underlying=exc) from exc


def build_stores(
    scenario: ScenarioDefinition, *, strict: bool = False
) -> Tuple[MemoryStore, MemoryStore]:
    """Create fresh agent/world stores named after the scenario."""
    agent = MemoryStore.from_mapping(f"{scenario.name}:agent", scenario.agent, strict=strict)
    world = MemoryStore.from_mapping(f"{scenario.name}:world", scenario.world, strict=strict)
    return agent, world


def resolve_scenario_path(scenario: Union[str, Path], scenarios_dir: Optional[Path] = None) -> Path:
    """Accept either a path to a JSON file or a bare scenario name."""
    path = Path(scenario)
    if path.suffix == ".json" or path.exists():
        return path
    return (scenarios_dir or Config.SCENARIOS_DIR) / f"{scenario}.json"


def load_scenario(
    scenario: Union[str, Path],
    *,
    scenarios_dir: Optional[Path] = None,
    strict: bool = False,
) -> Tuple[MemoryStore, MemoryStore]:
    """Load a scenario file and return ``(agent, world)`` stores.

    Raises:
        FileNotFoundError: If the scenario file doesn't exist
        ScenarioError: If the file is not valid JSON or misses required blocks
    """
    path = resolve_scenario_path(scenario, scenarios_dir)
    if not path.exists():
        raise FileNotFoundError(f"Scenario '{scenario}' not found at {path}")

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ScenarioError(source=str(path), reason=f"invalid JSON ({exc})", underlying=exc) from exc

    if not isinstance(data, dict):
        raise ScenarioError(source=str(path), reason="top-level value must be an object")

    return build_stores(scenario_from_dict(data, source=str(path)), strict=strict)
