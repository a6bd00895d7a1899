"""Tests for loading initial stores from scenario files."""

import json

import pytest

from minigoap.config import Config
from minigoap.errors import ScenarioError
from minigoap.scenario import build_stores, load_scenario, scenario_from_dict


def write_scenario(tmp_path, name, payload):
    path = tmp_path / f"{name}.json"
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
    return path


def test_load_scenario_from_path(tmp_path):
    path = write_scenario(
        tmp_path,
        "camp",
        {"name": "camp", "agent": {"wood": 1}, "world": {"fire": 3}},
    )

    agent, world = load_scenario(path)

    assert agent.name == "camp:agent"
    assert world.name == "camp:world"
    assert agent.get("wood") == 1
    assert world.get("fire") == 3


def test_load_scenario_by_name(tmp_path):
    write_scenario(tmp_path, "forest", {"agent": {}, "world": {"wood": 50}})

    agent, world = load_scenario("forest", scenarios_dir=tmp_path)

    assert agent.keys() == []
    assert world.name == "scenario:world"


def test_bundled_campfire_scenario():
    agent, world = load_scenario("campfire", scenarios_dir=Config.SCENARIOS_DIR)
    assert agent.snapshot() == {"pos": [0, 0], "wood": 0, "food": 20, "hunger": 0}
    assert world.snapshot() == {"fire": 9, "wood": 50}


def test_missing_scenario_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scenario("nowhere", scenarios_dir=tmp_path)


def test_invalid_json_raises(tmp_path):
    path = write_scenario(tmp_path, "broken", "{not json")
    with pytest.raises(ScenarioError) as excinfo:
        load_scenario(path)
    assert "invalid JSON" in excinfo.value.reason


def test_missing_world_block_raises(tmp_path):
    path = write_scenario(tmp_path, "half", {"agent": {"wood": 1}})
    with pytest.raises(ScenarioError):
        load_scenario(path)


def test_blank_property_name_rejected():
    with pytest.raises(ScenarioError):
        scenario_from_dict({"agent": {" ": 1}, "world": {}})


def test_top_level_must_be_object(tmp_path):
    path = write_scenario(tmp_path, "list", [1, 2])
    with pytest.raises(ScenarioError):
        load_scenario(path)


def test_build_stores_strict():
    scenario = scenario_from_dict({"name": "s", "agent": {"a": 1}, "world": {}})
    agent, _world = build_stores(scenario, strict=True)
    assert agent.strict is True
