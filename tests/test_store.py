"""Tests for the key/value store contract."""

import pytest

from minigoap.errors import StoreContractError
from minigoap.store import MemoryStore, StateStore, clone_pair


def test_put_creates_and_refuses_existing_key():
    store = MemoryStore("Agent")

    assert store.put("wood", 3) is True
    assert store.get("wood") == 3

    assert store.put("wood", 7) is False
    assert store.get("wood") == 3


def test_set_updates_only_existing_keys():
    store = MemoryStore("Agent")
    store.put("wood", 3)

    assert store.set("wood", 5) is True
    assert store.get("wood") == 5

    assert store.set("food", 1) is False
    assert store.has("food") is False


def test_get_missing_key_returns_none():
    store = MemoryStore()
    assert store.get("nothing") is None
    assert store.has("nothing") is False


def test_none_value_reads_like_missing_key_but_has_tells_apart():
    store = MemoryStore.from_mapping("Agent", {"target": None})
    assert store.get("target") is None
    assert store.get("missing") is None
    assert store.has("target")
    assert not store.has("missing")


def test_keys_keep_insertion_order():
    store = MemoryStore.from_mapping("World", {"fire": 9, "wood": 50})
    assert store.keys() == ["fire", "wood"]
    assert len(store) == 2
    assert "fire" in store


def test_from_store_builds_independent_copy():
    source = MemoryStore.from_mapping("Agent", {"wood": 0, "hunger": 4})
    clone = MemoryStore.from_store("Clone", source)

    assert clone.snapshot() == {"wood": 0, "hunger": 4}
    clone.set("wood", 10)
    assert source.get("wood") == 0
    assert clone.name == "Clone"


def test_clone_pair_labels_and_isolates_branches():
    agent = MemoryStore.from_mapping("Agent", {"wood": 1})
    world = MemoryStore.from_mapping("World", {"fire": 2})

    sim_agent, sim_world = clone_pair(agent, world, "Simulated")
    sim_agent.set("wood", 5)
    sim_world.set("fire", 0)

    assert sim_agent.name == "SimulatedAgent"
    assert sim_world.name == "SimulatedWorld"
    assert agent.get("wood") == 1
    assert world.get("fire") == 2


def test_from_store_accepts_any_state_store():
    class DictStore:
        def __init__(self):
            self.data = {"fire": 3}

        def get(self, key):
            return self.data.get(key)

        def set(self, key, value):
            if key not in self.data:
                return False
            self.data[key] = value
            return True

        def put(self, key, value):
            if key in self.data:
                return False
            self.data[key] = value
            return True

        def has(self, key):
            return key in self.data

        def keys(self):
            return list(self.data)

    foreign = DictStore()
    assert isinstance(foreign, StateStore)

    clone = MemoryStore.from_store("Copy", foreign)
    assert clone.get("fire") == 3
    assert clone.strict is False


def test_strict_store_raises_on_contract_violation():
    store = MemoryStore("Agent", strict=True)
    store.put("wood", 1)

    with pytest.raises(StoreContractError) as put_error:
        store.put("wood", 2)
    assert put_error.value.operation == "put"
    assert put_error.value.key == "wood"

    with pytest.raises(StoreContractError) as set_error:
        store.set("food", 2)
    assert set_error.value.operation == "set"
    assert "use put()" in str(set_error.value)


def test_strictness_carries_over_to_clones():
    store = MemoryStore.from_mapping("Agent", {"wood": 1}, strict=True)
    clone = store.clone()

    assert clone.strict is True
    with pytest.raises(StoreContractError):
        clone.set("missing", 1)


def test_describe_and_snapshot():
    store = MemoryStore.from_mapping("World", {"fire": 9})
    assert store.describe() == '[Store World<{"fire": 9}>]'

    snapshot = store.snapshot()
    snapshot["fire"] = 0
    assert store.get("fire") == 9
