"""Key/value state containers for agents and worlds.

Every piece of planner state lives in a store: the real agent and world
the caller owns, and the throwaway clones the search creates for each
speculative branch. Stores only promise the small ``StateStore``
protocol below, so hosts can plug in their own containers; the search
itself always clones into ``MemoryStore`` instances.

Write contract:
- ``put`` creates a property and fails when it already exists
- ``set`` updates a property and fails when it does not exist
- ``get`` returns ``None`` for missing properties and never raises

A property stored with the value ``None`` reads the same as a missing one
through ``get``; use ``has`` to tell them apart.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .errors import StoreContractError


@runtime_checkable
class StateStore(Protocol):
    """Minimal contract every agent/world container must satisfy."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> bool:
        ...

    def put(self, key: str, value: Any) -> bool:
        ...

    def has(self, key: str) -> bool:
        ...

    def keys(self) -> List[str]:
        ...


class MemoryStore:
    """Dict-backed ``StateStore``.

    ``name`` only shows up in logs and snapshots. A ``strict`` store raises
    ``StoreContractError`` on a write contract violation instead of
    returning False; clones keep the strictness of their source.
    """

    def __init__(self, name: str = "store", *, strict: bool = False) -> None:
        self.name = name
        self.strict = strict
        self._values: Dict[str, Any] = {}

    @classmethod
    def from_store(cls, name: str, store: StateStore, *, strict: Optional[bool] = None) -> "MemoryStore":
        """Copy every property of ``store`` into a fresh store (shallow copy)."""
        if strict is None:
            strict = getattr(store, "strict", False)
        clone = cls(name, strict=strict)
        for key in store.keys():
            clone._values[key] = store.get(key)
        return clone

    @classmethod
    def from_mapping(cls, name: str, origin: Mapping[str, Any], *, strict: bool = False) -> "MemoryStore":
        """Build a store from a plain mapping of initial values."""
        store = cls(name, strict=strict)
        for key, value in origin.items():
            if store.has(key):
                store.set(key, value)
            else:
                store.put(key, value)
        return store

    def clone(self, name: Optional[str] = None) -> "MemoryStore":
        return MemoryStore.from_store(name or self.name, self)

    # StateStore ---------------------------------------------------------------

    def get(self, key: str) -> Optional[Any]:
        """Return the value, or None when missing (or stored as None)."""
        return self._values.get(key)

    def set(self, key: str, value: Any) -> bool:
        if key not in self._values:
            if self.strict:
                raise StoreContractError(store=self.name, operation="set", key=key)
            return False
        self._values[key] = value
        return True

    def put(self, key: str, value: Any) -> bool:
        if key in self._values:
            if self.strict:
                raise StoreContractError(store=self.name, operation="put", key=key)
            return False
        self._values[key] = value
        return True

    def has(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> List[str]:
        return list(self._values)

    # Reporting ----------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow dict copy of the current values."""
        return dict(self._values)

    def describe(self) -> str:
        """Human readable one-liner, e.g. ``[Store Agent<{"wood": 0}>]``."""
        return f"[Store {self.name}<{json.dumps(self._values, default=repr)}>]"

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"MemoryStore(name={self.name!r}, values={self._values!r})"


def clone_pair(agent: StateStore, world: StateStore, label: str) -> tuple[MemoryStore, MemoryStore]:
    """Clone an agent/world pair into disposable stores for one search branch."""
    return (
        MemoryStore.from_store(f"{label}Agent", agent),
        MemoryStore.from_store(f"{label}World", world),
    )
