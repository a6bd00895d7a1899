"""Actions and the effects they apply.

An ``Action`` is a named, costed operation: a precondition plus an ordered
list of ``Effect`` objects. Each effect mutates exactly one property on
either the agent or the world store. Effects also expose a speculative
``check`` that answers "what would the stores look like afterwards?"
without touching the originals.

Actions and effects are immutable once built. Actions compare by
identity: two actions with the same name are still different actions to
the planner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Literal, NamedTuple, Optional, Sequence, Tuple, Union

from .store import MemoryStore, StateStore

Target = Literal["agent", "world"]
TARGETS: Tuple[str, ...] = ("agent", "world")

Predicate = Callable[[StateStore, StateStore], bool]
Mutator = Callable[[StateStore, StateStore], None]


class Concept(NamedTuple):
    """A hypothetical agent/world pair that expectations can compare."""

    agent: StateStore
    world: StateStore


EffectCheck = Callable[[StateStore, StateStore], Optional[Concept]]


def _validate_target(target: str) -> None:
    if target not in TARGETS:
        raise ValueError(f"Unknown target '{target}'; expected one of {TARGETS}")


@dataclass(frozen=True, eq=False)
class Effect:
    """Atomic mutation of one property on one target store."""

    name: str
    target: Target
    apply: Mutator
    check: EffectCheck

    def __post_init__(self) -> None:
        _validate_target(self.target)


def _always(_agent: StateStore, _world: StateStore) -> bool:
    return True


@dataclass(frozen=True, eq=False)
class Action:
    """Named, costed operation made of a precondition and ordered effects."""

    name: str
    cost: float = 0
    can_perform: Predicate = _always
    effects: Tuple[Effect, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Action '{self.name}' has negative cost {self.cost}")
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, "effects", tuple(self.effects))

    def __repr__(self) -> str:
        return f"Action({self.name!r}, cost={self.cost})"


NOOP = Action(name="No Op", cost=0)
"""Zero-cost, always performable action used as the plan for satisfied goals."""


def apply_action(agent: StateStore, world: StateStore, action: Action) -> None:
    """Commit every effect of ``action`` to the given stores, in order."""
    for effect in action.effects:
        effect.apply(agent, world)


def plan_cost(plan: Sequence[Action]) -> float:
    return sum(action.cost for action in plan)


Amount = Union[float, Tuple[float, float, float]]


def change_amount_effect(amount: Amount, target: Target, prop: str) -> Effect:
    """Build an effect that shifts ``target.prop`` by a signed delta.

    ``amount`` is either a flat delta or a ``(delta, min, max)`` triple; in
    the second form the new value is clamped into ``[min, max]``. The
    effect is named ``"Increment <prop> on <target>"`` or ``"Decrement ..."``
    after the sign of the delta.
    """
    _validate_target(target)
    if isinstance(amount, tuple):
        delta, low, high = amount
        if low > high:
            raise ValueError(f"Clamp range for '{prop}' is empty: min {low} > max {high}")
    else:
        delta, low, high = amount, -math.inf, math.inf

    def update_store(store: StateStore) -> None:
        store.set(prop, min(max(store.get(prop) + delta, low), high))

    if target == "agent":
        def apply(agent: StateStore, _world: StateStore) -> None:
            update_store(agent)
    else:
        def apply(_agent: StateStore, world: StateStore) -> None:
            update_store(world)

    def check(agent: StateStore, world: StateStore) -> Optional[Concept]:
        store = agent if target == "agent" else world
        if not store.has(prop):
            return None
        fake_agent = MemoryStore.from_store("fakeAgent", agent)
        fake_world = MemoryStore.from_store("fakeWorld", world)
        apply(fake_agent, fake_world)
        return Concept(fake_agent, fake_world)

    direction = "Decrement" if delta < 0 else "Increment"
    return Effect(name=f"{direction} {prop} on {target}", target=target, apply=apply, check=check)
