"""Goals, expectations and how candidate states are ranked against them.

A ``Goal`` is an ordered collection of ``Expectation`` objects. Each
expectation watches one property on one store and answers two questions:

- ``check``: is the criterion met right now?
- ``compare``: of two hypothetical agent/world pairs, which one is closer?

``goal_cmp`` turns the per-expectation answers into a majority vote, so
no single expectation can dominate by magnitude, only by vote count.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Tuple

from .actions import TARGETS, Concept, Predicate, Target
from .store import StateStore


class Comparison(Enum):
    """Three-way result of comparing two concepts."""

    GT = "gt"
    LT = "lt"
    EQ = "eq"

    def inverted(self) -> "Comparison":
        if self is Comparison.GT:
            return Comparison.LT
        if self is Comparison.LT:
            return Comparison.GT
        return Comparison.EQ


Comparer = Callable[[Concept, Concept], Comparison]


def num_cmp(a: float, b: float) -> Comparison:
    """Return GT when ``a`` is larger, LT when ``b`` is larger, EQ otherwise."""
    if a > b:
        return Comparison.GT
    if b > a:
        return Comparison.LT
    return Comparison.EQ


@dataclass(frozen=True, eq=False)
class Expectation:
    """One ranked, boolean criterion of a goal.

    Build instances with ``expectation()`` or ``ExpectationBuilder`` so that
    ``check`` is guarded by the property-exists test.
    """

    name: str
    target: Target
    property: str
    check: Predicate
    compare: Comparer


@dataclass(frozen=True, eq=False)
class Goal:
    name: str
    expectations: Tuple[Expectation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expectations", tuple(self.expectations))


def _always_met(_agent: StateStore, _world: StateStore) -> bool:
    return True


def _always_equal(_a: Concept, _b: Concept) -> Comparison:
    return Comparison.EQ


def expectation(
    name: str,
    target: Target,
    prop: str,
    checker: Predicate = _always_met,
    comparer: Comparer = _always_equal,
) -> Expectation:
    """Build an expectation whose ``check`` fails while ``prop`` is missing.

    ``checker`` only runs once the bound property exists on the target
    store, so it may read the property without guarding.
    """
    if target not in TARGETS:
        raise ValueError(f"Unknown target '{target}'; expected one of {TARGETS}")
    if not isinstance(prop, str):
        raise ValueError(f"Expectation '{name}' property must be a string, got {prop!r}")

    if target == "agent":
        def check(agent: StateStore, world: StateStore) -> bool:
            if not agent.has(prop):
                return False
            return checker(agent, world)
    else:
        def check(agent: StateStore, world: StateStore) -> bool:
            if not world.has(prop):
                return False
            return checker(agent, world)

    return Expectation(name=name, target=target, property=prop, check=check, compare=comparer)


def build_goal(name: str, expectations: Iterable[Expectation] = ()) -> Goal:
    return Goal(name=name, expectations=tuple(expectations))


class ExpectationBuilder:
    """Fluent builder for a single expectation.

    Defaults: name ``"expectation"``, target ``"agent"``, a checker that is
    always met and a comparer that always answers EQ.
    """

    def __init__(self) -> None:
        self._name = "expectation"
        self._prop = "<no-property>"
        self._target: Target = "agent"
        self._checker: Predicate = _always_met
        self._comparer: Comparer = _always_equal

    def name(self, name: str) -> "ExpectationBuilder":
        self._name = name
        return self

    def prop(self, prop: str) -> "ExpectationBuilder":
        self._prop = prop
        return self

    def target(self, target: Target) -> "ExpectationBuilder":
        self._target = target
        return self

    def checker(self, checker: Predicate) -> "ExpectationBuilder":
        self._checker = checker
        return self

    def comparer(self, comparer: Comparer) -> "ExpectationBuilder":
        self._comparer = comparer
        return self

    def build(self) -> Expectation:
        return expectation(self._name, self._target, self._prop, self._checker, self._comparer)


class GoalBuilder:
    """Fluent builder assembling an ordered list of expectations.

    Example::

        goal = (
            goal_builder()
            .name("survive")
            .expect(lambda b: b.name("warm").target("world").prop("fire").build())
            .build()
        )
    """

    def __init__(self) -> None:
        self._name = "goal"
        self._expectations: List[Expectation] = []

    def name(self, name: str) -> "GoalBuilder":
        self._name = name
        return self

    def expect(self, build: Callable[[ExpectationBuilder], Expectation]) -> "GoalBuilder":
        self._expectations.append(build(ExpectationBuilder()))
        return self

    def build(self) -> Goal:
        return build_goal(self._name, self._expectations)


def goal_builder() -> GoalBuilder:
    return GoalBuilder()


# Evaluation ----------------------------------------------------------------


def goal_reached(goal: Goal, agent: StateStore, world: StateStore) -> bool:
    """True when every expectation holds; stops at the first one that does not."""
    for expec in goal.expectations:
        if not expec.check(agent, world):
            return False
    return True


def goal_cmp(
    goal: Goal,
    agent_a: StateStore,
    world_a: StateStore,
    agent_b: StateStore,
    world_b: StateStore,
) -> Comparison:
    """Majority vote of every expectation's ``compare`` between two concepts."""
    votes_a = 0
    votes_b = 0
    concept_a = Concept(agent_a, world_a)
    concept_b = Concept(agent_b, world_b)
    for expec in goal.expectations:
        comparison = expec.compare(concept_a, concept_b)
        if comparison is Comparison.GT:
            votes_a += 1
        elif comparison is Comparison.LT:
            votes_b += 1
    if votes_a > votes_b:
        return Comparison.GT
    if votes_b > votes_a:
        return Comparison.LT
    return Comparison.EQ


def unmet_expectations(goal: Goal, agent: StateStore, world: StateStore) -> List[Expectation]:
    """Return the expectations whose ``check`` currently fails, in goal order."""
    return [expec for expec in goal.expectations if not expec.check(agent, world)]
