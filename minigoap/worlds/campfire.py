"""Campfire world: keep a fire burning without starving.

The agent gathers wood from the world, feeds it to the fire and eats
from its food supply. The fire loses one point every tick (ambient
``fire_decay``). The ``survive`` goal wants a healthy fire, a small wood
reserve in hand and a hunger level below 50.

Actions (cost):
- no-op (0)
- get_wood (4): world.wood -2, agent.wood +2, agent.hunger +4
- feed_fire (2): agent.wood -2, world.fire +10, agent.hunger +2
- eat_food (1): agent.food -1, agent.hunger -4 clamped to [0, 100]
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..actions import NOOP, Action, Concept, change_amount_effect
from ..goals import Comparison, Goal, goal_builder, num_cmp
from ..planner import Planner
from ..store import MemoryStore, StateStore

FIRE_HEALTHY = 69
WOOD_RESERVE = (5, 10)
HUNGER_LIMIT = 50

INITIAL_AGENT: Dict[str, Any] = {"pos": [0, 0], "wood": 0, "food": 20, "hunger": 0}
INITIAL_WORLD: Dict[str, Any] = {"fire": 9, "wood": 50}


# Comparers -------------------------------------------------------------------


def compare_fire(a: Concept, b: Concept) -> Comparison:
    """More fire wins while both are below the healthy level; otherwise more wood in hand."""
    fire_a = a.world.get("fire")
    fire_b = b.world.get("fire")
    wood_a = a.agent.get("wood")
    wood_b = b.agent.get("wood")
    if fire_a < FIRE_HEALTHY and fire_b < FIRE_HEALTHY:
        fire_cmp = num_cmp(fire_a, fire_b)
        if fire_cmp is not Comparison.EQ:
            return fire_cmp
        if wood_a < 2 and wood_b < 2:
            return Comparison.EQ
    return num_cmp(wood_a, wood_b)


def compare_wood(a: Concept, b: Concept) -> Comparison:
    """Climb toward the reserve from below, fall back toward it from above."""
    low, high = WOOD_RESERVE
    wood_a = a.agent.get("wood")
    wood_b = b.agent.get("wood")
    if wood_a < low and wood_b < low:
        return num_cmp(wood_a, wood_b)
    if wood_a > high and wood_b <= high:
        return Comparison.LT
    if wood_a <= high and wood_b > high:
        return Comparison.GT
    if wood_a > high and wood_b > high:
        return num_cmp(wood_b, wood_a)
    return Comparison.EQ


def compare_hunger(a: Concept, b: Concept) -> Comparison:
    hunger_a = a.agent.get("hunger")
    hunger_b = b.agent.get("hunger")
    # Low hunger is not worth ranking on.
    if hunger_a < 10 and hunger_b < 10:
        return Comparison.EQ
    return num_cmp(hunger_b, hunger_a)


def build_survive_goal() -> Goal:
    low, high = WOOD_RESERVE
    return (
        goal_builder()
        .name("survive")
        .expect(
            lambda b: b.name("fire-healthy")
            .target("world")
            .prop("fire")
            .checker(lambda _agent, world: world.get("fire") >= FIRE_HEALTHY)
            .comparer(compare_fire)
            .build()
        )
        .expect(
            lambda b: b.name("have-wood")
            .target("agent")
            .prop("wood")
            .checker(lambda agent, _world: low <= agent.get("wood") <= high)
            .comparer(compare_wood)
            .build()
        )
        .expect(
            lambda b: b.name("dont-starve")
            .target("agent")
            .prop("hunger")
            .checker(lambda agent, _world: agent.get("hunger") < HUNGER_LIMIT)
            .comparer(compare_hunger)
            .build()
        )
        .build()
    )


# Actions ---------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _can_get_wood(_agent: StateStore, world: StateStore) -> bool:
    wood = world.get("wood")
    return _is_number(wood) and wood >= 2


def _can_feed_fire(agent: StateStore, world: StateStore) -> bool:
    if not agent.has("wood") or not world.has("wood"):
        return False
    wood = agent.get("wood")
    return _is_number(wood) and wood >= 2


def _can_eat_food(agent: StateStore, _world: StateStore) -> bool:
    return agent.get("food") > 0 and agent.get("hunger") > 2


def _fire_burning(_agent: StateStore, world: StateStore) -> bool:
    return world.get("fire") > 0


GET_WOOD = Action(
    name="get_wood",
    cost=4,
    can_perform=_can_get_wood,
    effects=(
        change_amount_effect(-2, "world", "wood"),
        change_amount_effect(2, "agent", "wood"),
        change_amount_effect(4, "agent", "hunger"),
    ),
)

FEED_FIRE = Action(
    name="feed_fire",
    cost=2,
    can_perform=_can_feed_fire,
    effects=(
        change_amount_effect(-2, "agent", "wood"),
        change_amount_effect(10, "world", "fire"),
        change_amount_effect(2, "agent", "hunger"),
    ),
)

EAT_FOOD = Action(
    name="eat_food",
    cost=1,
    can_perform=_can_eat_food,
    effects=(
        change_amount_effect(-1, "agent", "food"),
        change_amount_effect((-4, 0, 100), "agent", "hunger"),
    ),
)

FIRE_DECAY = Action(
    name="fire_decay",
    cost=0,
    can_perform=_fire_burning,
    effects=(change_amount_effect(-1, "world", "fire"),),
)


@dataclass
class CampfireWorld:
    """Everything a host needs to run the campfire scenario."""

    goal: Goal
    agent: MemoryStore
    world: MemoryStore
    planner: Planner
    actions: Tuple[Action, ...]
    ambient: Tuple[Action, ...]


def create_campfire_world(
    *,
    planner: Optional[Planner] = None,
    agent: Optional[MemoryStore] = None,
    world: Optional[MemoryStore] = None,
) -> CampfireWorld:
    """Build the survive goal, register the actions and create fresh stores.

    Pass ``agent``/``world`` (for example from ``load_scenario``) to start
    from a different state; the default is the classic starting point.
    """
    planner = planner or Planner()
    actions = (NOOP, GET_WOOD, EAT_FOOD, FEED_FIRE)
    ambient = (FIRE_DECAY,)
    planner.set_actions(actions)
    planner.set_ambient_actions(ambient)
    return CampfireWorld(
        goal=build_survive_goal(),
        agent=agent if agent is not None else MemoryStore.from_mapping("Agent", deepcopy(INITIAL_AGENT)),
        world=world if world is not None else MemoryStore.from_mapping("World", deepcopy(INITIAL_WORLD)),
        planner=planner,
        actions=actions,
        ambient=ambient,
    )
