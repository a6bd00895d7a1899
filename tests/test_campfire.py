"""End-to-end planning in the campfire world."""

from minigoap.actions import NOOP, apply_action
from minigoap.goals import goal_reached
from minigoap.planner import Planner
from minigoap.store import MemoryStore
from minigoap.worlds import create_campfire_world
from minigoap.worlds.campfire import EAT_FOOD, FEED_FIRE, FIRE_DECAY, GET_WOOD


def replay(camp, plan):
    agent = MemoryStore.from_store("ReplayAgent", camp.agent)
    world = MemoryStore.from_store("ReplayWorld", camp.world)
    for action in plan:
        for ambient in camp.ambient:
            apply_action(agent, world, ambient)
        assert action.can_perform(agent, world), f"{action.name} not performable during replay"
        apply_action(agent, world, action)
    return agent, world


def test_world_setup_matches_classic_start():
    camp = create_campfire_world(planner=Planner(verbose=False))

    assert camp.agent.snapshot() == {"pos": [0, 0], "wood": 0, "food": 20, "hunger": 0}
    assert camp.world.snapshot() == {"fire": 9, "wood": 50}
    assert camp.planner.actions == (NOOP, EAT_FOOD, FEED_FIRE, GET_WOOD)
    assert camp.planner.ambient_actions == (FIRE_DECAY,)
    assert [e.name for e in camp.goal.expectations] == ["fire-healthy", "have-wood", "dont-starve"]
    assert goal_reached(camp.goal, camp.agent, camp.world) is False


def test_worlds_do_not_share_mutable_state():
    first = create_campfire_world(planner=Planner(verbose=False))
    second = create_campfire_world(planner=Planner(verbose=False))
    first.agent.get("pos").append(1)
    assert second.agent.get("pos") == [0, 0]


def test_survive_goal_checks():
    camp = create_campfire_world(planner=Planner(verbose=False))
    agent = MemoryStore.from_mapping("Agent", {"wood": 6, "food": 3, "hunger": 49})
    world = MemoryStore.from_mapping("World", {"fire": 69, "wood": 0})
    assert goal_reached(camp.goal, agent, world) is True

    agent.set("wood", 11)
    assert goal_reached(camp.goal, agent, world) is False


def test_eat_food_clamps_hunger():
    agent = MemoryStore.from_mapping("Agent", {"food": 2, "hunger": 3})
    world = MemoryStore.from_mapping("World", {"fire": 9, "wood": 50})

    assert EAT_FOOD.can_perform(agent, world) is True
    apply_action(agent, world, EAT_FOOD)

    assert agent.get("hunger") == 0
    assert agent.get("food") == 1
    assert EAT_FOOD.can_perform(agent, world) is False


def test_plan_keeps_the_camp_alive():
    camp = create_campfire_world(planner=Planner(verbose=False))

    plan = camp.planner.plan(camp.goal, camp.agent, camp.world)

    assert plan
    assert camp.planner.simulate(camp.goal, plan, camp.agent, camp.world) is True

    agent, world = replay(camp, plan)
    assert world.get("fire") >= 69
    assert 5 <= agent.get("wood") <= 10
    assert agent.get("hunger") < 50

    # Planning never touches the real stores.
    assert camp.agent.get("wood") == 0
    assert camp.world.get("fire") == 9

    again = camp.planner.plan(camp.goal, camp.agent, camp.world)
    assert len(again) == len(plan)
    assert all(x is y for x, y in zip(plan, again))
