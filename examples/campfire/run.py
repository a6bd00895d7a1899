"""
Campfire: plan, act, replan
===========================

WHAT THIS SHOWS:
- Loading initial stores from a JSON scenario
- Planning for the "survive" goal with ambient fire decay
- Committing one planned action per tick and replanning on a cadence
- Aborting the rest of a plan when the world drifts away from it

RUN:
    python -m examples.campfire.run --ticks 30
    python -m examples.campfire.run --scenario campfire_low_food --verbose
"""

import argparse
from typing import List

from minigoap import (
    NOOP,
    Action,
    Config,
    StoreSnapshot,
    apply_action,
    execute_plan,
    format_plan,
    goal_reached,
    load_scenario,
    unmet_expectations,
)
from minigoap.logging_utils import log_error, log_info, log_success
from minigoap.planner import Planner
from minigoap.worlds import create_campfire_world


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Campfire planning demo")
    parser.add_argument("--scenario", default="campfire", help="Scenario name or path to a JSON file")
    parser.add_argument("--ticks", type=int, default=30, help="Number of ticks to run")
    parser.add_argument("--replan-every", type=int, default=5, help="Ticks between replans")
    parser.add_argument("--wood-growth", type=int, default=5, help="Wood added to the forest every replan")
    parser.add_argument("--verbose", action="store_true", help="Print planner search chatter")
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    print(Config.display())
    agent, world = load_scenario(args.scenario)
    camp = create_campfire_world(planner=Planner(verbose=args.verbose), agent=agent, world=world)
    for store in (camp.agent, camp.world):
        log_info(StoreSnapshot.from_store(store).model_dump_json())

    plan: List[Action] = []
    for tick in range(args.ticks):
        if camp.agent.get("hunger") >= 100:
            log_error(f"Tick {tick}: the survivor starved")
            break

        # Environment runs on its own clock.
        for ambient in camp.ambient:
            apply_action(camp.agent, camp.world, ambient)

        if tick % args.replan_every == 0 or not plan:
            camp.world.set("wood", camp.world.get("wood") + args.wood_growth)
            result = camp.planner.plan_detailed(camp.goal, camp.agent, camp.world)
            if result is None:
                log_error(f"Tick {tick}: no plan available this cycle")
                plan = []
                continue
            plan = [action for action in result.actions if action is not NOOP]
            log_info(format_plan(plan))
            if not result.validated:
                log_error("Plan could not be confirmed; following it anyway")

        if not plan:
            continue

        action = plan.pop(0)
        report = execute_plan([action], camp.agent, camp.world, camp.goal)
        if report.failed_action:
            log_error(f"Tick {tick}: {report.failed_action} failed, dropping the plan")
            plan = []
            continue
        log_info(f"Tick {tick}: {action.name} -> {camp.agent.describe()} {camp.world.describe()}")

    if goal_reached(camp.goal, camp.agent, camp.world):
        log_success("Goal reached: the camp survives")
    else:
        missing = ", ".join(expec.name for expec in unmet_expectations(camp.goal, camp.agent, camp.world))
        log_error(f"Goal not reached; unmet: {missing}")
    for store in (camp.agent, camp.world):
        log_info(f"Final {StoreSnapshot.from_store(store).model_dump_json()}")


if __name__ == "__main__":
    main(parse_args())
