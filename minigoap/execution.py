"""Caller-side plan execution.

The planner never touches the real stores. Once a plan comes back, the
host commits it here, one action at a time. The world may have moved on
since the plan was simulated, so each action's precondition is checked
again against the real stores and execution stops at the first one that
no longer holds.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .actions import NOOP, Action, apply_action
from .goals import Goal, goal_reached
from .logging_utils import log_error, log_success
from .schemas import ExecutionReport
from .store import StateStore


def execute_plan(
    plan: Sequence[Action],
    agent: StateStore,
    world: StateStore,
    goal: Optional[Goal] = None,
    *,
    verbose: bool = False,
) -> ExecutionReport:
    """Commit ``plan`` to ``agent``/``world``, aborting on a failed precondition.

    ``NOOP`` entries are skipped. Ambient actions are not applied; the host
    loop owns environment ticks.
    """
    report = ExecutionReport()
    for action in plan:
        if action is NOOP:
            continue
        if not action.can_perform(agent, world):
            report.failed_action = action.name
            if verbose:
                log_error(f"Aborting plan: '{action.name}' can no longer be performed")
            break
        apply_action(agent, world, action)
        report.executed.append(action.name)
        if verbose:
            log_success(f"Performed {action.name}")
    else:
        report.completed = True

    if goal is not None:
        report.goal_reached = goal_reached(goal, agent, world)
    return report
