"""
Goal-oriented action planner.

The planner grows a plan one action at a time. Each step runs a bounded
lookahead search over speculative continuations of the current plan,
ranks the resulting leaf plans against the goal, and commits the first
new action of the best leaf. After every committed action whose
precondition already holds in the real stores, the whole plan is replayed
on clones to check whether it reaches the goal.

Search outline (``plan_introspection``):
1. Depth exhausted: the plan itself is the only leaf
2. Candidates: every registered action except the plan's last one that can
   be performed after replaying the plan (ambient actions included)
3. Recurse one level shallower on each candidate, collecting leaves
4. Rank leaves by majority vote over the goal's expectations, then by
   lower total cost
5. Keep the best ``beam_width`` leaves

Everything is deterministic: identical registries and store contents
always give the same plan, made of the same Action objects.

Usage:
    planner = Planner()
    planner.set_actions([NOOP, get_wood, feed_fire])
    planner.set_ambient_actions([fire_decay])
    plan = planner.plan(goal, agent, world)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from itertools import groupby
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .actions import NOOP, Action, apply_action, plan_cost
from .config import Config
from .goals import Comparison, Goal, goal_cmp, goal_reached
from .logging_utils import log_info, log_search, log_success, log_warning
from .schemas import PlanReport
from .store import MemoryStore, StateStore, clone_pair


def format_plan(plan: Sequence[Action]) -> str:
    """Render a plan as a numbered listing, collapsing adjacent repeats.

    Example output::

        Developed plan: Length: 3
         01. get_wood x2
         02. feed_fire
    """
    lines = [f"Developed plan: Length: {len(plan)}"]
    for index, (name, run) in enumerate(groupby(action.name for action in plan), start=1):
        count = len(list(run))
        label = f"{name} x{count}" if count > 1 else name
        lines.append(f" {index:02d}. {label}")
    return "\n".join(lines)


@dataclass(frozen=True)
class PlanResult:
    """Outcome of ``Planner.plan_detailed``.

    ``validated`` is True only when a full replay confirmed the goal (or the
    goal was trivially satisfied). An unvalidated result is the best-effort
    plan left over after the iteration cap ran out.
    """

    goal: Goal
    actions: List[Action] = field(default_factory=list)
    validated: bool = False
    iterations: int = 0

    @property
    def cost(self) -> float:
        return plan_cost(self.actions)

    def to_report(self) -> PlanReport:
        return PlanReport(
            goal=self.goal.name,
            actions=[action.name for action in self.actions],
            cost=self.cost,
            validated=self.validated,
            iterations=self.iterations,
        )


class _Branch(NamedTuple):
    """A speculative plan and the stores left after replaying it."""

    plan: List[Action]
    agent: MemoryStore
    world: MemoryStore
    halted: bool


class Planner:
    """Bounded-depth beam search planner.

    Each instance owns its own action and ambient-action registries.
    Search bounds default to ``Config`` values when not given.
    """

    def __init__(
        self,
        *,
        search_depth: Optional[int] = None,
        beam_width: Optional[int] = None,
        max_iterations: Optional[int] = None,
        verbose: Optional[bool] = None,
    ) -> None:
        self.search_depth = Config.SEARCH_DEPTH if search_depth is None else search_depth
        self.beam_width = Config.BEAM_WIDTH if beam_width is None else beam_width
        self.max_iterations = Config.MAX_ITERATIONS if max_iterations is None else max_iterations
        self.verbose = Config.VERBOSE if verbose is None else verbose
        if self.search_depth <= 0:
            raise ValueError(f"search_depth must be positive, got {self.search_depth}")
        if self.beam_width <= 0:
            raise ValueError(f"beam_width must be positive, got {self.beam_width}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        self._actions: List[Action] = []
        self._ambient_actions: List[Action] = []

    # Registries ---------------------------------------------------------------

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def ambient_actions(self) -> Tuple[Action, ...]:
        return tuple(self._ambient_actions)

    def set_actions(self, actions: Iterable[Action]) -> None:
        """Register the actions the search may choose, cheapest first.

        ``sorted`` is stable, so equal-cost actions keep registration order.
        """
        self._actions = sorted(actions, key=lambda action: action.cost)
        if self.verbose:
            log_info(f"Actions set {[action.name for action in self._actions]}")

    def set_ambient_actions(self, actions: Iterable[Action]) -> None:
        """Register actions applied before every simulated step, unconditionally."""
        self._ambient_actions = list(actions)
        if self.verbose:
            log_info(f"Ambient Actions set {[action.name for action in self._ambient_actions]}")

    # Simulation ---------------------------------------------------------------

    def simulate_in_place(self, plan: Sequence[Action], agent: StateStore, world: StateStore) -> bool:
        """Replay ``plan`` on the given stores, mutating them.

        Ambient actions are applied before every step without checking their
        preconditions. Stops and returns False at the first step whose
        precondition fails; the stores keep the partial replay.
        """
        for action in plan:
            for ambient in self._ambient_actions:
                apply_action(agent, world, ambient)
            if not action.can_perform(agent, world):
                return False
            apply_action(agent, world, action)
        return True

    def simulate(self, goal: Goal, plan: Sequence[Action], agent: StateStore, world: StateStore) -> bool:
        """Return True when replaying ``plan`` on clones reaches ``goal``."""
        sim_agent, sim_world = clone_pair(agent, world, "Simulated")
        if not self.simulate_in_place(plan, sim_agent, sim_world):
            return False
        return goal_reached(goal, sim_agent, sim_world)

    # Search -------------------------------------------------------------------

    def plan_introspection(
        self,
        goal: Goal,
        plan: List[Action],
        agent: StateStore,
        world: StateStore,
        depth: int,
    ) -> List[List[Action]]:
        """Return up to ``beam_width`` best leaf plans extending ``plan`` by ``depth``."""
        if depth <= 0:
            return [plan]
        root = self._replay(plan, agent, world, f"PerformableCheck{depth}")
        return [branch.plan for branch in self._search(goal, root, depth)]

    def _replay(self, plan: Sequence[Action], agent: StateStore, world: StateStore, label: str) -> _Branch:
        sim_agent, sim_world = clone_pair(agent, world, label)
        completed = self.simulate_in_place(plan, sim_agent, sim_world)
        return _Branch(list(plan), sim_agent, sim_world, not completed)

    def _extend(self, branch: _Branch, action: Action, label: str) -> _Branch:
        """Simulate one more step on a copy of ``branch``.

        Equivalent to replaying ``branch.plan + [action]`` from the root: a
        halted replay stays frozen at the step that failed.
        """
        sim_agent, sim_world = clone_pair(branch.agent, branch.world, label)
        halted = branch.halted or not self.simulate_in_place([action], sim_agent, sim_world)
        return _Branch(branch.plan + [action], sim_agent, sim_world, halted)

    def _search(self, goal: Goal, branch: _Branch, depth: int) -> List[_Branch]:
        if depth <= 0:
            return [branch]

        # Candidates are judged on whatever state the replay reached, even
        # when it halted early.
        last = branch.plan[-1] if branch.plan else None
        candidates = [
            action
            for action in self._actions
            if action is not last and action.can_perform(branch.agent, branch.world)
        ]

        leaves: List[_Branch] = []
        while candidates:
            child = self._extend(branch, candidates.pop(), f"IntrospectDepth{depth}")
            leaves.extend(self._search(goal, child, depth - 1))

        def rank(a: _Branch, b: _Branch) -> float:
            comparison = goal_cmp(goal, a.agent, a.world, b.agent, b.world)
            if comparison is Comparison.GT:
                return -1
            if comparison is Comparison.LT:
                return 1
            return plan_cost(a.plan) - plan_cost(b.plan)

        leaves.sort(key=cmp_to_key(rank))
        return leaves[: self.beam_width]

    def introspect(
        self,
        goal: Goal,
        plan: List[Action],
        agent: StateStore,
        world: StateStore,
        depth: Optional[int] = None,
    ) -> Optional[Action]:
        """Return the next action to append to ``plan``, or None when stuck."""
        if depth is None:
            depth = self.search_depth
        if depth <= 0:
            return None
        best = self.plan_introspection(goal, plan, agent, world, depth)
        if not best or len(best[0]) <= len(plan):
            if self.verbose:
                log_search("Didn't expand plan")
            return None
        return best[0][len(plan)]

    # Entry points -------------------------------------------------------------

    def plan_detailed(self, goal: Goal, agent: StateStore, world: StateStore) -> Optional[PlanResult]:
        """Plan for ``goal`` and report whether the plan was confirmed.

        Returns None when the search cannot extend the plan. When the
        iteration cap runs out first, the accumulated plan is returned with
        ``validated=False``. This includes registries whose actions stay
        performable without ever helping: the search keeps extending the
        plan with them until the cap.
        """
        if not goal.expectations:
            return PlanResult(goal=goal, actions=[NOOP], validated=True, iterations=0)

        if self.verbose:
            log_search(f"Planning for goal: {goal.name}")

        actions_plan: List[Action] = []
        plan_done = False
        iterations = 0
        while not plan_done and iterations < self.max_iterations:
            iterations += 1
            action = self.introspect(goal, actions_plan, agent, world)
            if action is None:
                if self.verbose:
                    log_search(f"No plan found for goal '{goal.name}' after {iterations} iteration(s)")
                return None
            actions_plan.append(action)
            if action.can_perform(agent, world):
                plan_done = self.simulate(goal, actions_plan, agent, world)

        if plan_done:
            if self.verbose:
                log_success(f"Plan for '{goal.name}' validated after {iterations} iteration(s)")
        else:
            log_warning(
                f"Plan for '{goal.name}' not validated after {iterations} iteration(s); "
                "returning best-effort plan"
            )
        return PlanResult(goal=goal, actions=actions_plan, validated=plan_done, iterations=iterations)

    def plan(self, goal: Goal, agent: StateStore, world: StateStore) -> Optional[List[Action]]:
        """Return a plan for ``goal``, or None when planning is infeasible."""
        result = self.plan_detailed(goal, agent, world)
        if result is None:
            return None
        return result.actions
