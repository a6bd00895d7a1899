"""
Minigoap - goal-oriented action planning for simulated agents.

Describe agent and world state as key/value stores, actions as costed
preconditions plus effects, and goals as ranked expectations. The
planner searches for an ordered list of actions that drives the state
toward the goal.

No file I/O required. No global state. Every planner owns its registries.
"""

__version__ = "0.1.0"

# Main planning components
from .planner import Planner, PlanResult, format_plan

# Data model
from .store import StateStore, MemoryStore
from .actions import (
    Action,
    Effect,
    Concept,
    NOOP,
    apply_action,
    plan_cost,
    change_amount_effect,
)
from .goals import (
    Comparison,
    Expectation,
    Goal,
    ExpectationBuilder,
    GoalBuilder,
    build_goal,
    expectation,
    goal_builder,
    goal_cmp,
    goal_reached,
    num_cmp,
    unmet_expectations,
)

# Configuration
from .config import Config

# Caller-side helpers
from .execution import execute_plan
from .scenario import load_scenario, build_stores
from .schemas import StoreSnapshot, PlanReport, ExecutionReport, ScenarioDefinition
from .errors import MinigoapError, StoreContractError, ScenarioError

__all__ = [
    # Main class
    "Planner",
    "PlanResult",
    "format_plan",
    # Stores
    "StateStore",
    "MemoryStore",
    # Actions
    "Action",
    "Effect",
    "Concept",
    "NOOP",
    "apply_action",
    "plan_cost",
    "change_amount_effect",
    # Goals
    "Comparison",
    "Expectation",
    "Goal",
    "ExpectationBuilder",
    "GoalBuilder",
    "build_goal",
    "expectation",
    "goal_builder",
    "goal_cmp",
    "goal_reached",
    "num_cmp",
    "unmet_expectations",
    # Execution and scenarios
    "execute_plan",
    "load_scenario",
    "build_stores",
    # Schemas
    "StoreSnapshot",
    "PlanReport",
    "ExecutionReport",
    "ScenarioDefinition",
    # Configuration
    "Config",
    # Errors
    "MinigoapError",
    "StoreContractError",
    "ScenarioError",
]
