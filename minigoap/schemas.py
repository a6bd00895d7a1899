"""
Pydantic schemas for minigoap reporting and scenario files.

The planner itself works on live stores and callables; these models are
the serialisable views of that state used for logs, snapshots and JSON
scenario input.

Design Philosophy:
- Stores are free-form property maps, so snapshot values stay ``Any``
- Actions are reported by name (callables do not serialise)
- Pydantic validation guards the scenario file boundary
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .store import MemoryStore, StateStore


# ============================================================================
# Store Schemas
# ============================================================================


class StoreSnapshot(BaseModel):
    """Point-in-time copy of a store's properties."""

    name: str = Field(..., description="Store name used in logs")
    values: Dict[str, Any] = Field(default_factory=dict, description="Property name → value")

    @classmethod
    def from_store(cls, store: StateStore, name: Optional[str] = None) -> "StoreSnapshot":
        label = name or getattr(store, "name", "store")
        return cls(name=label, values={key: store.get(key) for key in store.keys()})

    def to_store(self, *, strict: bool = False) -> MemoryStore:
        return MemoryStore.from_mapping(self.name, self.values, strict=strict)


# ============================================================================
# Planning Schemas
# ============================================================================


class PlanReport(BaseModel):
    """Serialisable summary of a planning call."""

    goal: str = Field(..., description="Name of the goal planned for")
    actions: List[str] = Field(default_factory=list, description="Action names in plan order")
    cost: float = Field(0, ge=0, description="Sum of action costs")
    validated: bool = Field(
        False,
        description="True when a full replay confirmed the goal; False for best-effort plans",
    )
    iterations: int = Field(0, ge=0, description="Planner loop iterations used")


class ExecutionReport(BaseModel):
    """Outcome of committing a plan to the real stores."""

    executed: List[str] = Field(default_factory=list, description="Actions committed, in order")
    failed_action: Optional[str] = Field(
        None, description="Action whose precondition failed, aborting the rest of the plan"
    )
    completed: bool = Field(False, description="True when every action was committed")
    goal_reached: Optional[bool] = Field(
        None, description="Goal state after execution; None when no goal was given"
    )


# ============================================================================
# Scenario Schemas
# ============================================================================


class ScenarioDefinition(BaseModel):
    """Initial agent and world properties loaded from JSON."""

    name: str = Field("scenario", description="Scenario name; prefixes store names")
    description: Optional[str] = Field(None, description="Free-form description")
    agent: Dict[str, Any] = Field(..., description="Initial agent properties")
    world: Dict[str, Any] = Field(..., description="Initial world properties")

    @field_validator("agent", "world")
    @classmethod
    def _keys_not_blank(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        for key in value:
            if not key.strip():
                raise ValueError("property names must be non-empty")
        return value
