"""Ready-made worlds for exercising the planner."""

from .campfire import CampfireWorld, build_survive_goal, create_campfire_world

__all__ = ["CampfireWorld", "build_survive_goal", "create_campfire_world"]
