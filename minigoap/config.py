"""
Minigoap Configuration

Loads planner defaults from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Planner configuration loaded from environment variables."""

    # Search bounds
    SEARCH_DEPTH: int = int(os.getenv("MINIGOAP_SEARCH_DEPTH", "5"))
    BEAM_WIDTH: int = int(os.getenv("MINIGOAP_BEAM_WIDTH", "3"))
    MAX_ITERATIONS: int = int(os.getenv("MINIGOAP_MAX_ITERATIONS", "50"))

    # Logging
    VERBOSE: bool = _env_flag("MINIGOAP_VERBOSE")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    SCENARIOS_DIR: Path = PROJECT_ROOT / "examples" / "scenarios"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if a search bound is unusable."""
        if cls.SEARCH_DEPTH <= 0:
            raise ValueError(
                "MINIGOAP_SEARCH_DEPTH must be positive; the planner cannot extend "
                "a plan without looking at least one action ahead"
            )
        if cls.BEAM_WIDTH <= 0:
            raise ValueError("MINIGOAP_BEAM_WIDTH must be positive")
        if cls.MAX_ITERATIONS <= 0:
            raise ValueError("MINIGOAP_MAX_ITERATIONS must be positive")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Minigoap Configuration:",
            f"  Search Depth: {cls.SEARCH_DEPTH}",
            f"  Beam Width: {cls.BEAM_WIDTH}",
            f"  Max Iterations: {cls.MAX_ITERATIONS}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Scenarios: {cls.SCENARIOS_DIR}",
        ]
        return "\n".join(lines)
