"""Exception types raised by minigoap.

Expected planning outcomes (missing keys, infeasible goals, failed
preconditions) are returned as values. The exceptions below cover
programmer errors only: strict stores rejecting a write and malformed
scenario files.
"""

from typing import Any, Optional


class MinigoapError(Exception):
    """Base class for every exception raised by the package."""


class StoreContractError(MinigoapError):
    """Raised by a strict store when ``put``/``set`` breaks the write contract.

    ``put`` may only create keys and ``set`` may only update existing
    ones. Non-strict stores report the same violation by returning False.
    """

    def __init__(self, *, store: str, operation: str, key: str) -> None:
        self.store = store
        self.operation = operation
        self.key = key
        if operation == "put":
            problem = f"key '{key}' already exists"
            hint = "use set() to update an existing property"
        else:
            problem = f"key '{key}' does not exist"
            hint = "use put() to create a new property"
        message = (
            f"Store '{store}' rejected {operation}(): {problem}.\n\n"
            "Remediation tips:\n"
            f"  - {hint}\n"
            "  - Build the store with strict=False to get a boolean result instead"
        )
        super().__init__(message)


class ScenarioError(MinigoapError, ValueError):
    """Raised when a scenario file cannot be turned into stores."""

    def __init__(self, *, source: str, reason: str, underlying: Optional[Any] = None) -> None:
        self.source = source
        self.reason = reason
        self.underlying = underlying
        message = (
            f"Scenario '{source}' is invalid: {reason}\n\n"
            "Remediation tips:\n"
            '  - Scenario files need an "agent" and a "world" object\n'
            "  - Property names must be non-empty strings"
        )
        super().__init__(message)
