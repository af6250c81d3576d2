"""Script runner module.

Exports the ``ScriptRunner`` class, its result and error types, and
the built-in demo script.
"""
from __future__ import annotations

from todostore.script.runner import (
    DEMO_STEPS,
    ERROR_STATUS,
    ScriptError,
    ScriptRunner,
    StepResult,
)

__all__ = [
    "DEMO_STEPS",
    "ERROR_STATUS",
    "ScriptError",
    "ScriptRunner",
    "StepResult",
]
