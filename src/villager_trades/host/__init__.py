"""Reference host collaborators: a trade registry and a console audience."""

from .console_audience import ConsoleAudience
from .memory_registry import VANILLA_PROFESSIONS, InMemoryTradeRegistry

__all__ = ["ConsoleAudience", "InMemoryTradeRegistry", "VANILLA_PROFESSIONS"]
