"""
Deserialization Context

Tracks where the loader currently is inside a catalog document so that a
failure anywhere in the walk can be reported with its location.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict

RECURSIVE_MARKER = "<recursive>"


def freeze_entry(value: Any, _path: frozenset[int] = frozenset()) -> Any:
    """
    Return a read-only copy of a parsed catalog node.

    Mappings become ``MappingProxyType`` views with string keys and lists
    become tuples. Self-referencing nodes (YAML anchors) are cut with a marker.
    """
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in _path:
            return RECURSIVE_MARKER
        path = _path | {id(value)}
        if isinstance(value, Mapping):
            return MappingProxyType(
                {
                    k if isinstance(k, str) else str(k): freeze_entry(v, path)
                    for k, v in value.items()
                }
            )
        return tuple(freeze_entry(v, path) for v in value)
    return value


def thaw_entry(value: Any) -> Any:
    """Turn a frozen entry back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw_entry(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_entry(v) for v in value]
    return value


class ContextSnapshot(BaseModel):
    """Immutable copy of the context slots taken when a diagnostic is raised."""

    source: str | None = None
    profession: str | None = None
    tier: int | None = None
    entry: Any = None

    model_config = ConfigDict(frozen=True)
@dataclass
class DeserializationContext:
    """
    Current location of the catalog walk.

    One instance belongs to one loader and is handed by reference to the
    walker and to every converter call. Slots are only ever overwritten:
    finishing an entry does not restore the previous values, the next
    entry simply replaces them.
    """

    source: str | None = None
    profession: str | None = None
    tier: int | None = None
    entry: Any = None

    def reset(self) -> None:
        """Clear all slots before a new document."""
        self.source = None
        self.profession = None
        self.tier = None
        self.entry = None

    def set_source(self, name: str) -> None:
        self.source = name

    def set_profession(self, label: str) -> None:
        self.profession = label

    def set_tier(self, tier: int) -> None:
        self.tier = tier

    def set_entry(self, entry: Any) -> None:
        self.entry = entry

    def snapshot(self) -> ContextSnapshot:
        """
        Copy the current slots.

        The entry is frozen into a detached copy so later mutation of the
        parsed document, or of the snapshot itself, cannot change an already
        captured diagnostic.
        """
        return ContextSnapshot(
            source=self.source,
            profession=self.profession,
            tier=self.tier,
            entry=freeze_entry(self.entry),
        )
