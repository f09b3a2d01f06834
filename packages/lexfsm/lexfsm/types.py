"""Shared types for the lexfsm transition engine."""
from __future__ import annotations

import enum
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, TypeVar

StateT = TypeVar("StateT", bound=Hashable)
ConditionT = TypeVar("ConditionT")

Predicate = Callable[[Any], bool]


class EdgeFlag(enum.IntFlag):
    NONE = 0
    SILENT = 1 << 0
    GLOBAL = 1 << 1


@dataclass(frozen=True, slots=True)
class Equals:
    """Literal-value predicate: accepts a symbol equal to ``value``."""

    value: Any

    def __call__(self, condition: Any) -> bool:
        return condition == self.value


@dataclass(frozen=True, slots=True)
class Edge(Generic[StateT]):
    """A predicate-guarded transition. ``label`` is stored display-escaped."""

    source: StateT
    destination: StateT
    predicate: Predicate
    label: str
    flags: EdgeFlag = EdgeFlag.NONE

    @property
    def silent(self) -> bool:
        return EdgeFlag.SILENT in self.flags

    @property
    def is_global(self) -> bool:
        return EdgeFlag.GLOBAL in self.flags


@dataclass(frozen=True, slots=True)
class GraphView(Generic[StateT]):
    """Read-only picture of a machine's graph, used by the exporters."""

    default_state: StateT
    states: tuple[StateT, ...]
    edges: tuple[Edge[StateT], ...]
    global_edges: tuple[Edge[StateT], ...]
    state_names: Mapping[StateT, str]


class Step(NamedTuple):
    """Outcome of :meth:`FSM.step`.

    ``previous`` is the state the machine was in *before* the call, not the
    state it ended in.
    """

    previous: Any
    changed: bool


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, unknown state)."""
