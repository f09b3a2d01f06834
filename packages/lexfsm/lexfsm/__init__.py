"""lexfsm - A predicate-guarded finite state machine for hand-built lexers."""
from __future__ import annotations

from lexfsm.graph import GraphStyle, dump_graph, escape_label, to_dot
from lexfsm.machine import FSM
from lexfsm.types import (
    Edge,
    EdgeFlag,
    Equals,
    GraphView,
    Predicate,
    SnapshotError,
    Step,
)

__all__ = [
    "FSM",
    "Edge",
    "EdgeFlag",
    "Equals",
    "GraphView",
    "Predicate",
    "Step",
    "SnapshotError",
    "GraphStyle",
    "to_dot",
    "dump_graph",
    "escape_label",
]
