"""FSM - predicate-guarded transition engine."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Generic

from lexfsm.graph import escape_label
from lexfsm.types import (
    ConditionT,
    Edge,
    EdgeFlag,
    Equals,
    GraphView,
    Predicate,
    SnapshotError,
    StateT,
    Step,
)

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


def _as_predicate(rule: Any) -> Predicate:
    if callable(rule):
        return rule
    return Equals(rule)


class FSM(Generic[StateT, ConditionT]):
    """Finite state machine driven one input symbol at a time.

    Edges registered under a source state are tried first, in insertion
    order; global edges are the fallback for every state. Landing on the
    default state re-dispatches the same symbol once, so a "reset" state can
    absorb a symbol and hand it straight to its own edges.

    The graph is meant to be built completely before the first ``process``
    call. A built machine can be ``fork``-ed to serve another input stream.
    """

    def __init__(self, default_state: StateT, start_state: StateT | None = None) -> None:
        if start_state is None:
            start_state = default_state
        self._default_state = default_state
        self._start_state = start_state
        self._current_state = start_state
        self._previous_state = start_state

        # dict keys double as an insertion-ordered set
        self._possible_states: dict[StateT, None] = {default_state: None, start_state: None}
        self._edges: dict[StateT, list[Edge[StateT]]] = {}
        self._global_edges: list[Edge[StateT]] = []
        self._state_names: dict[StateT, str] = {}

    # -- build phase --------------------------------------------------------

    def create_edge(
        self,
        source: StateT,
        destination: StateT,
        rule: Predicate | ConditionT,
        label: str,
        flags: EdgeFlag = EdgeFlag.NONE,
    ) -> Edge[StateT]:
        """Register a local edge. ``rule`` is a predicate or a value to compare."""
        edge = Edge(source, destination, _as_predicate(rule), escape_label(label), EdgeFlag(flags))
        self._edges.setdefault(source, []).append(edge)
        self._possible_states.setdefault(source, None)
        self._possible_states.setdefault(destination, None)
        logger.debug("edge %r -> %r [%s]", source, destination, edge.label)
        return edge

    def create_global_edge(
        self,
        destination: StateT,
        rule: Predicate | ConditionT,
        label: str,
        flags: EdgeFlag = EdgeFlag.NONE,
    ) -> Edge[StateT]:
        """Register a fallback edge usable from any state. Always GLOBAL-flagged."""
        edge = Edge(
            self._default_state,
            destination,
            _as_predicate(rule),
            escape_label(label),
            EdgeFlag(flags) | EdgeFlag.GLOBAL,
        )
        self._global_edges.append(edge)
        self._possible_states.setdefault(destination, None)
        logger.debug("global edge * -> %r [%s]", destination, edge.label)
        return edge

    def set_state_name(self, state: StateT, name: str) -> None:
        self._state_names[state] = name

    # -- runtime ------------------------------------------------------------

    def _find_edge(self, condition: ConditionT) -> Edge[StateT] | None:
        for edge in self._edges.get(self._current_state, ()):
            if edge.predicate(condition):
                return edge
        for edge in self._global_edges:
            if edge.predicate(condition):
                return edge
        return None

    def _change_state(self, edge: Edge[StateT], condition: ConditionT) -> None:
        logger.debug(
            "state %r -> %r on %r", self._current_state, edge.destination, condition
        )
        self._current_state = edge.destination

    def process(self, condition: ConditionT) -> bool:
        """Feed one symbol. Returns True if a non-silent edge was taken."""
        self._previous_state = self._current_state

        edge = self._find_edge(condition)
        if edge is None:
            logger.debug("no edge from %r on %r", self._current_state, condition)
            return False

        self._change_state(edge, condition)
        passed = not edge.silent

        if self._current_state == self._default_state:
            edge = self._find_edge(condition)
            if edge is not None:
                self._change_state(edge, condition)
                passed = passed or not edge.silent

        return passed

    def step(self, condition: ConditionT) -> Step:
        """Like :meth:`process`, also reporting the pre-transition state."""
        changed = self.process(condition)
        return Step(self._previous_state, changed)

    @property
    def current_state(self) -> StateT:
        return self._current_state

    @property
    def previous_state(self) -> StateT:
        return self._previous_state

    @property
    def default_state(self) -> StateT:
        return self._default_state

    def state_name(self, state: StateT) -> str:
        return self._state_names.get(state, "")

    # -- graph access -------------------------------------------------------

    @property
    def possible_states(self) -> tuple[StateT, ...]:
        return tuple(self._possible_states)

    @property
    def global_edges(self) -> tuple[Edge[StateT], ...]:
        return tuple(self._global_edges)

    def edges_from(self, state: StateT) -> tuple[Edge[StateT], ...]:
        return tuple(self._edges.get(state, ()))

    def graph(self) -> GraphView[StateT]:
        """Return an immutable view of states, edges and names."""
        return GraphView(
            default_state=self._default_state,
            states=tuple(self._possible_states),
            edges=tuple(edge for edges in self._edges.values() for edge in edges),
            global_edges=tuple(self._global_edges),
            state_names=MappingProxyType(dict(self._state_names)),
        )

    # -- position management ------------------------------------------------

    def reset(self) -> None:
        self._current_state = self._start_state
        self._previous_state = self._start_state

    def fork(self) -> FSM[StateT, ConditionT]:
        """Return a machine sharing this graph with an independent position.

        Edges are immutable so they are shared; the containers are copied, so
        edges registered on either machine afterwards stay local to it.
        """
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._possible_states = dict(self._possible_states)
        clone._edges = {state: list(edges) for state, edges in self._edges.items()}
        clone._global_edges = list(self._global_edges)
        clone._state_names = dict(self._state_names)
        return clone

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "current": self._current_state,
            "previous": self._previous_state,
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        current, previous = data["current"], data["previous"]
        for state in (current, previous):
            if state not in self._possible_states:
                raise SnapshotError(f"Unknown state {state!r}")
        self._current_state = current
        self._previous_state = previous
