"""Graphviz DOT export of a machine's transition graph."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lexfsm.machine import FSM
    from lexfsm.types import Edge, GraphView


@dataclass(frozen=True)
class GraphStyle:
    """Immutable rendering options for :func:`to_dot`.

    Attributes:
        name: Graph identifier written after ``digraph``.
        node_shape: Graphviz shape used for every state.
        solid_style: Arc style for observable edges.
        silent_style: Arc style for SILENT edges.
    """

    name: str = "G"
    node_shape: str = "box"
    solid_style: str = "solid"
    silent_style: str = "dotted"


def escape_label(text: str) -> str:
    """Double every backslash so escape sequences survive display."""
    return text.replace("\\", "\\\\")


def _identity(state: Any) -> Any:
    if isinstance(state, enum.Enum):
        return state.value
    return state


def _node_id(state: Any) -> str:
    ident = _identity(state)
    if isinstance(ident, int) and not isinstance(ident, bool):
        return str(ident)
    return '"' + _quote(str(ident)) + '"'


def _quote(text: str) -> str:
    return text.replace('"', '\\"')


def _node_label(view: GraphView, state: Any) -> str:
    ident = _identity(state)
    name = view.state_names.get(state)
    if name is not None:
        return f"{name} ({ident})"
    return str(ident)


def _arc(source: Any, edge: Edge, style: GraphStyle) -> str:
    arc_style = style.silent_style if edge.silent else style.solid_style
    return (
        f"\t{_node_id(source)} -> {_node_id(edge.destination)} "
        f'[style={arc_style} label="{_quote(edge.label)}"]\n'
    )


def to_dot(source: FSM | GraphView, style: GraphStyle = GraphStyle()) -> str:
    """Render states and edges as a ``digraph``.

    Every global edge is drawn once per known state, fanning into its
    destination.
    """
    view = source.graph() if hasattr(source, "graph") else source

    lines = [f"digraph {style.name} {{\n"]
    for state in view.states:
        lines.append(
            f'\t{_node_id(state)} [shape={style.node_shape} '
            f'label="{_quote(_node_label(view, state))}"]\n'
        )
    lines.append("\n")

    for edge in view.edges:
        lines.append(_arc(edge.source, edge, style))

    for edge in view.global_edges:
        for state in view.states:
            lines.append(_arc(state, edge, style))

    lines.append("}\n")
    return "".join(lines)


def dump_graph(source: FSM | GraphView, fp: IO[str], style: GraphStyle = GraphStyle()) -> None:
    """Write :func:`to_dot` output to an open text file."""
    fp.write(to_dot(source, style))
