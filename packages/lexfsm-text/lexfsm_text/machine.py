"""TextFSM - character-level FSM whose edges take rule patterns."""
from __future__ import annotations

from typing import Callable, Union

from lexfsm import FSM, Edge, EdgeFlag
from lexfsm.types import StateT

from lexfsm_text.rules import compile_rule

_Rule = Union[str, Callable[[str], bool]]


def _resolve(rule: _Rule, literal: bool) -> tuple[Callable[[str], bool] | str, str]:
    """Return (predicate or literal char, label) for an edge rule."""
    if callable(rule):
        return rule, getattr(rule, "pattern", getattr(rule, "__name__", repr(rule)))
    if literal:
        if len(rule) != 1:
            raise ValueError(f"literal rule must be a single character, got {rule!r}")
        return rule, rule
    return compile_rule(rule), rule


class TextFSM(FSM[StateT, str]):
    """FSM over single characters.

    ``rule`` arguments are rule patterns (see :mod:`lexfsm_text.rules`) unless
    ``literal=True``, in which case the one-character string is matched by
    equality. Note that ``"."`` is a wildcard pattern but a literal dot with
    ``literal=True``.
    """

    def create_edge(  # type: ignore[override]
        self,
        source: StateT,
        destination: StateT,
        rule: _Rule,
        flags: EdgeFlag = EdgeFlag.NONE,
        *,
        literal: bool = False,
    ) -> Edge[StateT]:
        predicate, label = _resolve(rule, literal)
        return super().create_edge(source, destination, predicate, label, flags)

    def create_global_edge(  # type: ignore[override]
        self,
        destination: StateT,
        rule: _Rule,
        flags: EdgeFlag = EdgeFlag.NONE,
        *,
        literal: bool = False,
    ) -> Edge[StateT]:
        predicate, label = _resolve(rule, literal)
        return super().create_global_edge(destination, predicate, label, flags)

    def feed(self, text: str) -> int:
        """Process each character of ``text``; return the number of passed steps."""
        passed = 0
        for char in text:
            if self.process(char):
                passed += 1
        return passed
