"""lexfsm-text - Rule patterns and a character-level FSM built on lexfsm."""
from __future__ import annotations

from lexfsm_text.machine import TextFSM
from lexfsm_text.rules import ALPHABET, Rule, check_symbol, compile_rule

__all__ = ["TextFSM", "Rule", "compile_rule", "check_symbol", "ALPHABET"]
