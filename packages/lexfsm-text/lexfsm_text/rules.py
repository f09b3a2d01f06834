"""Single-symbol rule compiler.

A rule is a short pattern that accepts or rejects exactly one character::

    a        the character ``a``
    abc      any of ``a``, ``b``, ``c``
    a-z      a range over ALPHABET (lowercase, uppercase, digits, in that order)
    .        anything
    ^...     negation of whatever follows
    \\d      escape shorthand, see ``_ESCAPES``

Alternatives are tried left to right and the first one that matches decides
the result. ``^`` only flips the answer for alternatives after it, so
``a^b`` accepts ``a``, rejects ``b`` and accepts everything else.
"""
from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

_ESCAPES: dict[str, frozenset[str]] = {
    "\\": frozenset("\\"),
    "^": frozenset("^"),
    "-": frozenset("-"),
    ".": frozenset("."),
    "w": _LETTERS,
    "d": _DIGITS,
    "s": frozenset(" \t"),
    "n": frozenset("\n"),
    "t": frozenset("\t"),
    "0": frozenset("\0"),
}

_NOTHING: frozenset[str] = frozenset()

# Item markers besides character sets.
_NEGATE = "negate"
_ANY = "any"


def _char_range(lower: str, upper: str) -> frozenset[str]:
    lo = ALPHABET.find(lower) if lower else -1
    hi = ALPHABET.find(upper) if upper else -1
    if lo < 0 or hi < lo:
        return _NOTHING
    return frozenset(ALPHABET[lo : hi + 1])


def _parse(pattern: str) -> tuple[Any, ...]:
    items: list[Any] = []
    previous = "\0"
    length = len(pattern)
    idx = 0
    while idx < length:
        char = pattern[idx]
        if char == "^":
            items.append(_NEGATE)
        elif char == ".":
            # always matches; nothing after it can be reached
            items.append(_ANY)
            break
        elif char == "-":
            idx += 1
            upper = pattern[idx] if idx < length else ""
            if not upper:
                logger.warning("rule %r ends with an open range", pattern)
            items.append(_char_range(previous, upper))
            char = upper or "\0"
        elif char == "\\":
            idx += 1
            escaped = pattern[idx] if idx < length else ""
            if escaped not in _ESCAPES:
                logger.warning("rule %r has a bad escape %r", pattern, "\\" + escaped)
            items.append(_ESCAPES.get(escaped, _NOTHING))
            char = escaped or "\0"
        else:
            items.append(frozenset(char))
        previous = char
        idx += 1
    return tuple(items)


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled rule. Call it with one symbol."""

    pattern: str
    items: tuple[Any, ...]

    def __call__(self, symbol: str) -> bool:
        negated = False
        for item in self.items:
            if item is _NEGATE:
                negated = True
            elif item is _ANY or symbol in item:
                return not negated
        return negated


def compile_rule(pattern: str) -> Rule:
    """Compile ``pattern`` into a reusable predicate over one character."""
    if not isinstance(pattern, str):
        raise TypeError(f"rule pattern must be str, got {type(pattern).__name__}")
    return Rule(pattern, _parse(pattern))


def check_symbol(pattern: str, symbol: str) -> bool:
    """Evaluate ``pattern`` against a single symbol without keeping the rule."""
    return compile_rule(pattern)(symbol)
