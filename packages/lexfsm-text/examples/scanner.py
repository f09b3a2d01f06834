"""Scanner -- split a line of code into lexemes with a TextFSM.

Demonstrates:
- Rule patterns (ranges, escapes) on edges
- SILENT self loops for "still inside the token"
- A global fallback to the default state, which re-dispatches the symbol
- Reading token boundaries from step()

Run: python -m examples.scanner [text]
"""

import enum
import logging
import sys

from lexfsm import EdgeFlag
from lexfsm_text import TextFSM


class Kind(enum.IntEnum):
    START = 0
    NAME = 1
    NUMBER = 2
    SPACE = 3
    OPERATOR = 4


def build() -> TextFSM:
    fsm = TextFSM(Kind.START)
    for kind in Kind:
        fsm.set_state_name(kind, kind.name.lower())

    fsm.create_edge(Kind.START, Kind.NAME, "a-zA-Z_")
    fsm.create_edge(Kind.START, Kind.NUMBER, "0-9")
    fsm.create_edge(Kind.START, Kind.SPACE, "\\s")
    fsm.create_edge(Kind.START, Kind.OPERATOR, "=+\\-*/()")

    fsm.create_edge(Kind.NAME, Kind.NAME, "a-zA-Z0-9_", EdgeFlag.SILENT)
    fsm.create_edge(Kind.NUMBER, Kind.NUMBER, "0-9", EdgeFlag.SILENT)
    fsm.create_edge(Kind.SPACE, Kind.SPACE, "\\s", EdgeFlag.SILENT)

    fsm.create_global_edge(Kind.START, ".", EdgeFlag.SILENT)
    return fsm


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    text = " ".join(sys.argv[1:]) or "total = price * (qty + 12)"

    fsm = build()
    lexeme = ""
    for char in text:
        previous, changed = fsm.step(char)
        if changed and lexeme:
            print(f"  {fsm.state_name(previous):<8} {lexeme!r}")
            lexeme = ""
        if fsm.current_state != Kind.START:
            lexeme += char
    if lexeme:
        print(f"  {fsm.state_name(fsm.current_state):<8} {lexeme!r}")


if __name__ == "__main__":
    main()
