"""Scanner graph and the per-keystroke session that drives it."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from lexfsm import EdgeFlag
from lexfsm_text import TextFSM


class Kind(enum.IntEnum):
    START = 0
    NAME = 1
    NUMBER = 2
    STRING = 3
    SPACE = 4
    OPERATOR = 5
    NEWLINE = 6
    STRING_END = 7


def build_scanner() -> TextFSM:
    fsm = TextFSM(Kind.START)
    for kind in Kind:
        fsm.set_state_name(kind, kind.name.lower())

    fsm.create_edge(Kind.START, Kind.NAME, "a-zA-Z_")
    fsm.create_edge(Kind.START, Kind.NUMBER, "0-9")
    fsm.create_edge(Kind.START, Kind.STRING, '"', literal=True)
    fsm.create_edge(Kind.START, Kind.SPACE, "\\s")
    fsm.create_edge(Kind.START, Kind.OPERATOR, "=+\\-*/<>()")
    fsm.create_edge(Kind.START, Kind.NEWLINE, "\\n")

    fsm.create_edge(Kind.NAME, Kind.NAME, "a-zA-Z0-9_", EdgeFlag.SILENT)
    fsm.create_edge(Kind.NUMBER, Kind.NUMBER, "0-9\\.", EdgeFlag.SILENT)
    fsm.create_edge(Kind.SPACE, Kind.SPACE, "\\s", EdgeFlag.SILENT)
    fsm.create_edge(Kind.STRING, Kind.STRING, '^"\\n', EdgeFlag.SILENT)
    # the closing quote still belongs to the string lexeme
    fsm.create_edge(Kind.STRING, Kind.STRING_END, '"', EdgeFlag.SILENT, literal=True)

    fsm.create_global_edge(Kind.START, ".", EdgeFlag.SILENT)
    return fsm


@dataclass
class Token:
    kind: Kind
    text: str


@dataclass
class Session:
    """Typed text, the live machine and the lexemes cut so far."""

    fsm: TextFSM = field(default_factory=build_scanner)
    text: str = ""
    tokens: list[Token] = field(default_factory=list)
    last_changed: bool = False

    def type_char(self, char: str) -> None:
        self.text += char
        self.last_changed = self.fsm.process(char)
        if self.last_changed or not self.tokens:
            self.tokens.append(Token(self.fsm.current_state, char))
        else:
            self.tokens[-1].text += char

    def backspace(self) -> None:
        """Replay everything but the last character on a fresh position."""
        text = self.text[:-1]
        self.fsm.reset()
        self.text = ""
        self.tokens = []
        self.last_changed = False
        for char in text:
            self.type_char(char)
