"""Typed text, lexeme list and bottom status bar."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    CHANGED_COLOR,
    KIND_COLORS,
    LABEL_COLOR,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_Y,
    TOKENS_Y,
)

if TYPE_CHECKING:
    from game.scanner import Session


def draw_input(surface: pygame.Surface, font: pygame.font.Font, session: Session) -> None:
    """Draw the typed line and the result of the last keystroke."""
    surface.blit(font.render("INPUT", True, LABEL_COLOR), (16, TEXT_Y))
    shown = session.text.replace("\n", "↵")[-90:]
    surface.blit(font.render(shown + "_", True, TEXT_COLOR), (16, TEXT_Y + 22))

    if session.text:
        changed = "passed" if session.last_changed else "silent / no edge"
        color = CHANGED_COLOR if session.last_changed else TEXT_DIM
        surface.blit(font.render(changed, True, color), (SCREEN_W - 160, TEXT_Y))


def draw_tokens(surface: pygame.Surface, font: pygame.font.Font, session: Session) -> None:
    """Draw the most recent lexemes, newest last."""
    surface.blit(font.render("LEXEMES", True, LABEL_COLOR), (16, TOKENS_Y))
    line_h = 20
    max_rows = (SCREEN_H - STATUS_H - TOKENS_Y - 30) // line_h
    y = TOKENS_Y + 24
    for token in session.tokens[-max_rows:]:
        name = session.fsm.state_name(token.kind)
        color = KIND_COLORS.get(name, TEXT_COLOR)
        surface.blit(font.render(f"{name:<10} {token.text!r}", True, color), (16, y))
        y += line_h


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Type] Feed  [Enter] Newline  [Backspace] Undo  [F2] Save lexer.dot  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
